from __future__ import annotations

from pydantic import BaseModel

from services.payment.domain.entity.payment import Payment


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    payment_id: str
    booking_id: str
    user_id: str
    amount: str
    currency: str
    payment_method: str
    payment_type: str
    transaction_id: str | None
    status: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentData | list[PaymentData]


def to_payment_data(payment: Payment) -> PaymentData:
    return PaymentData(
        payment_id=str(payment.id),
        booking_id=str(payment.booking_id),
        user_id=payment.user_id,
        amount=str(payment.amount.amount),
        currency=str(payment.amount.currency),
        payment_method=payment.method.value,
        payment_type=payment.payment_type.value,
        transaction_id=payment.transaction_id,
        status=payment.status.value,
        created_at=str(payment.created_at),
    )


def to_response(payment: Payment) -> dict:
    """Payment エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_payment_data(payment)).model_dump()


def to_list_response(payments: list[Payment]) -> dict:
    return SuccessResponse(data=[to_payment_data(p) for p in payments]).model_dump()
