from decimal import Decimal
from typing import NotRequired, TypedDict

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity.payment import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus, PaymentType
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Currency, Money, ValidationException


class PaymentDetails(TypedDict):
    """決済の入力データ構造（TypedDict）"""

    amount: Decimal
    currency_code: str
    method: str
    payment_type: str
    transaction_id: NotRequired[str | None]


class PaymentFactory:
    """決済ファクトリ"""

    def create(
        self,
        booking_id: BookingId,
        user_id: str,
        payment_details: PaymentDetails,
    ) -> Payment:
        """新規決済エンティティを生成する"""
        amount = payment_details["amount"]
        if amount <= 0:
            raise ValidationException("Payment amount must be greater than zero")

        money = Money(
            amount=amount,
            currency=Currency(payment_details["currency_code"]),
        )

        return Payment(
            id=PaymentId.generate(),
            booking_id=booking_id,
            user_id=user_id,
            amount=money,
            method=PaymentMethod(payment_details["method"]),
            payment_type=PaymentType(payment_details["payment_type"]),
            transaction_id=payment_details.get("transaction_id"),
            status=PaymentStatus.PENDING,
        )
