from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.payment.domain.enum import PaymentMethod, PaymentType
from services.shared.utils.validators import to_decimal


class RecordPaymentRequest(BaseModel):
    """支払い記録リクエストモデル"""

    amount: Decimal = Field(
        ...,
        gt=0,
        description="支払い金額（0より大きい値）",
    )
    currency: str = Field(
        default="INR",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )
    payment_method: PaymentMethod
    payment_type: PaymentType
    transaction_id: str | None = Field(default=None, max_length=128)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)
