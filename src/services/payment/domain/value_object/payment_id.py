from __future__ import annotations

from dataclasses import dataclass

from services.shared.domain.value_object.reference import generate_reference

PAYMENT_PREFIX = "PAY"


@dataclass(frozen=True)
class PaymentId:
    """決済ID（Value Object）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PaymentId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=generate_reference(PAYMENT_PREFIX))
