from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from services.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    料金は INR で計算する。USD は海外からの支払い記録用。
    """

    SYMBOLS: ClassVar[dict[str, str]] = {"INR": "₹", "USD": "$"}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SYMBOLS:
            raise ValidationException(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SYMBOLS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        return self.SYMBOLS[self.code]

    @classmethod
    def inr(cls) -> Currency:
        return cls("INR")

    @classmethod
    def usd(cls) -> Currency:
        return cls("USD")
