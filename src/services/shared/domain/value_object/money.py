from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from services.shared.domain.exception import ValidationException

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    計算途中では丸めを行わない。丸めが必要な箇所は呼び出し側が
    rounded() を明示的に使う。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.currency.symbol}{self.amount}"

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine money with different currencies")

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """係数を掛ける"""
        return Money(amount=self.amount * Decimal(factor), currency=self.currency)

    def rounded(self) -> Money:
        """通貨単位の整数に四捨五入する

        Decimal の精度を超える金額は ValidationException。
        """
        try:
            amount = self.amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise ValidationException(
                f"Amount is too large to round: {self.amount}"
            ) from e
        return Money(amount=amount, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)

    @classmethod
    def inr(cls, amount: Decimal | int | str) -> Money:
        """インドルピーで Money を生成"""
        return cls(Decimal(str(amount)), Currency.inr())
