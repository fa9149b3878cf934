from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain import Currency


def _env_decimal(name: str, default: str) -> Decimal:
    return Decimal(os.getenv(name, default))


@dataclass(frozen=True)
class PricingPolicy:
    """料金計算の定数（GST 率・前払い率・日額の固定料金）"""

    gst_rate: Decimal = Decimal("0.18")
    advance_ratio: Decimal = Decimal("0.30")
    food_cost_per_day: Decimal = Decimal("500")
    driver_charge_per_day: Decimal = Decimal("200")
    food_per_passenger: bool = True
    currency: Currency = Currency.inr()

    @classmethod
    def from_env(cls) -> PricingPolicy:
        """環境変数で上書きした料金ポリシーを生成する"""
        default = cls()
        return cls(
            gst_rate=_env_decimal("PRICING_GST_RATE", str(default.gst_rate)),
            advance_ratio=_env_decimal(
                "PRICING_ADVANCE_RATIO", str(default.advance_ratio)
            ),
            food_cost_per_day=_env_decimal(
                "PRICING_FOOD_COST_PER_DAY", str(default.food_cost_per_day)
            ),
            driver_charge_per_day=_env_decimal(
                "PRICING_DRIVER_CHARGE_PER_DAY", str(default.driver_charge_per_day)
            ),
            food_per_passenger=os.getenv("PRICING_FOOD_PER_PASSENGER", "true").lower()
            in ("1", "true", "yes"),
        )
