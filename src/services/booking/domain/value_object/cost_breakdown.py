from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class CostBreakdown:
    """料金内訳（予約作成時に一度だけ計算されるスナップショット）"""

    vehicle_rent_per_day: Money
    total_vehicle_rent: Money
    km_based_charge: Money
    food_cost: Money
    driver_charges: Money
    accommodation_cost: Money
    discount_amount: Money
    subtotal: Money
    gst: Money
    total_amount: Money

    def __post_init__(self) -> None:
        expected_subtotal = (
            self.total_vehicle_rent.amount
            + self.km_based_charge.amount
            + self.food_cost.amount
            + self.driver_charges.amount
            + self.accommodation_cost.amount
            - self.discount_amount.amount
        )
        if self.subtotal.amount != expected_subtotal:
            raise ValueError("Subtotal does not match the line items")
        if self.total_amount.amount != self.subtotal.amount + self.gst.amount:
            raise ValueError("Total amount must equal subtotal plus GST")


@dataclass(frozen=True)
class Quote:
    """見積もり結果（内訳 + 前払い額 + 残額）"""

    number_of_days: int
    cost_breakdown: CostBreakdown
    advance_amount: Money
    remaining_amount: Money

    def __post_init__(self) -> None:
        if (
            self.advance_amount.amount + self.remaining_amount.amount
            != self.cost_breakdown.total_amount.amount
        ):
            raise ValueError("Advance and remaining amounts must add up to total")

    @property
    def total_amount(self) -> Money:
        return self.cost_breakdown.total_amount
