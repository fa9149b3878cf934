from decimal import Decimal

from services.booking.domain.value_object import CostBreakdown, PricingPolicy, Quote
from services.shared.domain import Money


class PricingCalculator:
    """予約料金の計算（副作用なし）

    予約作成時と事前見積もりの両方がこの計算を使う。
    """

    def __init__(self, policy: PricingPolicy | None = None) -> None:
        self._policy = policy or PricingPolicy()

    @property
    def policy(self) -> PricingPolicy:
        return self._policy

    def calculate(
        self,
        daily_rate: Money,
        rate_per_km: Money,
        number_of_days: int,
        estimated_kms: Decimal,
        food_active: bool,
        number_of_passengers: int,
    ) -> Quote:
        """料金内訳・前払い額・残額を計算する"""
        if number_of_days < 1:
            raise ValueError("number_of_days must be at least 1")
        if estimated_kms < 0:
            raise ValueError("estimated_kms cannot be negative")
        if number_of_passengers < 1:
            raise ValueError("number_of_passengers must be at least 1")

        policy = self._policy
        currency = daily_rate.currency
        zero = Money.zero(currency)

        total_vehicle_rent = daily_rate.multiply(number_of_days)
        km_based_charge = rate_per_km.multiply(estimated_kms)

        food_cost = zero
        if food_active:
            food_cost = Money(policy.food_cost_per_day, currency).multiply(
                number_of_days
            )
            if policy.food_per_passenger:
                food_cost = food_cost.multiply(number_of_passengers)

        driver_charges = Money(policy.driver_charge_per_day, currency).multiply(
            number_of_days
        )
        accommodation_cost = zero
        discount_amount = zero

        subtotal = (
            total_vehicle_rent.add(km_based_charge)
            .add(food_cost)
            .add(driver_charges)
            .add(accommodation_cost)
            .subtract(discount_amount)
        )
        gst = subtotal.multiply(policy.gst_rate)
        total_amount = subtotal.add(gst)

        breakdown = CostBreakdown(
            vehicle_rent_per_day=daily_rate,
            total_vehicle_rent=total_vehicle_rent,
            km_based_charge=km_based_charge,
            food_cost=food_cost,
            driver_charges=driver_charges,
            accommodation_cost=accommodation_cost,
            discount_amount=discount_amount,
            subtotal=subtotal,
            gst=gst,
            total_amount=total_amount,
        )

        advance_amount = total_amount.multiply(policy.advance_ratio).rounded()
        remaining_amount = total_amount.subtract(advance_amount)

        return Quote(
            number_of_days=number_of_days,
            cost_breakdown=breakdown,
            advance_amount=advance_amount,
            remaining_amount=remaining_amount,
        )
