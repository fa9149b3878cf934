from decimal import Decimal
from typing import TypedDict

from services.booking.domain.factory import FoodPreferenceDetails, to_food_preferences
from services.booking.domain.service import PricingCalculator
from services.booking.domain.value_object import Quote, TravelPeriod
from services.catalog.domain.repository import TourRepository, VehicleRepository
from services.catalog.domain.value_object import TourId, VehicleId
from services.shared.domain.exception import ResourceNotFoundException


class EstimateDetails(TypedDict):
    """見積もりの入力データ"""

    tour_id: str
    vehicle_id: str
    start_date: str
    end_date: str
    number_of_passengers: int
    estimated_kms: Decimal
    food_preferences: FoodPreferenceDetails


class EstimateCostService:
    """料金見積もりユースケース（永続化しない）

    予約作成もこのサービスを経由して料金を計算する。
    """

    def __init__(
        self,
        tour_repository: TourRepository,
        vehicle_repository: VehicleRepository,
        calculator: PricingCalculator,
    ) -> None:
        self._tour_repository = tour_repository
        self._vehicle_repository = vehicle_repository
        self._calculator = calculator

    def estimate(self, details: EstimateDetails) -> Quote:
        """期間を検証し、車両の料金から見積もりを計算する"""
        travel_period = TravelPeriod(
            start=details["start_date"], end=details["end_date"]
        )
        return self.estimate_for_period(details, travel_period)

    def estimate_for_period(
        self, details: EstimateDetails, travel_period: TravelPeriod
    ) -> Quote:
        tour = self._tour_repository.find_by_id(TourId(value=details["tour_id"]))
        if tour is None:
            raise ResourceNotFoundException(f"Tour not found: {details['tour_id']}")

        vehicle = self._vehicle_repository.find_by_id(
            VehicleId(value=details["vehicle_id"])
        )
        if vehicle is None:
            raise ResourceNotFoundException(
                f"Vehicle not found: {details['vehicle_id']}"
            )

        food_preferences = to_food_preferences(details.get("food_preferences"))
        return self._calculator.calculate(
            daily_rate=vehicle.daily_rate_per_day,
            rate_per_km=vehicle.rate_per_km,
            number_of_days=travel_period.number_of_days(),
            estimated_kms=details["estimated_kms"],
            food_active=food_preferences.is_active,
            number_of_passengers=details["number_of_passengers"],
        )
