from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.applications.estimate_cost import (
    EstimateCostService,
    EstimateDetails,
)
from services.booking.domain.service import PricingCalculator
from services.shared.domain.exception import (
    InvalidDateRangeException,
    ResourceNotFoundException,
)


class TestEstimateCostService:
    @pytest.fixture
    def estimate_details(self) -> EstimateDetails:
        return {
            "tour_id": "tour-ooty",
            "vehicle_id": "vehicle-van-01",
            "start_date": "2026-02-15",
            "end_date": "2026-02-18",
            "number_of_passengers": 2,
            "estimated_kms": Decimal("150"),
            "food_preferences": {"lunch": True},
        }

    @pytest.fixture
    def service(self, tour, vehicle):
        tour_repository = MagicMock()
        tour_repository.find_by_id.return_value = tour
        vehicle_repository = MagicMock()
        vehicle_repository.find_by_id.return_value = vehicle
        return EstimateCostService(
            tour_repository=tour_repository,
            vehicle_repository=vehicle_repository,
            calculator=PricingCalculator(),
        )

    def test_estimate_uses_vehicle_rates(self, service, estimate_details):
        quote = service.estimate(estimate_details)

        assert quote.number_of_days == 3
        assert quote.total_amount.amount == Decimal("13629")
        assert quote.advance_amount.amount == Decimal("4089")

    def test_no_food_selected(self, service, estimate_details):
        estimate_details["food_preferences"] = {"special_diets": ["vegan"]}
        quote = service.estimate(estimate_details)
        assert quote.cost_breakdown.food_cost.is_zero()

    def test_missing_vehicle_raises_not_found(self, service, estimate_details):
        service._vehicle_repository.find_by_id.return_value = None
        with pytest.raises(ResourceNotFoundException, match="Vehicle not found"):
            service.estimate(estimate_details)

    def test_missing_tour_raises_not_found(self, service, estimate_details):
        service._tour_repository.find_by_id.return_value = None
        with pytest.raises(ResourceNotFoundException, match="Tour not found"):
            service.estimate(estimate_details)

    def test_same_day_raises_invalid_date_range(self, service, estimate_details):
        estimate_details["end_date"] = estimate_details["start_date"]
        with pytest.raises(InvalidDateRangeException):
            service.estimate(estimate_details)
