from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.estimate_cost import EstimateCostService
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.service import PricingCalculator
from services.catalog.domain.value_object import DriverId
from services.shared.domain.exception import (
    InvalidDateRangeException,
    ResourceNotFoundException,
    ValidationException,
)


class TestCreateBookingService:
    @pytest.fixture
    def booking_details(self) -> BookingDetails:
        return {
            "tour_id": "tour-ooty",
            "vehicle_id": "vehicle-van-01",
            "start_date": "2026-02-15",
            "end_date": "2026-02-18",
            "number_of_passengers": 2,
            "passengers": [
                {"name": "Asha", "age": 31, "email": "asha@example.com"},
                {"name": "Ravi", "age": 33, "gender": "male"},
            ],
            "estimated_kms": Decimal("150"),
            "food_preferences": {"breakfast": True, "dinner": True},
            "special_requests": "Window seats please",
        }

    @pytest.fixture
    def service(self, mock_repository, tour, vehicle, driver):
        tour_repository = MagicMock()
        tour_repository.find_by_id.return_value = tour
        vehicle_repository = MagicMock()
        vehicle_repository.find_by_id.return_value = vehicle
        driver_repository = MagicMock()
        driver_repository.find_by_id.return_value = driver

        estimator = EstimateCostService(
            tour_repository=tour_repository,
            vehicle_repository=vehicle_repository,
            calculator=PricingCalculator(),
        )
        return CreateBookingService(
            repository=mock_repository,
            driver_repository=driver_repository,
            estimator=estimator,
            factory=BookingFactory(),
        )

    def test_create_prices_and_saves_booking(
        self, service, mock_repository, customer, booking_details
    ):
        """料金が計算され、Repository に保存され、Entity が返される"""

        # Act
        booking = service.create(customer, booking_details)

        # Assert
        assert isinstance(booking, Booking)
        assert booking.user_id == customer.user_id
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.payment_status == BookingPaymentStatus.PENDING
        assert booking.number_of_days == 3
        assert booking.quote.total_amount.amount == Decimal("13629")
        assert booking.quote.remaining_amount.amount == Decimal("9540")
        assert booking.passengers[1].gender == "male"
        assert booking.driver_id is None

        mock_repository.save.assert_called_once_with(booking)

    def test_create_with_driver(self, service, customer, booking_details):
        booking_details["driver_id"] = "driver-001"
        booking = service.create(customer, booking_details)
        assert booking.driver_id == DriverId(value="driver-001")

    def test_unknown_driver_raises_not_found(
        self, service, mock_repository, customer, booking_details
    ):
        booking_details["driver_id"] = "driver-404"
        service._driver_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException, match="Driver not found"):
            service.create(customer, booking_details)
        mock_repository.save.assert_not_called()

    def test_passenger_count_mismatch_raises_validation_error(
        self, service, mock_repository, customer, booking_details
    ):
        booking_details["number_of_passengers"] = 3

        with pytest.raises(ValidationException):
            service.create(customer, booking_details)
        mock_repository.save.assert_not_called()

    def test_invalid_period_is_rejected_before_pricing(
        self, service, mock_repository, customer, booking_details
    ):
        booking_details["end_date"] = "2026-02-14"

        with pytest.raises(InvalidDateRangeException):
            service.create(customer, booking_details)
        mock_repository.save.assert_not_called()

    def test_each_booking_gets_its_own_reference(
        self, service, customer, booking_details
    ):
        first = service.create(customer, booking_details)
        second = service.create(customer, booking_details)
        assert first.id != second.id
