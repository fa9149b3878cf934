from aws_lambda_powertools import Logger

from services.booking.applications.estimate_cost import (
    EstimateCostService,
    EstimateDetails,
)
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import TravelPeriod
from services.catalog.domain.repository import DriverRepository
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Actor
from services.shared.domain.exception import (
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class CreateBookingService:
    """予約作成ユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        driver_repository: DriverRepository,
        estimator: EstimateCostService,
        factory: BookingFactory,
    ) -> None:
        self._repository = repository
        self._driver_repository = driver_repository
        self._estimator = estimator
        self._factory = factory

    def create(self, actor: Actor, booking_details: BookingDetails) -> Booking:
        """料金を計算して予約を作成・保存する"""
        passengers = booking_details["passengers"]
        if len(passengers) != booking_details["number_of_passengers"]:
            raise ValidationException(
                f"Expected {booking_details['number_of_passengers']} passengers, "
                f"got {len(passengers)}"
            )

        travel_period = TravelPeriod(
            start=booking_details["start_date"], end=booking_details["end_date"]
        )

        driver_id = booking_details.get("driver_id")
        if driver_id and (
            self._driver_repository.find_by_id(DriverId(driver_id)) is None
        ):
            raise ResourceNotFoundException(f"Driver not found: {driver_id}")

        estimate_details: EstimateDetails = {
            "tour_id": booking_details["tour_id"],
            "vehicle_id": booking_details["vehicle_id"],
            "start_date": booking_details["start_date"],
            "end_date": booking_details["end_date"],
            "number_of_passengers": booking_details["number_of_passengers"],
            "estimated_kms": booking_details["estimated_kms"],
            "food_preferences": booking_details.get("food_preferences", {}),
        }
        quote = self._estimator.estimate_for_period(estimate_details, travel_period)

        booking = self._factory.create(
            actor.user_id, booking_details, travel_period, quote
        )
        self._repository.save(booking)

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "number_of_days": booking.number_of_days,
                "total_amount": str(quote.total_amount.amount),
            },
        )
        return booking
