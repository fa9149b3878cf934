from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.catalog.domain.repository import DriverRepository
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Actor
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class AssignDriverService:
    """ドライバー割当ユースケース（管理者のみ）"""

    def __init__(
        self,
        repository: BookingRepository,
        driver_repository: DriverRepository,
        policy: BookingAccessPolicy,
    ) -> None:
        self._repository = repository
        self._driver_repository = driver_repository
        self._policy = policy

    def assign(
        self, actor: Actor, booking_id: BookingId, driver_id: DriverId
    ) -> Booking:
        """予約にドライバーを割り当てる"""
        self._policy.authorize_assign_driver(actor)

        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        if self._driver_repository.find_by_id(driver_id) is None:
            raise ResourceNotFoundException(f"Driver not found: {driver_id}")

        booking.assign_driver(driver_id)
        self._repository.update_driver(booking)

        logger.info(
            "Driver assigned",
            extra={"booking_id": str(booking.id), "driver_id": str(driver_id)},
        )
        return booking
