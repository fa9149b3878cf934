from services.booking.applications.actor_driver import resolve_driver_id
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.catalog.domain.repository import DriverRepository
from services.shared.domain import Actor
from services.shared.domain.exception import ResourceNotFoundException


class GetBookingService:
    """予約詳細取得ユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        driver_repository: DriverRepository,
        policy: BookingAccessPolicy,
    ) -> None:
        self._repository = repository
        self._driver_repository = driver_repository
        self._policy = policy

    def get(self, actor: Actor, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        driver_id = resolve_driver_id(actor, self._driver_repository)
        self._policy.authorize_view(actor, booking, driver_id)
        return booking
