from services.booking.applications.update_booking_status import persist_transition
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.shared.domain import Actor
from services.shared.domain.exception import ResourceNotFoundException


class CancelBookingService:
    """予約キャンセルユースケース（所有者または管理者、理由必須）"""

    def __init__(
        self, repository: BookingRepository, policy: BookingAccessPolicy
    ) -> None:
        self._repository = repository
        self._policy = policy

    def cancel(
        self, actor: Actor, booking_id: BookingId, reason: str | None
    ) -> Booking:
        """予約をキャンセルする"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        self._policy.authorize_cancel(actor, booking)

        expected_status = booking.status
        booking.cancel(reason)
        persist_transition(self._repository, booking, expected_status)
        return booking
