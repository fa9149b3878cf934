from services.booking.applications.actor_driver import resolve_driver_id
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.catalog.domain.repository import DriverRepository
from services.payment.domain.entity import Payment
from services.payment.domain.repository import PaymentRepository
from services.shared.domain import Actor
from services.shared.domain.exception import ResourceNotFoundException


class ListPaymentsService:
    """予約の支払い履歴取得ユースケース（閲覧権限は予約詳細と同じ）"""

    def __init__(
        self,
        repository: PaymentRepository,
        booking_repository: BookingRepository,
        driver_repository: DriverRepository,
        policy: BookingAccessPolicy,
    ) -> None:
        self._repository = repository
        self._booking_repository = booking_repository
        self._driver_repository = driver_repository
        self._policy = policy

    def list(self, actor: Actor, booking_id: BookingId) -> list[Payment]:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        driver_id = resolve_driver_id(actor, self._driver_repository)
        self._policy.authorize_view(actor, booking, driver_id)
        return self._repository.find_by_booking_id(booking_id)
