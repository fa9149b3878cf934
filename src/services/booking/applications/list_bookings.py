from services.booking.applications.actor_driver import resolve_driver_id
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.catalog.domain.repository import DriverRepository
from services.shared.domain import Actor, Capability


class ListBookingsService:
    """予約一覧取得ユースケース

    管理者は全件、ドライバーは担当分、顧客は自分の予約のみ。
    """

    def __init__(
        self, repository: BookingRepository, driver_repository: DriverRepository
    ) -> None:
        self._repository = repository
        self._driver_repository = driver_repository

    def list(self, actor: Actor) -> list[Booking]:
        if actor.can(Capability.VIEW_ANY_BOOKING):
            return self._repository.find_all()

        if actor.can(Capability.SELF_TRANSITION_ASSIGNED_BOOKING):
            driver_id = resolve_driver_id(actor, self._driver_repository)
            if driver_id is None:
                return []
            return self._repository.find_by_driver_id(driver_id)

        return self._repository.find_by_user_id(actor.user_id)
