from services.catalog.domain.repository import DriverRepository
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Actor, Capability


def resolve_driver_id(
    actor: Actor, driver_repository: DriverRepository
) -> DriverId | None:
    """操作主体に紐づくドライバープロフィールの ID を返す（該当しなければ None）"""
    if not actor.can(Capability.SELF_TRANSITION_ASSIGNED_BOOKING):
        return None
    driver = driver_repository.find_by_user_id(actor.user_id)
    return driver.id if driver else None
