from enum import Enum

from .role import Role


class Capability(str, Enum):
    """操作権限

    認可判定はロール名ではなく、この権限セットに対して行う。
    """

    ASSIGN_DRIVER = "can-assign-driver"
    FORCE_ANY_TRANSITION = "can-force-any-transition"
    SELF_TRANSITION_ASSIGNED_BOOKING = "can-self-transition-assigned-booking"
    CANCEL_OWN_BOOKING = "can-cancel-own-booking"
    VIEW_ANY_BOOKING = "can-view-any-booking"
    RECORD_ANY_PAYMENT = "can-record-any-payment"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset(
        {
            Capability.ASSIGN_DRIVER,
            Capability.FORCE_ANY_TRANSITION,
            Capability.CANCEL_OWN_BOOKING,
            Capability.VIEW_ANY_BOOKING,
            Capability.RECORD_ANY_PAYMENT,
        }
    ),
    Role.DRIVER: frozenset({Capability.SELF_TRANSITION_ASSIGNED_BOOKING}),
    Role.CUSTOMER: frozenset({Capability.CANCEL_OWN_BOOKING}),
}
