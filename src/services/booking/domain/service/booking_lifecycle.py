from services.booking.domain.enum import BookingStatus
from services.shared.domain.exception import InvalidTransitionException

ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED}
    ),
    BookingStatus.IN_PROGRESS: frozenset(
        {BookingStatus.COMPLETED, BookingStatus.CANCELLED}
    ),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    """current -> target の遷移が許可されているかどうか"""
    return target in ALLOWED_TRANSITIONS[current]


def validate_transition(current: BookingStatus, target: BookingStatus) -> None:
    """遷移を検証する

    同じステータスへの再遷移も許可しない（厳密に前進のみ）。
    """
    if not can_transition(current, target):
        raise InvalidTransitionException(current=current.value, target=target.value)
