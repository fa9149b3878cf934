from aws_lambda_powertools import Logger

from services.booking.applications.actor_driver import resolve_driver_id
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.catalog.domain.repository import DriverRepository
from services.shared.domain import Actor
from services.shared.domain.exception import (
    InvalidTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


def persist_transition(
    repository: BookingRepository,
    booking: Booking,
    expected_status: BookingStatus,
) -> None:
    """遷移後の予約を compare-and-swap で保存する

    読み出し後に他のリクエストがステータスを変えていた場合は
    InvalidTransitionException として扱う。
    """
    try:
        repository.update_status(booking, expected_status=expected_status)
    except OptimisticLockException as e:
        raise InvalidTransitionException(
            current=expected_status.value,
            target=booking.status.value,
            message=(
                f"Booking {booking.id} is no longer {expected_status.value}; "
                "status was changed by another request"
            ),
        ) from e

    for event in booking.flush_domain_events():
        logger.info(
            "Booking status changed",
            extra={
                "booking_id": str(event.booking_id),
                "previous_status": event.previous_status.value,
                "new_status": event.new_status.value,
            },
        )


class UpdateBookingStatusService:
    """予約ステータス更新ユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        driver_repository: DriverRepository,
        policy: BookingAccessPolicy,
    ) -> None:
        self._repository = repository
        self._driver_repository = driver_repository
        self._policy = policy

    def update_status(
        self,
        actor: Actor,
        booking_id: BookingId,
        target: BookingStatus,
        reason: str | None = None,
    ) -> Booking:
        """権限 → 遷移可否 → 条件付き書き込みの順に検証して更新する"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        driver_id = resolve_driver_id(actor, self._driver_repository)
        self._policy.authorize_status_change(actor, booking, target, driver_id)

        expected_status = booking.status
        booking.change_status(target, reason=reason)
        persist_transition(self._repository, booking, expected_status)
        return booking
