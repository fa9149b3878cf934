from __future__ import annotations

from typing import TYPE_CHECKING

from services.booking.domain.enum import BookingStatus
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Actor, Capability
from services.shared.domain.exception import ForbiddenException

if TYPE_CHECKING:
    from services.booking.domain.entity.booking import Booking


DRIVER_TARGETS = frozenset({BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED})


class BookingAccessPolicy:
    """予約に対する認可判定

    ロール名では分岐せず、Actor の権限セットだけで判定する。
    driver_id は操作主体に紐づくドライバープロフィールの ID（なければ None）。
    """

    def authorize_status_change(
        self,
        actor: Actor,
        booking: Booking,
        target: BookingStatus,
        driver_id: DriverId | None = None,
    ) -> None:
        """ステータス変更の権限を検証する（状態の前提条件は別途検証する）"""
        if actor.can(Capability.FORCE_ANY_TRANSITION):
            return

        if actor.can(Capability.SELF_TRANSITION_ASSIGNED_BOOKING):
            if driver_id is None:
                raise ForbiddenException("No driver profile linked to this account")
            if not booking.is_assigned_to(driver_id):
                raise ForbiddenException("Booking is not assigned to this driver")
            if target not in DRIVER_TARGETS:
                raise ForbiddenException(
                    f"Drivers cannot set booking status to {target.value}"
                )
            return

        if actor.can(Capability.CANCEL_OWN_BOOKING):
            if target != BookingStatus.CANCELLED:
                raise ForbiddenException(
                    f"Customers cannot set booking status to {target.value}"
                )
            if not booking.is_owned_by(actor.user_id):
                raise ForbiddenException("Not your booking")
            return

        raise ForbiddenException("Not allowed to change booking status")

    def authorize_cancel(self, actor: Actor, booking: Booking) -> None:
        """キャンセル権限を検証する（所有者または管理者）"""
        if actor.can(Capability.FORCE_ANY_TRANSITION):
            return
        if actor.can(Capability.CANCEL_OWN_BOOKING) and booking.is_owned_by(
            actor.user_id
        ):
            return
        raise ForbiddenException("Not your booking")

    def authorize_assign_driver(self, actor: Actor) -> None:
        if not actor.can(Capability.ASSIGN_DRIVER):
            raise ForbiddenException("Only administrators can assign drivers")

    def authorize_view(
        self, actor: Actor, booking: Booking, driver_id: DriverId | None = None
    ) -> None:
        """閲覧権限を検証する（所有者・担当ドライバー・管理者）"""
        if actor.can(Capability.VIEW_ANY_BOOKING):
            return
        if booking.is_owned_by(actor.user_id):
            return
        if driver_id is not None and booking.is_assigned_to(driver_id):
            return
        raise ForbiddenException("Not allowed to view this booking")

    def authorize_payment(self, actor: Actor, booking: Booking) -> None:
        """支払い記録の権限を検証する（所有者または管理者）"""
        if actor.can(Capability.RECORD_ANY_PAYMENT):
            return
        if booking.is_owned_by(actor.user_id):
            return
        raise ForbiddenException("Not your booking")
