from abc import abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を新規保存する（同じIDが存在する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> list[Booking]:
        """顧客の予約を新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_driver_id(self, driver_id: DriverId) -> list[Booking]:
        """ドライバーに割り当てられた予約を新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を新しい順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, booking: Booking, expected_status: BookingStatus) -> None:
        """ステータスを条件付きで更新する

        保存済みのステータスが expected_status と一致する場合のみ書き込む。
        一致しない場合は OptimisticLockException。
        """
        raise NotImplementedError

    @abstractmethod
    def update_driver(self, booking: Booking) -> None:
        """割り当てドライバーを更新する"""
        raise NotImplementedError

    @abstractmethod
    def update_payment_status(self, booking: Booking) -> None:
        """支払い状況を更新する

        保存済みの予約がキャンセル済み（または存在しない）場合は書き込まず、
        OptimisticLockException。
        """
        raise NotImplementedError
