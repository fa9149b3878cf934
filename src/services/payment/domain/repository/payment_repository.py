from abc import abstractmethod

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity.payment import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """決済を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約に紐づく決済を古い順に返す"""
        raise NotImplementedError
