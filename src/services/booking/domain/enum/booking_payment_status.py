from enum import Enum


class BookingPaymentStatus(str, Enum):
    """予約の支払い状況（決済サービス側から更新される）

    定義順が進行順（pending → advance-paid → partial-paid → completed）。
    """

    PENDING = "pending"
    ADVANCE_PAID = "advance-paid"
    PARTIAL_PAID = "partial-paid"
    COMPLETED = "completed"

    @property
    def rank(self) -> int:
        return list(BookingPaymentStatus).index(self)

    def is_ahead_of(self, other: "BookingPaymentStatus") -> bool:
        return self.rank > other.rank
