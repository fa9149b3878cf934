from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING は管理者の確認待ちの状態として扱う（新規予約の初期値は CONFIRMED）。
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
