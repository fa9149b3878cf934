from dataclasses import dataclass

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが変更された"""

    booking_id: BookingId
    previous_status: BookingStatus
    new_status: BookingStatus
    reason: str | None = None
