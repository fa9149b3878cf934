from enum import Enum

from services.booking.domain.enum import BookingPaymentStatus


class PaymentType(str, Enum):
    """支払い種別"""

    ADVANCE = "advance"
    PARTIAL = "partial"
    BALANCE = "balance"
    FULL = "full"

    @property
    def booking_payment_status(self) -> BookingPaymentStatus:
        """この支払いの記録後に予約が取る支払い状況"""
        return _BOOKING_PAYMENT_STATUS[self]


_BOOKING_PAYMENT_STATUS = {
    PaymentType.ADVANCE: BookingPaymentStatus.ADVANCE_PAID,
    PaymentType.PARTIAL: BookingPaymentStatus.PARTIAL_PAID,
    PaymentType.BALANCE: BookingPaymentStatus.COMPLETED,
    PaymentType.FULL: BookingPaymentStatus.COMPLETED,
}
