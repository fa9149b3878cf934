from .booking_payment_status import BookingPaymentStatus
from .booking_status import BookingStatus

__all__ = ["BookingStatus", "BookingPaymentStatus"]
