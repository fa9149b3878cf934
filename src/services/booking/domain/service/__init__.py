from .booking_access_policy import BookingAccessPolicy
from .booking_lifecycle import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    can_transition,
    validate_transition,
)
from .pricing_calculator import PricingCalculator

__all__ = [
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "BookingAccessPolicy",
    "PricingCalculator",
    "can_transition",
    "validate_transition",
]
