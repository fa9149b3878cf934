from .booking_id import BookingId
from .cost_breakdown import CostBreakdown, Quote
from .food_preferences import FoodPreferences
from .passenger import Passenger
from .pricing_policy import PricingPolicy
from .travel_period import TravelPeriod

__all__ = [
    "BookingId",
    "CostBreakdown",
    "Quote",
    "FoodPreferences",
    "Passenger",
    "PricingPolicy",
    "TravelPeriod",
]
