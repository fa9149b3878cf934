from .booking_factory import (
    BookingDetails,
    BookingFactory,
    FoodPreferenceDetails,
    PassengerDetails,
    to_food_preferences,
)

__all__ = [
    "BookingDetails",
    "BookingFactory",
    "FoodPreferenceDetails",
    "PassengerDetails",
    "to_food_preferences",
]
