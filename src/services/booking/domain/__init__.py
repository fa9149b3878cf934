from .entity import Booking as Booking
from .enum import BookingPaymentStatus as BookingPaymentStatus
from .enum import BookingStatus as BookingStatus
from .event import BookingStatusChanged as BookingStatusChanged
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .service import BookingAccessPolicy as BookingAccessPolicy
from .service import PricingCalculator as PricingCalculator
from .value_object import BookingId as BookingId
from .value_object import CostBreakdown as CostBreakdown
from .value_object import FoodPreferences as FoodPreferences
from .value_object import Passenger as Passenger
from .value_object import PricingPolicy as PricingPolicy
from .value_object import Quote as Quote
from .value_object import TravelPeriod as TravelPeriod
