from .entity import Driver as Driver
from .entity import Tour as Tour
from .entity import Vehicle as Vehicle
from .enum import DriverStatus as DriverStatus
from .enum import VehicleStatus as VehicleStatus
from .enum import VehicleType as VehicleType
from .repository import DriverRepository as DriverRepository
from .repository import TourRepository as TourRepository
from .repository import VehicleRepository as VehicleRepository
from .value_object import DriverId as DriverId
from .value_object import TourId as TourId
from .value_object import VehicleId as VehicleId
