from .driver_id import DriverId
from .tour_id import TourId
from .vehicle_id import VehicleId

__all__ = ["TourId", "VehicleId", "DriverId"]
