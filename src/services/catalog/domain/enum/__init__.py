from .driver_status import DriverStatus
from .vehicle_status import VehicleStatus
from .vehicle_type import VehicleType

__all__ = ["DriverStatus", "VehicleStatus", "VehicleType"]
