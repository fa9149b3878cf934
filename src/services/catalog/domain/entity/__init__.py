from .driver import Driver
from .tour import Tour
from .vehicle import Vehicle

__all__ = ["Tour", "Vehicle", "Driver"]
