from .catalog_repository import DriverRepository, TourRepository, VehicleRepository

__all__ = ["TourRepository", "VehicleRepository", "DriverRepository"]
