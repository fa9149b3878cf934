from services.catalog.domain.enum import VehicleStatus, VehicleType
from services.catalog.domain.value_object import VehicleId
from services.shared.domain import Entity, Money


class Vehicle(Entity[VehicleId]):
    """車両（料金計算で参照する日額・km 単価を持つ）"""

    def __init__(
        self,
        id: VehicleId,
        registration_number: str,
        vehicle_type: VehicleType,
        model: str,
        capacity: int,
        daily_rate_per_day: Money,
        rate_per_km: Money,
        status: VehicleStatus = VehicleStatus.AVAILABLE,
    ) -> None:
        super().__init__(id)
        if capacity < 1:
            raise ValueError("Vehicle capacity must be at least 1")
        if daily_rate_per_day.currency != rate_per_km.currency:
            raise ValueError("Vehicle rates must share the same currency")
        self._registration_number = registration_number
        self._vehicle_type = vehicle_type
        self._model = model
        self._capacity = capacity
        self._daily_rate_per_day = daily_rate_per_day
        self._rate_per_km = rate_per_km
        self._status = status

    @property
    def registration_number(self) -> str:
        return self._registration_number

    @property
    def vehicle_type(self) -> VehicleType:
        return self._vehicle_type

    @property
    def model(self) -> str:
        return self._model

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def daily_rate_per_day(self) -> Money:
        return self._daily_rate_per_day

    @property
    def rate_per_km(self) -> Money:
        return self._rate_per_km

    @property
    def status(self) -> VehicleStatus:
        return self._status
