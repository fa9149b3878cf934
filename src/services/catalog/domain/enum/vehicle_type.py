from enum import Enum


class VehicleType(str, Enum):
    """車両種別"""

    BUS = "bus"
    VAN = "van"
    TEMPO = "tempo"
