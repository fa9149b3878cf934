from enum import Enum


class VehicleStatus(str, Enum):
    """車両ステータス（表示用。予約時には強制しない）"""

    AVAILABLE = "available"
    BOOKED = "booked"
    MAINTENANCE = "maintenance"
