from enum import Enum


class DriverStatus(str, Enum):
    """ドライバーステータス"""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on-leave"
