from enum import Enum


class Role(str, Enum):
    """利用者ロール"""

    CUSTOMER = "customer"
    DRIVER = "driver"
    ADMIN = "admin"
