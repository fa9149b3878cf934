from services.catalog.domain.enum import DriverStatus
from services.catalog.domain.value_object import DriverId
from services.shared.domain import Entity


class Driver(Entity[DriverId]):
    """ドライバープロフィール（user_id でログインアカウントと紐づく）"""

    def __init__(
        self,
        id: DriverId,
        user_id: str,
        license_number: str,
        status: DriverStatus = DriverStatus.ACTIVE,
    ) -> None:
        super().__init__(id)
        if not user_id:
            raise ValueError("Driver must be linked to a user account")
        self._user_id = user_id
        self._license_number = license_number
        self._status = status

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def license_number(self) -> str:
        return self._license_number

    @property
    def status(self) -> DriverStatus:
        return self._status
