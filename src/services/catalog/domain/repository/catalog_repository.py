from abc import abstractmethod

from services.catalog.domain.entity import Driver, Tour, Vehicle
from services.catalog.domain.value_object import DriverId, TourId, VehicleId
from services.shared.domain import Repository


class TourRepository(Repository[Tour, TourId]):
    """ツアーリポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, tour_id: TourId) -> Tour | None:
        """ツアーIDで検索する"""
        raise NotImplementedError


class VehicleRepository(Repository[Vehicle, VehicleId]):
    """車両リポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, vehicle_id: VehicleId) -> Vehicle | None:
        """車両IDで検索する"""
        raise NotImplementedError


class DriverRepository(Repository[Driver, DriverId]):
    """ドライバーリポジトリのインターフェース"""

    @abstractmethod
    def find_by_id(self, driver_id: DriverId) -> Driver | None:
        """ドライバーIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> Driver | None:
        """ログインユーザーに紐づくドライバープロフィールを検索する"""
        raise NotImplementedError
