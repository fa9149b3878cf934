import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.catalog.domain.entity import Driver, Tour, Vehicle
from services.catalog.domain.enum import DriverStatus, VehicleStatus, VehicleType
from services.catalog.domain.repository import (
    DriverRepository,
    TourRepository,
    VehicleRepository,
)
from services.catalog.domain.value_object import DriverId, TourId, VehicleId
from services.shared.domain import Currency, Money
from services.shared.domain.exception import DuplicateResourceException

PROFILE_SK = "PROFILE"


class _DynamoDBCatalogTable:
    """カタログ系リポジトリ共通の DynamoDB アクセス"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def _put_new(self, item: dict, label: str) -> None:
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"{label} already exists") from e
            raise

    def _get_profile(self, pk: str) -> dict | None:
        response = self.table.get_item(
            Key={"PK": pk, "SK": PROFILE_SK},
            ConsistentRead=True,
        )
        return response.get("Item")


class DynamoDBTourRepository(_DynamoDBCatalogTable, TourRepository):
    """DynamoDBを使用したTourRepository の具象実装"""

    def save(self, tour: Tour) -> None:
        """ツアーを保存する"""
        item = {
            "PK": f"TOUR#{tour.id}",
            "SK": PROFILE_SK,
            "entity_type": "TOUR",
            "tour_id": str(tour.id),
            "name": tour.name,
            "location": tour.location,
            "area": tour.area,
            "duration_days": tour.duration_days,
            "base_price_per_day": str(tour.base_price_per_day.amount),
            "price_per_km": str(tour.price_per_km.amount),
            "currency": str(tour.base_price_per_day.currency),
        }
        self._put_new(item, f"Tour {tour.id}")

    def find_by_id(self, tour_id: TourId) -> Tour | None:
        """ツアーIDで検索"""
        item = self._get_profile(f"TOUR#{tour_id}")
        if not item:
            return None
        currency = Currency(item["currency"])
        return Tour(
            id=TourId(value=item["tour_id"]),
            name=item["name"],
            location=item["location"],
            area=item["area"],
            duration_days=int(item["duration_days"]),
            base_price_per_day=Money(Decimal(item["base_price_per_day"]), currency),
            price_per_km=Money(Decimal(item["price_per_km"]), currency),
        )


class DynamoDBVehicleRepository(_DynamoDBCatalogTable, VehicleRepository):
    """DynamoDBを使用したVehicleRepository の具象実装"""

    def save(self, vehicle: Vehicle) -> None:
        """車両を保存する"""
        item = {
            "PK": f"VEHICLE#{vehicle.id}",
            "SK": PROFILE_SK,
            "entity_type": "VEHICLE",
            "vehicle_id": str(vehicle.id),
            "registration_number": vehicle.registration_number,
            "vehicle_type": vehicle.vehicle_type.value,
            "model": vehicle.model,
            "capacity": vehicle.capacity,
            "daily_rate_per_day": str(vehicle.daily_rate_per_day.amount),
            "rate_per_km": str(vehicle.rate_per_km.amount),
            "currency": str(vehicle.daily_rate_per_day.currency),
            "status": vehicle.status.value,
        }
        self._put_new(item, f"Vehicle {vehicle.id}")

    def find_by_id(self, vehicle_id: VehicleId) -> Vehicle | None:
        """車両IDで検索"""
        item = self._get_profile(f"VEHICLE#{vehicle_id}")
        if not item:
            return None
        currency = Currency(item["currency"])
        return Vehicle(
            id=VehicleId(value=item["vehicle_id"]),
            registration_number=item["registration_number"],
            vehicle_type=VehicleType(item["vehicle_type"]),
            model=item["model"],
            capacity=int(item["capacity"]),
            daily_rate_per_day=Money(Decimal(item["daily_rate_per_day"]), currency),
            rate_per_km=Money(Decimal(item["rate_per_km"]), currency),
            status=VehicleStatus(item["status"]),
        )


class DynamoDBDriverRepository(_DynamoDBCatalogTable, DriverRepository):
    """DynamoDBを使用したDriverRepository の具象実装"""

    def save(self, driver: Driver) -> None:
        """ドライバーを保存する"""
        item = {
            "PK": f"DRIVER#{driver.id}",
            "SK": PROFILE_SK,
            "entity_type": "DRIVER",
            "driver_id": str(driver.id),
            "user_id": driver.user_id,
            "license_number": driver.license_number,
            "status": driver.status.value,
            "GSI2PK": f"USER#{driver.user_id}",
            "GSI2SK": f"DRIVER#{driver.id}",
        }
        self._put_new(item, f"Driver {driver.id}")

    def find_by_id(self, driver_id: DriverId) -> Driver | None:
        """ドライバーIDで検索"""
        item = self._get_profile(f"DRIVER#{driver_id}")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: str) -> Driver | None:
        """ユーザーIDに紐づくドライバープロフィールを検索する"""
        response = self.table.query(
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}")
            & Key("GSI2SK").begins_with("DRIVER#"),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def _to_entity(self, item: dict) -> Driver:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Driver(
            id=DriverId(value=item["driver_id"]),
            user_id=item["user_id"],
            license_number=item["license_number"],
            status=DriverStatus(item["status"]),
        )
