import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    CostBreakdown,
    FoodPreferences,
    Passenger,
    Quote,
    TravelPeriod,
)
from services.catalog.domain.value_object import DriverId, TourId, VehicleId
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

METADATA_SK = "METADATA"
ALL_BOOKINGS_PK = "BOOKINGS"

_COST_FIELDS = (
    "vehicle_rent_per_day",
    "total_vehicle_rent",
    "km_based_charge",
    "food_cost",
    "driver_charges",
    "accommodation_cost",
    "discount_amount",
    "subtotal",
    "gst",
    "total_amount",
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key=self._key(booking_id),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: str) -> list[Booking]:
        """顧客IDで予約を検索する"""
        items = self._query_all(
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}")
            & Key("GSI2SK").begins_with("BOOKING#"),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_by_driver_id(self, driver_id: DriverId) -> list[Booking]:
        """割り当てドライバーで予約を検索する"""
        items = self._query_all(
            IndexName="GSI3",
            KeyConditionExpression=Key("GSI3PK").eq(f"DRIVER#{driver_id}")
            & Key("GSI3SK").begins_with("BOOKING#"),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_all(self) -> list[Booking]:
        """全予約を取得する"""
        items = self._query_all(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(ALL_BOOKINGS_PK),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def update_status(self, booking: Booking, expected_status: BookingStatus) -> None:
        """ステータスを compare-and-swap で更新する"""
        try:
            self.table.update_item(
                Key=self._key(booking.id),
                UpdateExpression=(
                    "SET #status = :status, "
                    "cancellation_reason = :reason, "
                    "updated_at = :updated_at"
                ),
                ConditionExpression=Attr("PK").exists()
                & Attr("status").eq(expected_status.value),
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={
                    ":status": booking.status.value,
                    ":reason": booking.cancellation_reason,
                    ":updated_at": str(booking.updated_at),
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status.value}, "
                    f"booking_id={booking.id}"
                ) from e
            raise

    def update_driver(self, booking: Booking) -> None:
        """割り当てドライバーとドライバー別インデックスのキーを更新する"""
        self.table.update_item(
            Key=self._key(booking.id),
            UpdateExpression=(
                "SET driver_id = :driver_id, "
                "GSI3PK = :gsi3pk, "
                "GSI3SK = :gsi3sk, "
                "updated_at = :updated_at"
            ),
            ConditionExpression=Attr("PK").exists(),
            ExpressionAttributeValues={
                ":driver_id": str(booking.driver_id),
                ":gsi3pk": f"DRIVER#{booking.driver_id}",
                ":gsi3sk": self._driver_sort_key(booking),
                ":updated_at": str(booking.updated_at),
            },
        )

    def update_payment_status(self, booking: Booking) -> None:
        """支払い状況を更新する（キャンセル済みの予約には書き込まない）"""
        try:
            self.table.update_item(
                Key=self._key(booking.id),
                UpdateExpression="SET payment_status = :payment_status, "
                "updated_at = :updated_at",
                ConditionExpression=Attr("PK").exists()
                & Attr("status").ne(BookingStatus.CANCELLED.value),
                ExpressionAttributeValues={
                    ":payment_status": booking.payment_status.value,
                    ":updated_at": str(booking.updated_at),
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking was cancelled or removed: booking_id={booking.id}"
                ) from e
            raise

    def _query_all(self, **kwargs) -> list[dict]:
        """ページングを辿って全アイテムを取得する"""
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    @staticmethod
    def _key(booking_id: BookingId) -> dict:
        return {"PK": f"BOOKING#{booking_id}", "SK": METADATA_SK}

    @staticmethod
    def _driver_sort_key(booking: Booking) -> str:
        return f"BOOKING#{booking.created_at}#{booking.id}"

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        quote = booking.quote
        breakdown = quote.cost_breakdown
        food = booking.food_preferences
        created_at = str(booking.created_at)

        item = {
            **self._key(booking.id),
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": booking.user_id,
            "tour_id": str(booking.tour_id),
            "vehicle_id": str(booking.vehicle_id),
            "driver_id": str(booking.driver_id) if booking.driver_id else None,
            "start_date": booking.travel_period.start,
            "end_date": booking.travel_period.end,
            "number_of_days": booking.number_of_days,
            "number_of_passengers": booking.number_of_passengers,
            "passengers": [
                {
                    "name": p.name,
                    "age": p.age,
                    "email": p.email,
                    "phone": p.phone,
                    "gender": p.gender,
                }
                for p in booking.passengers
            ],
            "estimated_kms": str(booking.estimated_kms),
            "food_preferences": {
                "breakfast": food.breakfast,
                "lunch": food.lunch,
                "dinner": food.dinner,
                "snacks": food.snacks,
                "special_diets": list(food.special_diets),
            },
            "cost_breakdown": {
                name: str(getattr(breakdown, name).amount) for name in _COST_FIELDS
            },
            "currency": str(breakdown.total_amount.currency),
            "advance_amount": str(quote.advance_amount.amount),
            "remaining_amount": str(quote.remaining_amount.amount),
            "status": booking.status.value,
            "payment_status": booking.payment_status.value,
            "cancellation_reason": booking.cancellation_reason,
            "special_requests": booking.special_requests,
            "created_at": created_at,
            "updated_at": str(booking.updated_at),
            "GSI1PK": ALL_BOOKINGS_PK,
            "GSI1SK": f"{created_at}#{booking.id}",
            "GSI2PK": f"USER#{booking.user_id}",
            "GSI2SK": f"BOOKING#{created_at}#{booking.id}",
        }
        if booking.driver_id:
            item["GSI3PK"] = f"DRIVER#{booking.driver_id}"
            item["GSI3SK"] = self._driver_sort_key(booking)
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])

        def money(value: str) -> Money:
            return Money(amount=Decimal(value), currency=currency)

        breakdown = CostBreakdown(
            **{name: money(item["cost_breakdown"][name]) for name in _COST_FIELDS}
        )
        quote = Quote(
            number_of_days=int(item["number_of_days"]),
            cost_breakdown=breakdown,
            advance_amount=money(item["advance_amount"]),
            remaining_amount=money(item["remaining_amount"]),
        )
        food = item.get("food_preferences") or {}

        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=item["user_id"],
            tour_id=TourId(value=item["tour_id"]),
            vehicle_id=VehicleId(value=item["vehicle_id"]),
            driver_id=DriverId(value=item["driver_id"])
            if item.get("driver_id")
            else None,
            travel_period=TravelPeriod(start=item["start_date"], end=item["end_date"]),
            number_of_passengers=int(item["number_of_passengers"]),
            passengers=[
                Passenger(
                    name=p["name"],
                    age=int(p["age"]),
                    email=p.get("email"),
                    phone=p.get("phone"),
                    gender=p.get("gender"),
                )
                for p in item.get("passengers", [])
            ],
            estimated_kms=Decimal(item["estimated_kms"]),
            food_preferences=FoodPreferences(
                breakfast=bool(food.get("breakfast", False)),
                lunch=bool(food.get("lunch", False)),
                dinner=bool(food.get("dinner", False)),
                snacks=bool(food.get("snacks", False)),
                special_diets=tuple(food.get("special_diets", [])),
            ),
            quote=quote,
            special_requests=item.get("special_requests"),
            status=BookingStatus(item["status"]),
            payment_status=BookingPaymentStatus(item["payment_status"]),
            cancellation_reason=item.get("cancellation_reason"),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )
