import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus, PaymentType
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception.exceptions import DuplicateResourceException


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装

    支払いは予約と同じパーティション（BOOKING#<id>）に PAYMENT#<id> として置く。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, payment: Payment) -> None:
        """決済をDBに保存する"""
        item = {
            "PK": f"BOOKING#{payment.booking_id}",
            "SK": f"PAYMENT#{payment.id}",
            "entity_type": "PAYMENT",
            "payment_id": str(payment.id),
            "booking_id": str(payment.booking_id),
            "user_id": payment.user_id,
            "amount": str(payment.amount.amount),
            "currency": str(payment.amount.currency),
            "method": payment.method.value,
            "payment_type": payment.payment_type.value,
            "transaction_id": payment.transaction_id,
            "status": payment.status.value,
            "created_at": str(payment.created_at),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("SK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Payment already exists: {payment.id}"
                ) from e
            raise

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索"""
        response = self.table.scan(
            FilterExpression=Attr("payment_id").eq(str(payment_id)),
            ConsistentRead=True,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約IDで決済を検索する"""
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(f"BOOKING#{booking_id}")
            & Key("SK").begins_with("PAYMENT#"),
            "ConsistentRead": True,
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Payment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Payment(
            id=PaymentId(value=item["payment_id"]),
            booking_id=BookingId(value=item["booking_id"]),
            user_id=item["user_id"],
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            method=PaymentMethod(item["method"]),
            payment_type=PaymentType(item["payment_type"]),
            transaction_id=item.get("transaction_id"),
            status=PaymentStatus(item["status"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
        )
