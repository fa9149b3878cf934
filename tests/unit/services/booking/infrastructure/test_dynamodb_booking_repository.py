from unittest.mock import MagicMock, patch

import pytest
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.catalog.domain.value_object import DriverId
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "Operation")


class TestDynamoDBBookingRepository:
    @pytest.fixture
    def table(self):
        return MagicMock()

    @pytest.fixture
    def repository(self, table):
        with patch(
            "services.booking.infrastructure.dynamodb_booking_repository.boto3"
        ) as mock_boto3:
            mock_boto3.resource.return_value.Table.return_value = table
            yield DynamoDBBookingRepository(table_name="test-table")

    def test_item_round_trip_preserves_booking(self, repository, create_booking):
        booking = create_booking(driver_id="driver-001")

        item = repository._to_item(booking)
        restored = repository._to_entity(item)

        assert item["PK"] == f"BOOKING#{booking.id}"
        assert item["GSI2PK"] == "USER#user-customer-1"
        assert restored == booking
        assert restored.quote == booking.quote
        assert restored.passengers == booking.passengers
        assert restored.driver_id == booking.driver_id
        assert str(restored.created_at) == str(booking.created_at)

    def test_save_is_create_if_absent(self, repository, table, create_booking):
        repository.save(create_booking())
        assert "ConditionExpression" in table.put_item.call_args.kwargs

    def test_save_duplicate_raises(self, repository, table, create_booking):
        table.put_item.side_effect = _client_error("ConditionalCheckFailedException")
        with pytest.raises(DuplicateResourceException):
            repository.save(create_booking())

    def test_update_status_conflict_raises_optimistic_lock(
        self, repository, table, create_booking
    ):
        booking = create_booking()
        booking.change_status(BookingStatus.IN_PROGRESS)
        table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )

        with pytest.raises(OptimisticLockException):
            repository.update_status(booking, expected_status=BookingStatus.CONFIRMED)

    def test_update_status_writes_expected_values(
        self, repository, table, create_booking
    ):
        booking = create_booking()
        booking.cancel("Weather")

        repository.update_status(booking, expected_status=BookingStatus.CONFIRMED)

        values = table.update_item.call_args.kwargs["ExpressionAttributeValues"]
        assert values[":status"] == "cancelled"
        assert values[":reason"] == "Weather"

    def test_other_client_errors_propagate(self, repository, table, create_booking):
        table.update_item.side_effect = _client_error("ProvisionedThroughputExceeded")
        with pytest.raises(ClientError):
            repository.update_status(
                create_booking(), expected_status=BookingStatus.CONFIRMED
            )

    def test_find_by_id_returns_none_when_missing(self, repository, table):
        table.get_item.return_value = {}
        assert repository.find_by_id(MagicMock()) is None

    def test_find_all_follows_pagination(self, repository, table, create_booking):
        first = repository._to_item(create_booking(booking_id="STB-1"))
        second = repository._to_item(create_booking(booking_id="STB-2"))
        table.query.side_effect = [
            {"Items": [first], "LastEvaluatedKey": {"PK": "x"}},
            {"Items": [second]},
        ]

        bookings = repository.find_all()

        assert [str(b.id) for b in bookings] == ["STB-1", "STB-2"]
        assert table.query.call_count == 2
        assert table.query.call_args.kwargs["ExclusiveStartKey"] == {"PK": "x"}

    def test_update_status_is_conditioned_on_expected_status(
        self, repository, table, create_booking
    ):
        booking = create_booking()
        booking.change_status(BookingStatus.IN_PROGRESS)

        repository.update_status(booking, expected_status=BookingStatus.CONFIRMED)

        condition = table.update_item.call_args.kwargs["ConditionExpression"]
        assert condition == Attr("PK").exists() & Attr("status").eq("confirmed")

    def test_update_payment_status_skips_cancelled_booking(
        self, repository, table, create_booking
    ):
        booking = create_booking()
        booking.update_payment_status(BookingPaymentStatus.ADVANCE_PAID)

        repository.update_payment_status(booking)

        kwargs = table.update_item.call_args.kwargs
        assert kwargs["ConditionExpression"] == Attr("PK").exists() & Attr(
            "status"
        ).ne("cancelled")
        assert kwargs["ExpressionAttributeValues"][":payment_status"] == (
            "advance-paid"
        )

    def test_update_payment_status_on_cancelled_booking_raises_optimistic_lock(
        self, repository, table, create_booking
    ):
        table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )
        with pytest.raises(OptimisticLockException):
            repository.update_payment_status(create_booking())

    def test_assigned_booking_is_indexed_by_driver(self, repository, create_booking):
        assigned = repository._to_item(create_booking(driver_id="driver-001"))
        unassigned = repository._to_item(create_booking())

        assert assigned["GSI3PK"] == "DRIVER#driver-001"
        assert assigned["GSI3SK"].startswith("BOOKING#")
        assert "GSI3PK" not in unassigned

    def test_update_driver_moves_driver_index(self, repository, table, create_booking):
        booking = create_booking()
        booking.assign_driver(DriverId(value="driver-002"))

        repository.update_driver(booking)

        values = table.update_item.call_args.kwargs["ExpressionAttributeValues"]
        assert values[":driver_id"] == "driver-002"
        assert values[":gsi3pk"] == "DRIVER#driver-002"
        assert values[":gsi3sk"] == f"BOOKING#{booking.created_at}#{booking.id}"

    def test_find_by_driver_id_queries_driver_index(
        self, repository, table, create_booking
    ):
        table.query.return_value = {
            "Items": [repository._to_item(create_booking(driver_id="driver-001"))]
        }

        bookings = repository.find_by_driver_id(DriverId(value="driver-001"))

        kwargs = table.query.call_args.kwargs
        assert kwargs["IndexName"] == "GSI3"
        assert kwargs["KeyConditionExpression"] == Key("GSI3PK").eq(
            "DRIVER#driver-001"
        ) & Key("GSI3SK").begins_with("BOOKING#")
        assert "FilterExpression" not in kwargs
        assert [str(b.driver_id) for b in bookings] == ["driver-001"]
