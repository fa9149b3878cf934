from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.domain.service import PricingCalculator
from services.booking.domain.value_object import (
    BookingId,
    FoodPreferences,
    Passenger,
    TravelPeriod,
)
from services.catalog.domain.entity import Driver, Tour, Vehicle
from services.catalog.domain.enum import VehicleType
from services.catalog.domain.value_object import DriverId, TourId, VehicleId
from services.shared.domain import Actor, Money, Role


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


# =============================================================================
# 操作主体
# =============================================================================
@pytest.fixture
def customer():
    return Actor(user_id="user-customer-1", role=Role.CUSTOMER)


@pytest.fixture
def other_customer():
    return Actor(user_id="user-customer-2", role=Role.CUSTOMER)


@pytest.fixture
def admin():
    return Actor(user_id="user-admin-1", role=Role.ADMIN)


@pytest.fixture
def driver_actor():
    return Actor(user_id="user-driver-1", role=Role.DRIVER)


@pytest.fixture
def driver_id():
    """driver_actor に紐づくドライバープロフィールの ID"""
    return DriverId(value="driver-001")


# =============================================================================
# カタログ
# =============================================================================
@pytest.fixture
def tour():
    return Tour(
        id=TourId(value="tour-ooty"),
        name="Ooty Hills",
        location="Ooty",
        area="Nilgiris",
        duration_days=3,
        base_price_per_day=Money.inr(1500),
        price_per_km=Money.inr(12),
    )


@pytest.fixture
def vehicle():
    return Vehicle(
        id=VehicleId(value="vehicle-van-01"),
        registration_number="TN-01-AB-1234",
        vehicle_type=VehicleType.VAN,
        model="Force Traveller",
        capacity=12,
        daily_rate_per_day=Money.inr(2200),
        rate_per_km=Money.inr(9),
    )


@pytest.fixture
def driver(driver_id, driver_actor):
    return Driver(
        id=driver_id,
        user_id=driver_actor.user_id,
        license_number="TN0120200001234",
    )


# =============================================================================
# 予約
# =============================================================================
@pytest.fixture
def create_quote():
    """Quote を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        daily_rate: int = 2200,
        rate_per_km: int = 9,
        number_of_days: int = 3,
        estimated_kms: Decimal = Decimal("150"),
        food_active: bool = True,
        number_of_passengers: int = 2,
    ):
        return PricingCalculator().calculate(
            daily_rate=Money.inr(daily_rate),
            rate_per_km=Money.inr(rate_per_km),
            number_of_days=number_of_days,
            estimated_kms=estimated_kms,
            food_active=food_active,
            number_of_passengers=number_of_passengers,
        )

    return _factory


@pytest.fixture
def create_booking(create_quote):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.CONFIRMED,
        booking_id: str = "STB-20260215093012345-7K2M9QX4ZD",
        user_id: str = "user-customer-1",
        driver_id: str | None = None,
        number_of_passengers: int = 2,
        payment_status: BookingPaymentStatus = BookingPaymentStatus.PENDING,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=user_id,
            tour_id=TourId(value="tour-ooty"),
            vehicle_id=VehicleId(value="vehicle-van-01"),
            driver_id=DriverId(value=driver_id) if driver_id else None,
            travel_period=TravelPeriod(start="2026-02-15", end="2026-02-18"),
            number_of_passengers=number_of_passengers,
            passengers=[
                Passenger(name=f"Passenger {i + 1}", age=30 + i)
                for i in range(number_of_passengers)
            ],
            estimated_kms=Decimal("150"),
            food_preferences=FoodPreferences(lunch=True, dinner=True),
            quote=create_quote(number_of_passengers=number_of_passengers),
            status=status,
            payment_status=payment_status,
        )

    return _factory


# =============================================================================
# Lambda / API Gateway
# =============================================================================
@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-south-1:123456789012:function:test-function"
    )
    aws_request_id: str = "test-request-id"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST, Cognito Authorizer) のイベントを生成する Factory fixture"""

    def _factory(
        actor: Actor | None = None,
        body: str | None = None,
        path_parameters: dict | None = None,
        http_method: str = "GET",
    ) -> dict:
        claims = {}
        if actor is not None:
            claims = {"sub": actor.user_id, "custom:role": actor.role.value}
        return {
            "resource": "/bookings",
            "path": "/bookings",
            "httpMethod": http_method,
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {
                "requestId": "request-1",
                "stage": "prod",
                "authorizer": {"claims": claims},
            },
        }

    return _factory
