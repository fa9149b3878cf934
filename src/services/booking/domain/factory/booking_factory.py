from decimal import Decimal
from typing import NotRequired, TypedDict

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    FoodPreferences,
    Passenger,
    Quote,
    TravelPeriod,
)
from services.catalog.domain.value_object import DriverId, TourId, VehicleId


class PassengerDetails(TypedDict):
    """乗客の入力データ"""

    name: str
    age: int
    email: NotRequired[str | None]
    phone: NotRequired[str | None]
    gender: NotRequired[str | None]


class FoodPreferenceDetails(TypedDict, total=False):
    """食事希望の入力データ"""

    breakfast: bool
    lunch: bool
    dinner: bool
    snacks: bool
    special_diets: list[str]


class BookingDetails(TypedDict):
    """予約の入力データ構造（TypedDict）"""

    tour_id: str
    vehicle_id: str
    driver_id: NotRequired[str | None]
    start_date: str
    end_date: str
    number_of_passengers: int
    passengers: list[PassengerDetails]
    estimated_kms: Decimal
    food_preferences: NotRequired[FoodPreferenceDetails]
    special_requests: NotRequired[str | None]


def to_food_preferences(details: FoodPreferenceDetails | None) -> FoodPreferences:
    """食事希望の入力を Value Object に変換する"""
    details = details or {}
    return FoodPreferences(
        breakfast=details.get("breakfast", False),
        lunch=details.get("lunch", False),
        dinner=details.get("dinner", False),
        snacks=details.get("snacks", False),
        special_diets=tuple(details.get("special_diets", [])),
    )


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def create(
        self,
        user_id: str,
        booking_details: BookingDetails,
        travel_period: TravelPeriod,
        quote: Quote,
    ) -> Booking:
        """新規予約のエンティティを作成する"""
        passengers = [
            Passenger(
                name=p["name"],
                age=p["age"],
                email=p.get("email"),
                phone=p.get("phone"),
                gender=p.get("gender"),
            )
            for p in booking_details["passengers"]
        ]
        driver_id = booking_details.get("driver_id")

        return Booking(
            id=BookingId.generate(),
            user_id=user_id,
            tour_id=TourId(value=booking_details["tour_id"]),
            vehicle_id=VehicleId(value=booking_details["vehicle_id"]),
            driver_id=DriverId(value=driver_id) if driver_id else None,
            travel_period=travel_period,
            number_of_passengers=booking_details["number_of_passengers"],
            passengers=passengers,
            estimated_kms=booking_details["estimated_kms"],
            food_preferences=to_food_preferences(
                booking_details.get("food_preferences")
            ),
            quote=quote,
            special_requests=booking_details.get("special_requests"),
            status=BookingStatus.CONFIRMED,
            payment_status=BookingPaymentStatus.PENDING,
        )
