from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object import Quote


class CostBreakdownData(BaseModel):
    """料金内訳のレスポンスモデル"""

    vehicle_rent_per_day: str
    total_vehicle_rent: str
    km_based_charge: str
    food_cost: str
    driver_charges: str
    accommodation_cost: str
    discount_amount: str
    subtotal: str
    gst: str
    total_amount: str


class QuoteData(BaseModel):
    """見積もりのレスポンスモデル"""

    number_of_days: int
    currency: str
    cost_breakdown: CostBreakdownData
    advance_amount: str
    remaining_amount: str


class PassengerData(BaseModel):
    name: str
    age: int
    email: str | None = None
    phone: str | None = None
    gender: str | None = None


class BookingData(QuoteData):
    """予約データのレスポンスモデル"""

    booking_id: str
    user_id: str
    tour_id: str
    vehicle_id: str
    driver_id: str | None
    start_date: str
    end_date: str
    number_of_passengers: int
    passengers: list[PassengerData]
    estimated_kms: str
    food_preferences: dict
    special_requests: str | None
    status: str
    payment_status: str
    cancellation_reason: str | None
    created_at: str
    updated_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | QuoteData | list[BookingData]


def _quote_fields(quote: Quote) -> dict:
    breakdown = quote.cost_breakdown
    return {
        "number_of_days": quote.number_of_days,
        "currency": str(breakdown.total_amount.currency),
        "cost_breakdown": CostBreakdownData(
            **{
                name: str(getattr(breakdown, name).amount)
                for name in CostBreakdownData.model_fields
            }
        ),
        "advance_amount": str(quote.advance_amount.amount),
        "remaining_amount": str(quote.remaining_amount.amount),
    }


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    food = booking.food_preferences
    return BookingData(
        booking_id=str(booking.id),
        user_id=booking.user_id,
        tour_id=str(booking.tour_id),
        vehicle_id=str(booking.vehicle_id),
        driver_id=str(booking.driver_id) if booking.driver_id else None,
        start_date=booking.travel_period.start,
        end_date=booking.travel_period.end,
        number_of_passengers=booking.number_of_passengers,
        passengers=[
            PassengerData(
                name=p.name,
                age=p.age,
                email=p.email,
                phone=p.phone,
                gender=p.gender,
            )
            for p in booking.passengers
        ],
        estimated_kms=str(booking.estimated_kms),
        food_preferences={
            "breakfast": food.breakfast,
            "lunch": food.lunch,
            "dinner": food.dinner,
            "snacks": food.snacks,
            "special_diets": list(food.special_diets),
        },
        special_requests=booking.special_requests,
        status=booking.status.value,
        payment_status=booking.payment_status.value,
        cancellation_reason=booking.cancellation_reason,
        created_at=str(booking.created_at),
        updated_at=str(booking.updated_at),
        **_quote_fields(booking.quote),
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(booking)).model_dump()


def to_list_response(bookings: list[Booking]) -> dict:
    """予約一覧をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=[to_booking_data(booking) for booking in bookings]
    ).model_dump()


def to_quote_response(quote: Quote) -> dict:
    """見積もりをレスポンス辞書に変換する"""
    return SuccessResponse(data=QuoteData(**_quote_fields(quote))).model_dump()
