from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.booking.domain.enum import BookingStatus
from services.shared.utils.validators import to_decimal

MAX_PASSENGERS = 100
MAX_ESTIMATED_KMS = Decimal("100000")


class PassengerRequest(BaseModel):
    """乗客の入力スキーマ"""

    name: str = Field(..., min_length=1, description="乗客名")
    age: int = Field(..., ge=0, le=120)
    email: str | None = None
    phone: str | None = None
    gender: str | None = Field(default=None, description="性別（任意）")


class FoodPreferencesRequest(BaseModel):
    """食事希望の入力スキーマ"""

    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False
    snacks: bool = False
    special_diets: list[str] = Field(
        default_factory=list,
        description="食事制限",
        examples=[["veg", "vegan"]],
    )


class EstimateCostRequest(BaseModel):
    """料金見積もりリクエストスキーマ"""

    tour_id: str = Field(..., min_length=1, examples=["tour-ooty"])
    vehicle_id: str = Field(..., min_length=1, examples=["vehicle-van-01"])
    start_date: str = Field(
        ...,
        description="開始日（ISO 8601形式）",
        examples=["2026-02-15"],
    )
    end_date: str = Field(
        ...,
        description="終了日（ISO 8601形式）",
        examples=["2026-02-17"],
    )
    number_of_passengers: int = Field(..., ge=1, le=MAX_PASSENGERS)
    estimated_kms: Decimal = Field(
        ..., ge=0, le=MAX_ESTIMATED_KMS, description="想定走行距離（km）"
    )
    food_preferences: FoodPreferencesRequest = Field(
        default_factory=FoodPreferencesRequest
    )

    @field_validator("estimated_kms", mode="before")
    @classmethod
    def convert_kms_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)


class CreateBookingRequest(EstimateCostRequest):
    """予約作成リクエストスキーマ"""

    driver_id: str | None = None
    passengers: list[PassengerRequest] = Field(
        ..., min_length=1, max_length=MAX_PASSENGERS
    )
    special_requests: str | None = Field(default=None, max_length=1000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tour_id": "tour-ooty",
                    "vehicle_id": "vehicle-van-01",
                    "start_date": "2026-02-15",
                    "end_date": "2026-02-17",
                    "number_of_passengers": 1,
                    "passengers": [{"name": "Asha", "age": 34}],
                    "estimated_kms": 150,
                    "food_preferences": {"breakfast": True},
                }
            ]
        }
    }


class UpdateBookingStatusRequest(BaseModel):
    """予約ステータス更新リクエストスキーマ"""

    status: BookingStatus
    reason: str | None = Field(default=None, description="キャンセル理由")


class AssignDriverRequest(BaseModel):
    """ドライバー割当リクエストスキーマ"""

    driver_id: str = Field(..., min_length=1)


class CancelBookingRequest(BaseModel):
    """予約キャンセルリクエストスキーマ"""

    cancellation_reason: str | None = None
