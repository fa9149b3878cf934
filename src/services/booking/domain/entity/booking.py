from decimal import Decimal

from services.booking.domain.enum import BookingPaymentStatus, BookingStatus
from services.booking.domain.event import BookingStatusChanged
from services.booking.domain.service.booking_lifecycle import validate_transition
from services.booking.domain.value_object import (
    BookingId,
    FoodPreferences,
    Passenger,
    Quote,
    TravelPeriod,
)
from services.catalog.domain.value_object import DriverId, TourId, VehicleId
from services.shared.domain import AggregateRoot, IsoDateTime
from services.shared.domain.exception import ValidationException


class Booking(AggregateRoot[BookingId]):
    """予約（集約ルート）

    料金（quote）は作成時に一度だけ計算され、以後再計算しない。
    作成後の変更はステータス遷移・ドライバー割当・支払い状況の更新のみ。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: str,
        tour_id: TourId,
        vehicle_id: VehicleId,
        travel_period: TravelPeriod,
        number_of_passengers: int,
        passengers: list[Passenger],
        estimated_kms: Decimal,
        food_preferences: FoodPreferences,
        quote: Quote,
        driver_id: DriverId | None = None,
        special_requests: str | None = None,
        status: BookingStatus = BookingStatus.CONFIRMED,
        payment_status: BookingPaymentStatus = BookingPaymentStatus.PENDING,
        cancellation_reason: str | None = None,
        created_at: IsoDateTime | None = None,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._tour_id = tour_id
        self._vehicle_id = vehicle_id
        self._travel_period = travel_period
        self._number_of_passengers = number_of_passengers
        self._passengers = tuple(passengers)
        self._estimated_kms = estimated_kms
        self._food_preferences = food_preferences
        self._quote = quote
        self._driver_id = driver_id
        self._special_requests = special_requests
        self._status = status
        self._payment_status = payment_status
        self._cancellation_reason = cancellation_reason
        self._created_at = created_at or IsoDateTime.now()
        self._updated_at = updated_at or self._created_at

        self._validate_passengers()

    def _validate_passengers(self) -> None:
        """乗客数と乗客リストの件数が一致すること"""
        if self._number_of_passengers < 1:
            raise ValidationException("number_of_passengers must be at least 1")
        if len(self._passengers) != self._number_of_passengers:
            raise ValidationException(
                f"Expected {self._number_of_passengers} passengers, "
                f"got {len(self._passengers)}"
            )

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def tour_id(self) -> TourId:
        return self._tour_id

    @property
    def vehicle_id(self) -> VehicleId:
        return self._vehicle_id

    @property
    def driver_id(self) -> DriverId | None:
        return self._driver_id

    @property
    def travel_period(self) -> TravelPeriod:
        return self._travel_period

    @property
    def number_of_days(self) -> int:
        return self._quote.number_of_days

    @property
    def number_of_passengers(self) -> int:
        return self._number_of_passengers

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def estimated_kms(self) -> Decimal:
        return self._estimated_kms

    @property
    def food_preferences(self) -> FoodPreferences:
        return self._food_preferences

    @property
    def quote(self) -> Quote:
        return self._quote

    @property
    def special_requests(self) -> str | None:
        return self._special_requests

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def payment_status(self) -> BookingPaymentStatus:
        return self._payment_status

    @property
    def cancellation_reason(self) -> str | None:
        return self._cancellation_reason

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    def is_owned_by(self, user_id: str) -> bool:
        return self._user_id == user_id

    def is_assigned_to(self, driver_id: DriverId) -> bool:
        return self._driver_id is not None and self._driver_id == driver_id

    def change_status(self, target: BookingStatus, reason: str | None = None) -> None:
        """ステータスを遷移させる

        遷移できない場合は InvalidTransitionException。
        遷移可能でもキャンセル理由が空なら ValidationException。
        """
        validate_transition(self._status, target)

        if target == BookingStatus.CANCELLED and not (reason and reason.strip()):
            raise ValidationException("Cancellation reason is required")

        previous = self._status
        self._status = target
        if target == BookingStatus.CANCELLED:
            self._cancellation_reason = reason.strip()  # type: ignore[union-attr]
        self._touch()
        self.add_domain_event(
            BookingStatusChanged(
                booking_id=self.id,
                previous_status=previous,
                new_status=target,
                reason=self._cancellation_reason
                if target == BookingStatus.CANCELLED
                else None,
            )
        )

    def cancel(self, reason: str | None) -> None:
        """予約をキャンセルする"""
        self.change_status(BookingStatus.CANCELLED, reason=reason)

    def assign_driver(self, driver_id: DriverId) -> None:
        """ドライバーを割り当てる（ステータス遷移とは無関係）"""
        self._driver_id = driver_id
        self._touch()

    def update_payment_status(self, payment_status: BookingPaymentStatus) -> None:
        """支払い状況を進める（現在より後の段階のときだけ更新する）"""
        if not payment_status.is_ahead_of(self._payment_status):
            return
        self._payment_status = payment_status
        self._touch()

    def _touch(self) -> None:
        self._updated_at = IsoDateTime.now()
