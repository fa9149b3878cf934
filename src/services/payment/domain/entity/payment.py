from services.booking.domain.value_object import BookingId
from services.payment.domain.enum import PaymentMethod, PaymentStatus, PaymentType
from services.payment.domain.value_object import PaymentId
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Payment(AggregateRoot[PaymentId]):
    """決済エンティティ（予約に対する1回分の支払い）"""

    def __init__(
        self,
        id: PaymentId,
        booking_id: BookingId,
        user_id: str,
        amount: Money,
        method: PaymentMethod,
        payment_type: PaymentType,
        transaction_id: str | None = None,
        status: PaymentStatus = PaymentStatus.PENDING,
        created_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._user_id = user_id
        self._amount = amount
        self._method = method
        self._payment_type = payment_type
        self._transaction_id = transaction_id
        self._status = status
        self._created_at = created_at or IsoDateTime.now()

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def payment_type(self) -> PaymentType:
        return self._payment_type

    @property
    def transaction_id(self) -> str | None:
        return self._transaction_id

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    def complete(self) -> None:
        """決済を完了する"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot complete payment in {self._status.value} status"
            )
        self._status = PaymentStatus.COMPLETED

    def fail(self) -> None:
        """決済を失敗として記録する"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot fail payment in {self._status.value} status"
            )
        self._status = PaymentStatus.FAILED
