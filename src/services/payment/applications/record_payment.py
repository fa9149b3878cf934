from aws_lambda_powertools import Logger

from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.factory import PaymentDetails, PaymentFactory
from services.payment.domain.repository import PaymentRepository
from services.shared.domain import Actor
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    OptimisticLockException,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class RecordPaymentService:
    """支払い記録ユースケース

    予約の支払い状況を条件付きで更新してから支払いを保存する。
    支払い状況は後戻りせず、予約のライフサイクル（status）には触れない。
    """

    def __init__(
        self,
        repository: PaymentRepository,
        booking_repository: BookingRepository,
        policy: BookingAccessPolicy,
        factory: PaymentFactory,
    ) -> None:
        self._repository = repository
        self._booking_repository = booking_repository
        self._policy = policy
        self._factory = factory

    def record(
        self,
        actor: Actor,
        booking_id: BookingId,
        payment_details: PaymentDetails,
    ) -> Payment:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        self._policy.authorize_payment(actor, booking)

        if booking.status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException(
                f"Cannot record payment for cancelled booking: {booking_id}"
            )

        payment = self._factory.create(booking.id, actor.user_id, payment_details)
        booking_currency = booking.quote.cost_breakdown.total_amount.currency
        if payment.amount.currency != booking_currency:
            raise ValidationException(
                f"Payment currency must be {booking_currency} for this booking"
            )

        payment.complete()
        booking.update_payment_status(payment.payment_type.booking_payment_status)
        try:
            self._booking_repository.update_payment_status(booking)
        except OptimisticLockException as e:
            raise BusinessRuleViolationException(
                f"Cannot record payment for cancelled booking: {booking_id}"
            ) from e
        self._repository.save(payment)

        logger.info(
            "Payment recorded",
            extra={
                "booking_id": str(booking.id),
                "payment_id": str(payment.id),
                "payment_type": payment.payment_type.value,
                "payment_status": booking.payment_status.value,
            },
        )
        return payment
