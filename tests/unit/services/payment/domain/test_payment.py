import pytest

from services.booking.domain.enum import BookingPaymentStatus
from services.payment.domain.enum import PaymentStatus, PaymentType
from services.payment.domain.value_object import PaymentId
from services.shared.domain.exception import BusinessRuleViolationException


class TestPayment:
    def test_complete_pending_payment(self, create_payment):
        payment = create_payment(status=PaymentStatus.PENDING)
        payment.complete()
        assert payment.status == PaymentStatus.COMPLETED

    def test_cannot_complete_completed_payment(self, create_payment):
        payment = create_payment(status=PaymentStatus.COMPLETED)
        with pytest.raises(BusinessRuleViolationException):
            payment.complete()

    def test_fail_pending_payment(self, create_payment):
        payment = create_payment()
        payment.fail()
        assert payment.status == PaymentStatus.FAILED

    def test_cannot_fail_completed_payment(self, create_payment):
        payment = create_payment(status=PaymentStatus.COMPLETED)
        with pytest.raises(BusinessRuleViolationException):
            payment.fail()


class TestPaymentType:
    @pytest.mark.parametrize(
        "payment_type,expected",
        [
            (PaymentType.ADVANCE, BookingPaymentStatus.ADVANCE_PAID),
            (PaymentType.PARTIAL, BookingPaymentStatus.PARTIAL_PAID),
            (PaymentType.BALANCE, BookingPaymentStatus.COMPLETED),
            (PaymentType.FULL, BookingPaymentStatus.COMPLETED),
        ],
    )
    def test_booking_payment_status(self, payment_type, expected):
        assert payment_type.booking_payment_status == expected


class TestPaymentId:
    def test_generate_uses_payment_prefix(self):
        assert str(PaymentId.generate()).startswith("PAY-")

    def test_empty_raises_error(self):
        with pytest.raises(ValueError):
            PaymentId(value="")
