from decimal import Decimal

import pytest

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity.payment import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus, PaymentType
from services.payment.domain.value_object.payment_id import PaymentId
from services.shared.domain import Money


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: str = "PAY-20260215093012345-7K2M9QX4ZD",
        booking_id: str = "STB-20260215093012345-7K2M9QX4ZD",
        amount: Decimal = Decimal("4089"),
        payment_type: PaymentType = PaymentType.ADVANCE,
    ) -> Payment:
        return Payment(
            id=PaymentId(value=payment_id),
            booking_id=BookingId(value=booking_id),
            user_id="user-customer-1",
            amount=Money.inr(amount),
            method=PaymentMethod.UPI,
            payment_type=payment_type,
            transaction_id="UPI-REF-001",
            status=status,
        )

    return _factory
