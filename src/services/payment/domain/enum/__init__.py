from .payment_method import PaymentMethod
from .payment_status import PaymentStatus
from .payment_type import PaymentType

__all__ = ["PaymentMethod", "PaymentStatus", "PaymentType"]
