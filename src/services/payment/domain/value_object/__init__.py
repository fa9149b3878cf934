from .payment_id import PaymentId

__all__ = ["PaymentId"]
