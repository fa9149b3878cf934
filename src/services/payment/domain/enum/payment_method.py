from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法"""

    UPI = "upi"
    QR_CODE = "qr-code"
    CASH = "cash"
    CREDIT_CARD = "credit-card"
    DEBIT_CARD = "debit-card"
    NET_BANKING = "net-banking"
