from .entity import Payment as Payment
from .enum import PaymentMethod as PaymentMethod
from .enum import PaymentStatus as PaymentStatus
from .enum import PaymentType as PaymentType
from .factory import PaymentDetails as PaymentDetails
from .factory import PaymentFactory as PaymentFactory
from .repository import PaymentRepository as PaymentRepository
from .value_object import PaymentId as PaymentId
