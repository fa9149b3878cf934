from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.payment.applications.record_payment import RecordPaymentService
from services.payment.domain.factory import PaymentDetails, PaymentFactory
from services.payment.handlers.request_models import RecordPaymentRequest
from services.payment.handlers.response_models import to_response
from services.payment.infrastructure.dynamodb_payment_repository import (
    DynamoDBPaymentRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
    path_parameter,
)

logger = Logger()

repository = DynamoDBPaymentRepository()
booking_repository = DynamoDBBookingRepository()
service = RecordPaymentService(
    repository=repository,
    booking_repository=booking_repository,
    policy=BookingAccessPolicy(),
    factory=PaymentFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """支払い記録の Lambda Handler"""
    logger.info("Received record payment request")

    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_parameter(event, "booking_id"))
        request = RecordPaymentRequest.model_validate_json(event.body or "{}")
        payment_details: PaymentDetails = {
            "amount": request.amount,
            "currency_code": request.currency,
            "method": request.payment_method.value,
            "payment_type": request.payment_type.value,
            "transaction_id": request.transaction_id,
        }

        payment = service.record(actor, booking_id, payment_details)
        return api_response(201, to_response(payment))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Record payment request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to record payment")
        return error_response(e)
