from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.service import BookingAccessPolicy
from services.booking.domain.value_object import BookingId
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBDriverRepository,
)
from services.payment.applications.list_payments import ListPaymentsService
from services.payment.handlers.response_models import to_list_response
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

service = ListPaymentsService(
    repository=DynamoDBPaymentRepository(),
    booking_repository=DynamoDBBookingRepository(),
    driver_repository=DynamoDBDriverRepository(),
    policy=BookingAccessPolicy(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """支払い履歴取得の Lambda Handler"""

    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_parameter(event, "booking_id"))
        logger.info("Listing payments", extra={"booking_id": str(booking_id)})

        payments = service.list(actor, booking_id)
        return api_response(200, to_list_response(payments))

    except (DomainException, UnauthorizedException) as e:
        logger.warning("List payments request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to list payments")
        return error_response(e)
