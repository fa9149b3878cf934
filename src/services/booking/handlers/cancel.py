from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.value_object import BookingId
from services.booking.handlers.dependencies import cancel_booking_service
from services.booking.handlers.request_models import CancelBookingRequest
from services.booking.handlers.response_models import to_response
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
    path_parameter,
)

logger = Logger()

service = cancel_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""

    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_parameter(event, "booking_id"))
        request = CancelBookingRequest.model_validate_json(event.body or "{}")
        logger.info(
            "Received cancel booking request",
            extra={"booking_id": str(booking_id)},
        )

        booking = service.cancel(actor, booking_id, request.cancellation_reason)
        return api_response(200, to_response(booking))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Cancel booking request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to cancel booking")
        return error_response(e)
