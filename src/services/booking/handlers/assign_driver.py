from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.value_object import BookingId
from services.booking.handlers.dependencies import assign_driver_service
from services.booking.handlers.request_models import AssignDriverRequest
from services.booking.handlers.response_models import to_response
from services.catalog.domain.value_object import DriverId
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
    path_parameter,
)

logger = Logger()

service = assign_driver_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ドライバー割当 Lambda Handler（管理者のみ）"""

    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_parameter(event, "booking_id"))
        request = AssignDriverRequest.model_validate_json(event.body or "{}")
        logger.info(
            "Received assign driver request",
            extra={"booking_id": str(booking_id), "driver_id": request.driver_id},
        )

        booking = service.assign(actor, booking_id, DriverId(value=request.driver_id))
        return api_response(200, to_response(booking))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Assign driver request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to assign driver")
        return error_response(e)
