from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import list_bookings_service
from services.booking.handlers.response_models import to_list_response
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
)

logger = Logger()

service = list_bookings_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler"""

    try:
        actor = actor_from_event(event)
        logger.info("Listing bookings", extra={"role": actor.role.value})

        bookings = service.list(actor)
        body = to_list_response(bookings)
        body["count"] = len(bookings)
        return api_response(200, body)

    except (DomainException, UnauthorizedException) as e:
        logger.warning("List bookings request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to list bookings")
        return error_response(e)
