from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.factory import BookingDetails
from services.booking.handlers.dependencies import create_booking_service
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_response
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
)

logger = Logger()

service = create_booking_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    try:
        actor = actor_from_event(event)
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
        booking = service.create(actor, _to_booking_details(request))
        logger.append_keys(booking_id=str(booking.id))
        return api_response(201, to_response(booking))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Create booking request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to create booking")
        return error_response(e)


def _to_booking_details(request: CreateBookingRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""

    return {
        "tour_id": request.tour_id,
        "vehicle_id": request.vehicle_id,
        "driver_id": request.driver_id,
        "start_date": request.start_date,
        "end_date": request.end_date,
        "number_of_passengers": request.number_of_passengers,
        "passengers": [p.model_dump() for p in request.passengers],
        "estimated_kms": request.estimated_kms,
        "food_preferences": request.food_preferences.model_dump(),
        "special_requests": request.special_requests,
    }
