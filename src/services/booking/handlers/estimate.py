from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.estimate_cost import EstimateDetails
from services.booking.handlers.dependencies import estimate_cost_service
from services.booking.handlers.request_models import EstimateCostRequest
from services.booking.handlers.response_models import to_quote_response
from services.shared.domain import DomainException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    api_response,
    error_response,
)

logger = Logger()

service = estimate_cost_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """料金見積もり Lambda Handler（予約前のプレビュー）"""
    logger.info("Received estimate cost request")

    try:
        actor_from_event(event)
        request = EstimateCostRequest.model_validate_json(event.body or "{}")
        details: EstimateDetails = {
            "tour_id": request.tour_id,
            "vehicle_id": request.vehicle_id,
            "start_date": request.start_date,
            "end_date": request.end_date,
            "number_of_passengers": request.number_of_passengers,
            "estimated_kms": request.estimated_kms,
            "food_preferences": request.food_preferences.model_dump(),
        }
        quote = service.estimate(details)
        return api_response(200, to_quote_response(quote))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Estimate request rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to estimate booking cost")
        return error_response(e)
