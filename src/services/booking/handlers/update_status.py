from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.domain.value_object import BookingId
from services.booking.handlers.dependencies import update_booking_status_service
from services.booking.handlers.request_models import UpdateBookingStatusRequest
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

service = update_booking_status_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約ステータス更新 Lambda Handler

    管理者・担当ドライバー・予約した顧客がそれぞれ許可された遷移のみ実行できる。
    権限エラー(403)と遷移エラー(409)は区別して返す。
    """

    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_parameter(event, "booking_id"))
        request = UpdateBookingStatusRequest.model_validate_json(event.body or "{}")
        logger.info(
            "Received update booking status request",
            extra={
                "booking_id": str(booking_id),
                "target_status": request.status.value,
                "role": actor.role.value,
            },
        )

        booking = service.update_status(
            actor, booking_id, request.status, reason=request.reason
        )
        return api_response(200, to_response(booking))

    except (DomainException, ValidationError, UnauthorizedException) as e:
        logger.warning("Status update rejected", extra={"reason": str(e)})
        return error_response(e)
    except Exception as e:
        logger.exception("Failed to update booking status")
        return error_response(e)
