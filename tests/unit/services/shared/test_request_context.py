import pytest
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain import Role, ValidationException
from services.shared.utils import (
    UnauthorizedException,
    actor_from_event,
    path_parameter,
)


class TestActorFromEvent:
    def test_builds_actor_from_claims(self, api_event, driver_actor):
        event = APIGatewayProxyEvent(api_event(actor=driver_actor))

        actor = actor_from_event(event)

        assert actor.user_id == driver_actor.user_id
        assert actor.role == Role.DRIVER

    def test_missing_subject_raises_unauthorized(self, api_event):
        with pytest.raises(UnauthorizedException):
            actor_from_event(APIGatewayProxyEvent(api_event()))

    def test_unknown_role_raises_unauthorized(self, api_event):
        raw = api_event()
        raw["requestContext"]["authorizer"]["claims"] = {
            "sub": "user-1",
            "custom:role": "superuser",
        }
        with pytest.raises(UnauthorizedException, match="Unknown role"):
            actor_from_event(APIGatewayProxyEvent(raw))


class TestPathParameter:
    def test_returns_value(self, api_event):
        event = APIGatewayProxyEvent(api_event(path_parameters={"booking_id": "b-1"}))
        assert path_parameter(event, "booking_id") == "b-1"

    def test_missing_raises_validation_error(self, api_event):
        with pytest.raises(ValidationException):
            path_parameter(APIGatewayProxyEvent(api_event()), "booking_id")
