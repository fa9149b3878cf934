from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain import Actor, Role, ValidationException

ROLE_CLAIM = "custom:role"


class UnauthorizedException(Exception):
    """認証情報（Cognito クレーム）が欠けている、または不正な場合"""

    error_code = "UNAUTHORIZED"


def actor_from_event(event: APIGatewayProxyEvent) -> Actor:
    """Cognito User Pool Authorizer のクレームから操作主体を組み立てる"""
    claims = event.request_context.authorizer.claims or {}

    user_id = claims.get("sub")
    if not user_id:
        raise UnauthorizedException("Missing subject claim")

    try:
        role = Role(claims.get(ROLE_CLAIM, ""))
    except ValueError as e:
        raise UnauthorizedException(
            f"Unknown role claim: {claims.get(ROLE_CLAIM)!r}"
        ) from e

    return Actor(user_id=user_id, role=role)


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str:
    """必須のパスパラメータを取り出す"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValidationException(f"{name} is required")
    return value
