import json

from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    ForbiddenException,
    InvalidDateRangeException,
    ResourceNotFoundException,
    ValidationException,
)
from services.shared.utils.request_context import UnauthorizedException

# 上から順に判定するため、サブクラスを先に並べる
_STATUS_CODES: list[tuple[type[Exception], int]] = [
    (UnauthorizedException, 401),
    (ValidationException, 400),
    (InvalidDateRangeException, 400),
    (ForbiddenException, 403),
    (ResourceNotFoundException, 404),
    (BusinessRuleViolationException, 409),
]


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(error: Exception) -> dict:
    """例外を API レスポンスに変換する

    ドメイン例外・リクエスト検証エラーは 4xx、それ以外はインフラ障害として 500 を返す。
    """
    if isinstance(error, ValidationError):
        body = ErrorResponse(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            details=error.errors(include_url=False, include_context=False),
        )
        return api_response(400, body.model_dump(exclude_none=True))

    for exc_type, status_code in _STATUS_CODES:
        if isinstance(error, exc_type):
            body = ErrorResponse(
                error_code=getattr(error, "error_code", "ERROR"),
                message=str(error),
            )
            return api_response(status_code, body.model_dump(exclude_none=True))

    if isinstance(error, DomainException):
        body = ErrorResponse(error_code=error.error_code, message=str(error))
        return api_response(409, body.model_dump(exclude_none=True))

    body = ErrorResponse(error_code="INTERNAL_ERROR", message="Internal server error")
    return api_response(500, body.model_dump(exclude_none=True))
