from .http_response import api_response, error_response
from .request_context import UnauthorizedException, actor_from_event, path_parameter
from .validators import to_decimal

__all__ = [
    "api_response",
    "error_response",
    "actor_from_event",
    "path_parameter",
    "UnauthorizedException",
    "to_decimal",
]
