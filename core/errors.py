"""
core/errors.py -- Error taxonomy for the Vehicle Registry API.

Every failure a handler can surface to a client is one of these classes.
api/main.py registers one exception handler for ApiError that turns the
exception into its HTTP status and JSON body, so route code raises and never
builds error responses by hand.

  ValidationError      400  one message per violated rule, rendered as {"Mensagens": [...]}
  AuthenticationError  401  missing / invalid / expired / malformed token
  AuthorizationError   403  valid token, role not allowed on the route
  NotFoundError        404  lookup by id found nothing
  ConfigurationError   500  server cannot issue tokens (empty JWT_KEY)

Layer rule: core/ is the kernel. No imports from api/, auth/, or fleet/.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for errors translated to an HTTP response at the boundary."""

    http_status: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_response(self) -> dict:
        """Return the error envelope shared by every non-validation failure."""
        return {"error": {"code": self.code, "message": self.message, "detail": self.detail}}


class ValidationError(ApiError):
    http_status = 400
    code = "validation_error"

    def __init__(self, messages: list[str]) -> None:
        super().__init__("Request validation failed.")
        self.messages = list(messages)


class AuthenticationError(ApiError):
    http_status = 401
    code = "unauthorized"


class AuthorizationError(ApiError):
    http_status = 403
    code = "forbidden"


class NotFoundError(ApiError):
    http_status = 404
    code = "not_found"


class ConfigurationError(ApiError):
    http_status = 500
    code = "auth_not_configured"
