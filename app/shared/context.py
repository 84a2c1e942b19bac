"""Request context management using contextvars.

Async-safe storage for request-scoped data: the request ID (set by
RequestIDMiddleware) and the organization being searched (set by the
organization dependency). Read by the logging filter.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_organization_id: ContextVar[str | None] = ContextVar("organization_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind the request ID; pass the token to reset_request_id when done."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    return _request_id.get()


def set_organization_id(organization_id: str | None) -> None:
    """Bind the organization for log records of this request/task."""
    _organization_id.set(organization_id)


def get_organization_id() -> str | None:
    return _organization_id.get()
