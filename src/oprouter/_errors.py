"""Routing errors.

Each failure stage has its own exception class with a stable code, a short
title and an HTTP status. The detail message names the offending request
path, base URL or method. Rendering onto a transport is left to the caller;
as_problem() gives the problem+json shaped fields.
"""

from __future__ import annotations

from typing import Any, ClassVar


class RouteError(Exception):
    """Base class for all routing failures."""

    code: ClassVar[str] = "ROUTE_ERROR"
    title: ClassVar[str] = "Route not resolved"
    status: ClassVar[int] = 404

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)

    def as_problem(self) -> dict[str, Any]:
        """Return the error as problem+json fields."""
        return {
            "type": self.code,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
        }


class NoServerConfigurationError(RouteError):
    """A base URL was supplied but no candidate has a server to match it against."""

    code = "NO_SERVER_CONFIGURATION_PROVIDED_ERROR"
    title = "Route not resolved, no server configuration provided"
    status = 404

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        super().__init__(
            f"No server configuration has been provided, although {base_url} "
            "is set as base url"
        )


class NoServerMatchedError(RouteError):
    """Servers are declared but none matches the supplied base URL."""

    code = "NO_SERVER_MATCHED_ERROR"
    title = "Route not resolved, no server matched"
    status = 404

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        super().__init__(
            f"The base url {base_url} hasn't been matched with any of the provided servers"
        )


class NoPathMatchedError(RouteError):
    """No candidate path template matches the request path."""

    code = "NO_PATH_MATCHED_ERROR"
    title = "Route not resolved, no path matched"
    status = 404

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"The route {path} hasn't been found in any operation definition")


class NoMethodMatchedError(RouteError):
    """The path matches, but not with the request method."""

    code = "NO_METHOD_MATCHED_ERROR"
    title = "Route resolved, but no method matched"
    status = 405

    def __init__(self, path: str, method: str) -> None:
        self.path = path
        self.method = method
        super().__init__(
            f'The route {path} has been matched, but there\'s no "{method}" method defined'
        )
