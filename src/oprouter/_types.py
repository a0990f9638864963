"""Core match grades and collaborator protocols for oprouter.

The type system has three pieces:
- MatchType is the graded outcome of matching one dimension (path, method, server)
- ServerMatch adds None for "server matching not applicable"
- PathMatcher and BaseUrlMatcher are the ports for the two low-level matchers
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from oprouter._resource import HttpServer


class MatchType(Enum):
    """Graded match result, ordered by specificity.

    NOMATCH < TEMPLATED < CONCRETE. Method matching only ever produces
    NOMATCH or CONCRETE; methods have no templated form.
    """

    NOMATCH = "no-match"
    TEMPLATED = "templated"
    CONCRETE = "concrete"


# None maps to "not applicable": the request has no base URL, the operation
# declares no servers, or evaluation short-circuited before the server stage.
# It is never the same thing as MatchType.NOMATCH.
ServerMatch: TypeAlias = MatchType | None


@runtime_checkable
class PathMatcher(Protocol):
    """Grade a concrete request path against a path template."""

    def __call__(self, request_path: str, template: str, /) -> MatchType: ...


@runtime_checkable
class BaseUrlMatcher(Protocol):
    """Grade a request base URL against one declared server."""

    def __call__(self, server: HttpServer, base_url: str, /) -> MatchType: ...
