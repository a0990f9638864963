"""Per-candidate match evaluation.

evaluate() grades one operation against a request in a fixed order:
path, then method, then server. A failed stage short-circuits the rest,
so "no path matched" stays distinguishable from "path matched but nothing
else did".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from oprouter._base_url import match_base_url
from oprouter._path import match_path
from oprouter._types import MatchType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from oprouter._request import HttpRequest
    from oprouter._resource import HttpOperation, HttpServer
    from oprouter._types import BaseUrlMatcher, PathMatcher, ServerMatch


@dataclass(frozen=True, slots=True)
class CandidateMatch:
    """Graded outcome of matching one operation against a request.

    INV: path_match is NOMATCH -> method_match is NOMATCH and server_match is None.
    INV: server_match is None unless the request has a base URL, the
    operation declares servers, and both path and method matched.
    """

    operation: HttpOperation
    path_match: MatchType
    method_match: MatchType
    server_match: ServerMatch = None


def evaluate(
    request: HttpRequest,
    operation: HttpOperation,
    path_matcher: PathMatcher = match_path,
    base_url_matcher: BaseUrlMatcher = match_base_url,
) -> CandidateMatch:
    """Grade an operation against a request. Never raises a routing error."""
    path_match = path_matcher(request.path, operation.path)
    if path_match is MatchType.NOMATCH:
        return CandidateMatch(operation, path_match, MatchType.NOMATCH)

    method_match = (
        MatchType.CONCRETE
        if operation.method.lower() == request.method.lower()
        else MatchType.NOMATCH
    )
    if method_match is MatchType.NOMATCH:
        return CandidateMatch(operation, path_match, method_match)

    if request.base_url and operation.servers:
        server_match = match_server(operation.servers, request.base_url, base_url_matcher)
        return CandidateMatch(operation, path_match, method_match, server_match)

    return CandidateMatch(operation, path_match, method_match)


def match_server(
    servers: Iterable[HttpServer],
    base_url: str,
    base_url_matcher: BaseUrlMatcher = match_base_url,
) -> MatchType:
    """Reduce the grades of all servers to one.

    The first CONCRETE grade wins; otherwise the first TEMPLATED one;
    otherwise NOMATCH. Every server is graded, in declaration order.
    """
    grades = [
        grade
        for grade in (base_url_matcher(server, base_url) for server in servers)
        if grade is not MatchType.NOMATCH
    ]
    if MatchType.CONCRETE in grades:
        return MatchType.CONCRETE
    return grades[0] if grades else MatchType.NOMATCH
