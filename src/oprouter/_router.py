"""Router — select the single operation that best matches a request.

Routing runs in three steps:
1. Grade every candidate with evaluate() (path -> method -> server).
2. Apply the failure policy. Checks run in a fixed order and the first
   one that holds for the whole candidate set is raised:
   no server configuration, no server matched (both only when the request
   carries a base URL), no path matched, no method matched.
3. Disambiguate the remaining candidates with a fixed priority table.

INV: route() returns exactly one of the given operations or raises exactly
one RouteError subclass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from oprouter._base_url import match_base_url
from oprouter._errors import (
    NoMethodMatchedError,
    NoPathMatchedError,
    NoServerConfigurationError,
    NoServerMatchedError,
    RouteError,
)
from oprouter._evaluate import CandidateMatch, evaluate
from oprouter._path import match_path
from oprouter._types import MatchType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from oprouter._request import HttpRequest
    from oprouter._resource import HttpOperation
    from oprouter._types import BaseUrlMatcher, PathMatcher

logger = logging.getLogger("oprouter")

# (server grade, path grade) pairs, highest priority first. Combinations not
# listed fall through to declaration order.
PRIORITY_RULES: tuple[tuple[MatchType, MatchType], ...] = (
    (MatchType.CONCRETE, MatchType.CONCRETE),
    (MatchType.TEMPLATED, MatchType.CONCRETE),
    (MatchType.CONCRETE, MatchType.TEMPLATED),
)


@dataclass(frozen=True, slots=True)
class Router:
    """Stateless router with pluggable low-level matchers.

    Both matchers default to the built-in implementations. A Router holds
    no per-call state and may be shared between threads.
    """

    path_matcher: PathMatcher = match_path
    base_url_matcher: BaseUrlMatcher = match_base_url

    def match(
        self, operations: Iterable[HttpOperation], request: HttpRequest
    ) -> list[CandidateMatch]:
        """Grade every operation against the request, preserving order."""
        return [
            evaluate(request, op, self.path_matcher, self.base_url_matcher)
            for op in operations
        ]

    def route(
        self, operations: Iterable[HttpOperation], request: HttpRequest
    ) -> HttpOperation:
        """Return the operation that best matches the request.

        Raises:
            NoServerConfigurationError: base URL given, no server slot applicable
            NoServerMatchedError: base URL given, every server grade is NOMATCH
            NoPathMatchedError: no path template matches
            NoMethodMatchedError: a path matches but never with the request method
        """
        matches = self.match(operations, request)
        try:
            check_matches(matches, request)
        except RouteError as e:
            logger.debug("%s %s %s: %s", e.code, request.method, request.path, e.detail)
            raise
        operation = disambiguate(matches)
        logger.debug(
            "routed %s %s to %s %s",
            request.method,
            request.path,
            operation.method,
            operation.path,
        )
        return operation


_DEFAULT_ROUTER = Router()


def route(operations: Iterable[HttpOperation], request: HttpRequest) -> HttpOperation:
    """Route a request with the built-in path and base URL matchers."""
    return _DEFAULT_ROUTER.route(operations, request)


def check_matches(matches: Sequence[CandidateMatch], request: HttpRequest) -> None:
    """Raise the error for the first failure stage that holds for all candidates."""
    if request.base_url:
        if all(m.server_match is None for m in matches):
            raise NoServerConfigurationError(request.base_url)
        if all(m.server_match is MatchType.NOMATCH for m in matches):
            raise NoServerMatchedError(request.base_url)

    if not any(m.path_match is not MatchType.NOMATCH for m in matches):
        raise NoPathMatchedError(request.path)

    if not any(
        m.path_match is not MatchType.NOMATCH and m.method_match is not MatchType.NOMATCH
        for m in matches
    ):
        raise NoMethodMatchedError(request.path, request.method)


def disambiguate(matches: Sequence[CandidateMatch]) -> HttpOperation:
    """Pick one operation using PRIORITY_RULES, then declaration order.

    Only candidates whose path and method both matched take part. A server
    grade of None imposes no constraint, so the rule degrades to comparing
    path grades alone.

    Raises:
        ValueError: If no candidate matched on both path and method.
    """
    viable = [
        m
        for m in matches
        if m.path_match is not MatchType.NOMATCH and m.method_match is not MatchType.NOMATCH
    ]
    if not viable:
        msg = "disambiguate() requires at least one candidate matching path and method"
        raise ValueError(msg)

    for server_grade, path_grade in PRIORITY_RULES:
        for m in viable:
            if _is_server_and_path(m, server_grade, path_grade):
                return m.operation
    return viable[0].operation


def _is_server_and_path(
    match: CandidateMatch, server_grade: MatchType, path_grade: MatchType
) -> bool:
    if match.server_match is None:
        return match.path_match is path_grade
    return match.server_match is server_grade and match.path_match is path_grade
