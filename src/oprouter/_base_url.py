"""Base URL matching against declared server URL templates.

A server URL such as ``https://{region}.api.example.com/v1`` is compiled
into a ``google-re2`` pattern: literal text is escaped, and each ``{name}``
becomes a group matching one of the variable's enum values, or any text
when the variable declares no enum.

The pattern is compiled once, when the HttpServer is constructed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import re2

from oprouter._types import MatchType

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from oprouter._resource import HttpServer, ServerVariable


def template_variables(url: str) -> list[str]:
    """Names of the ``{name}`` variables in a URL template, in order."""
    return [text for is_variable, text in _split_template(url) if is_variable]


def server_template_pattern(url: str, variables: Mapping[str, ServerVariable]) -> str:
    """Translate a server URL template into RE2 syntax.

    Unbalanced braces are kept as literal text.
    """
    parts: list[str] = []
    for is_variable, text in _split_template(url):
        if not is_variable:
            parts.append(re2.escape(text))
            continue
        variable = variables.get(text)
        if variable is not None and variable.enum:
            parts.append("(" + "|".join(re2.escape(v) for v in variable.enum) + ")")
        else:
            parts.append("(.*?)")
    return "".join(parts)


def compile_server_template(
    url: str, variables: Mapping[str, ServerVariable]
) -> re2.Pattern[str]:
    """Compile a server URL template. A trailing slash is not significant.

    Literal text and enum values are escaped, so every template compiles.
    """
    return re2.compile(server_template_pattern(url.rstrip("/"), variables))


def match_base_url(server: HttpServer, base_url: str, /) -> MatchType:
    """Grade a request base URL against one server.

    Returns NOMATCH when the URL does not fit the template, TEMPLATED when it
    fits a template with variables, CONCRETE when it equals a literal URL.
    """
    if server.pattern.fullmatch(base_url.rstrip("/")) is None:
        return MatchType.NOMATCH
    return MatchType.TEMPLATED if server.is_templated else MatchType.CONCRETE


def _split_template(url: str) -> Iterator[tuple[bool, str]]:
    """Yield (is_variable, text) pieces of a URL template."""
    pos = 0
    while True:
        start = url.find("{", pos)
        end = url.find("}", start + 1) if start != -1 else -1
        if start == -1 or end == -1:
            if pos < len(url):
                yield False, url[pos:]
            return
        if start > pos:
            yield False, url[pos:start]
        yield True, url[start + 1 : end]
        pos = end + 1
