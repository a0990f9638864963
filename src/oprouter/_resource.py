"""Resource definitions — the candidates a request is routed to.

HttpOperation is the unit the router selects. It pairs a path template and
an HTTP method with the servers the operation is reachable on. Operations
are immutable so a single routing call can never observe them changing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from oprouter._base_url import compile_server_template, template_variables

if TYPE_CHECKING:
    from collections.abc import Mapping

    import re2


@dataclass(frozen=True, slots=True)
class ServerVariable:
    """A substitution variable in a server URL template.

    When enum is non-empty, only those values satisfy the variable.
    """

    default: str
    enum: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True, slots=True)
class HttpServer:
    """A server base URL, optionally templated with ``{name}`` variables.

    The URL template is compiled once, at construction time.
    """

    url: str
    variables: Mapping[str, ServerVariable] = field(default_factory=dict)
    description: str | None = None
    _pattern: re2.Pattern[str] = field(init=False, repr=False, compare=False)
    _templated: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern", compile_server_template(self.url, self.variables))
        object.__setattr__(self, "_templated", bool(template_variables(self.url)))

    @property
    def pattern(self) -> re2.Pattern[str]:
        """Compiled URL pattern (trailing slash stripped)."""
        return self._pattern

    @property
    def is_templated(self) -> bool:
        """True if the URL contains at least one variable."""
        return self._templated


@dataclass(frozen=True, slots=True)
class HttpOperation:
    """A routable operation: path template, method, and declared servers.

    Servers are kept in declaration order; the first concrete match wins.
    An empty tuple means the operation declares no servers.
    """

    method: str
    path: str
    servers: tuple[HttpServer, ...] = ()
    id: str | None = None
