"""HttpRequest — the incoming request as seen by the router.

Only the parts routing reads are kept: the method, the path, and the
optional base URL that switches server matching on.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context for routing.

    raw_path may carry a query string; it is cut off before path matching.
    An empty base_url is normalised to None, so server grades stay
    "not applicable" rather than NOMATCH.
    """

    method: str = "get"
    raw_path: str = "/"
    base_url: str | None = None
    _clean_path: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.base_url:
            object.__setattr__(self, "base_url", None)
        object.__setattr__(self, "_clean_path", self.raw_path.split("?", 1)[0])

    @property
    def path(self) -> str:
        """Path without query string."""
        return self._clean_path
