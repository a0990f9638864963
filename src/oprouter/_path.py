"""Path template matching.

Templates are split on ``/`` into fragments. A fragment written as
``{name}`` accepts any non-empty request fragment; every other fragment
must equal the request fragment exactly. Request fragments are
percent-decoded before comparison.
"""

from __future__ import annotations

from urllib.parse import unquote

from oprouter._types import MatchType


def match_path(request_path: str, template: str, /) -> MatchType:
    """Grade a request path against a path template.

    Returns NOMATCH if fragment counts differ or any literal fragment
    differs, TEMPLATED if at least one fragment matched a variable,
    CONCRETE otherwise. A trailing slash counts as an extra empty fragment.

    Raises:
        ValueError: If either argument does not start with "/".
    """
    if not request_path.startswith("/"):
        msg = f"request path must start with '/': {request_path!r}"
        raise ValueError(msg)
    if not template.startswith("/"):
        msg = f"path template must start with '/': {template!r}"
        raise ValueError(msg)

    request_fragments = [unquote(f) for f in request_path[1:].split("/")]
    template_fragments = template[1:].split("/")
    if len(request_fragments) != len(template_fragments):
        return MatchType.NOMATCH

    result = MatchType.CONCRETE
    for fragment, pattern in zip(request_fragments, template_fragments, strict=True):
        if is_template_variable(pattern):
            if not fragment:
                return MatchType.NOMATCH
            result = MatchType.TEMPLATED
        elif fragment != pattern:
            return MatchType.NOMATCH
    return result


def is_template_variable(fragment: str) -> bool:
    """True for a fragment of the form ``{name}``."""
    return len(fragment) > 2 and fragment.startswith("{") and fragment.endswith("}")
