"""Test utilities for oprouter.

Random generators for HTTP methods and path templates, for use in tests
and examples. Every helper takes an optional ``random.Random`` so a
failing case can be reproduced from its seed.

>>> import random
>>> from oprouter.testing import random_path
>>> random_path(fragments=2, include_templates=False, rng=random.Random(0)).count("/")
2
"""

from __future__ import annotations

import random
import string

HTTP_METHODS: tuple[str, ...] = (
    "get",
    "put",
    "post",
    "delete",
    "options",
    "head",
    "patch",
    "trace",
)


def pick_http_method(rng: random.Random | None = None) -> str:
    """Pick one lower-case HTTP method."""
    return (rng or random).choice(HTTP_METHODS)


def pick_http_methods(count: int = 2, rng: random.Random | None = None) -> list[str]:
    """Pick ``count`` distinct HTTP methods.

    Raises:
        ValueError: If count exceeds the number of known methods.
    """
    if count > len(HTTP_METHODS):
        msg = f"cannot pick {count} distinct methods out of {len(HTTP_METHODS)}"
        raise ValueError(msg)
    return (rng or random).sample(HTTP_METHODS, count)


def random_word(rng: random.Random | None = None, min_len: int = 3, max_len: int = 8) -> str:
    """A lower-case ASCII word."""
    r = rng or random
    return "".join(r.choices(string.ascii_lowercase, k=r.randint(min_len, max_len)))


def random_path(
    fragments: int = 3,
    include_templates: bool = True,
    leading_slash: bool = True,
    trailing_slash: bool = False,
    rng: random.Random | None = None,
) -> str:
    """Build a random path, optionally with ``{name}`` template fragments.

    With include_templates, each fragment is a variable with probability 1/2.
    """
    r = rng or random
    parts = [
        f"{{{random_word(r)}}}" if include_templates and r.random() < 0.5 else random_word(r)
        for _ in range(fragments)
    ]
    leading = "/" if leading_slash else ""
    trailing = "/" if trailing_slash else ""
    return f"{leading}{'/'.join(parts)}{trailing}"
