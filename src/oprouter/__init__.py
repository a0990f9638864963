"""oprouter — Route HTTP requests to operation definitions.

All public types are exported from this module for flat imports:

    from oprouter import HttpOperation, HttpRequest, HttpServer, route
"""

__version__ = "0.1.0"

# Low-level matchers and config parsing — see oprouter._config for details
from oprouter._base_url import match_base_url
from oprouter._config import (
    ConfigParseError,
    parse_openapi_paths,
    parse_operation,
    parse_operations,
    parse_server,
)

# Errors
from oprouter._errors import (
    NoMethodMatchedError,
    NoPathMatchedError,
    NoServerConfigurationError,
    NoServerMatchedError,
    RouteError,
)

# Evaluation
from oprouter._evaluate import CandidateMatch, evaluate, match_server
from oprouter._path import match_path
from oprouter._request import HttpRequest

# Resources
from oprouter._resource import HttpOperation, HttpServer, ServerVariable

# Router
from oprouter._router import PRIORITY_RULES, Router, check_matches, disambiguate, route
from oprouter._types import BaseUrlMatcher, MatchType, PathMatcher, ServerMatch

__all__ = [
    # Grades and protocols
    "MatchType",
    "ServerMatch",
    "PathMatcher",
    "BaseUrlMatcher",
    # Resources and request
    "HttpOperation",
    "HttpServer",
    "ServerVariable",
    "HttpRequest",
    # Low-level matchers
    "match_path",
    "match_base_url",
    # Evaluation
    "CandidateMatch",
    "evaluate",
    "match_server",
    # Router
    "Router",
    "route",
    "check_matches",
    "disambiguate",
    "PRIORITY_RULES",
    # Errors
    "RouteError",
    "NoServerConfigurationError",
    "NoServerMatchedError",
    "NoPathMatchedError",
    "NoMethodMatchedError",
    # Config
    "ConfigParseError",
    "parse_operation",
    "parse_operations",
    "parse_server",
    "parse_openapi_paths",
]
