"""Scenario fixture loader for oprouter.

Loads YAML scenarios from tests/fixtures/ and converts them to oprouter
types for parametrized testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from oprouter import HttpOperation, HttpRequest, HttpServer, parse_operations

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class RoutingCase:
    """A single routing case from a scenario fixture."""

    fixture_name: str
    case_name: str
    operations: list[HttpOperation]
    request: HttpRequest
    expect: int | None
    error: str | None

    @property
    def id(self) -> str:
        return f"{self.fixture_name}/{self.case_name}"


def load_routing_fixtures() -> list[RoutingCase]:
    """Load every routing scenario under tests/fixtures/."""
    cases: list[RoutingCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_routing_file(yaml_file))
    return cases


def _load_routing_file(path: Path) -> list[RoutingCase]:
    """Load a single fixture file (may contain multiple documents)."""
    cases: list[RoutingCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            operations = parse_operations(doc["operations"])
            for case in doc["cases"]:
                cases.append(
                    RoutingCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        operations=operations,
                        request=_parse_request(case["request"]),
                        expect=case.get("expect"),
                        error=case.get("error"),
                    )
                )
    return cases


def _parse_request(spec: dict[str, Any]) -> HttpRequest:
    return HttpRequest(
        method=str(spec.get("method", "get")),
        raw_path=str(spec.get("path", "/")),
        base_url=spec.get("base_url"),
    )


def op(method: str, path: str, *urls: str, op_id: str | None = None) -> HttpOperation:
    """Shorthand for an operation with literal or templated server URLs."""
    return HttpOperation(method, path, tuple(HttpServer(u) for u in urls), op_id)
