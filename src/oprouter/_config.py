"""Config parsing for operation definitions.

Turns plain dicts (as loaded from JSON/YAML) into the immutable resource
types the router consumes:

  dict → parse_operation() → HttpOperation
  dict → parse_openapi_paths() → list[HttpOperation]

| Config shape                                  | Runtime type     |
|-----------------------------------------------|------------------|
| {"method", "path", "servers"?, "id"?}         | HttpOperation    |
| {"url", "description"?, "variables"?}         | HttpServer       |
| {"default", "enum"?, "description"?}          | ServerVariable   |
"""

from __future__ import annotations

from typing import Any

from oprouter._resource import HttpOperation, HttpServer, ServerVariable

# Keys of an OpenAPI path item that name operations.
HTTP_METHODS = frozenset({"get", "put", "post", "delete", "options", "head", "patch", "trace"})


class ConfigParseError(Exception):
    """Error parsing a config dict into resource types."""


def parse_operation(data: dict[str, Any]) -> HttpOperation:
    """Parse a dict into an HttpOperation.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"operation must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    return _build_operation(
        _require_str(data, "method", "operation"),
        _require_str(data, "path", "operation"),
        _parse_servers(data.get("servers", [])),
        data.get("id"),
    )


def parse_operations(data: list[dict[str, Any]]) -> list[HttpOperation]:
    """Parse a list of operation dicts, preserving order."""
    if not isinstance(data, list):
        msg = f"operations must be a list, got {type(data).__name__}"
        raise ConfigParseError(msg)
    return [parse_operation(op) for op in data]


def parse_server(data: dict[str, Any]) -> HttpServer:
    """Parse a server dict into an HttpServer.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"server must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    url = _require_str(data, "url", "server")
    raw_variables = data.get("variables", {})
    if not isinstance(raw_variables, dict):
        msg = f"server 'variables' must be a dict, got {type(raw_variables).__name__}"
        raise ConfigParseError(msg)

    variables = {
        str(name): _parse_server_variable(name, raw) for name, raw in raw_variables.items()
    }
    return HttpServer(url=url, variables=variables, description=data.get("description"))


def parse_openapi_paths(document: dict[str, Any]) -> list[HttpOperation]:
    """Flatten an OpenAPI-style document into operations.

    Servers are resolved per operation: operation-level ``servers`` override
    path-item ``servers``, which override document ``servers``. Non-method
    keys of a path item (``parameters``, ``summary``...) are ignored.
    Operations keep document order.
    """
    if not isinstance(document, dict):
        msg = f"document must be a dict, got {type(document).__name__}"
        raise ConfigParseError(msg)

    paths = document.get("paths")
    if paths is None:
        msg = "missing required field 'paths'"
        raise ConfigParseError(msg)
    if not isinstance(paths, dict):
        msg = f"'paths' must be a dict, got {type(paths).__name__}"
        raise ConfigParseError(msg)

    document_servers = _parse_servers(document.get("servers", []))
    operations: list[HttpOperation] = []
    for path, item in paths.items():
        if not isinstance(item, dict):
            msg = f"path item {path!r} must be a dict, got {type(item).__name__}"
            raise ConfigParseError(msg)
        item_servers = (
            _parse_servers(item["servers"]) if "servers" in item else document_servers
        )
        for method, raw_op in item.items():
            if method.lower() not in HTTP_METHODS:
                continue
            raw_op = raw_op or {}
            if not isinstance(raw_op, dict):
                msg = f"operation {method} {path} must be a dict, got {type(raw_op).__name__}"
                raise ConfigParseError(msg)
            servers = _parse_servers(raw_op["servers"]) if "servers" in raw_op else item_servers
            operations.append(_build_operation(method, path, servers, raw_op.get("operationId")))
    return operations


def _build_operation(
    method: str, path: str, servers: tuple[HttpServer, ...], op_id: Any
) -> HttpOperation:
    if not path.startswith("/"):
        msg = f"operation path must start with '/', got {path!r}"
        raise ConfigParseError(msg)
    if op_id is not None and not isinstance(op_id, str):
        msg = f"operation id must be a string, got {type(op_id).__name__}"
        raise ConfigParseError(msg)
    return HttpOperation(method=method.lower(), path=path, servers=servers, id=op_id)


def _parse_servers(data: Any) -> tuple[HttpServer, ...]:
    if not isinstance(data, list):
        msg = f"'servers' must be a list, got {type(data).__name__}"
        raise ConfigParseError(msg)
    return tuple(parse_server(s) for s in data)


def _parse_server_variable(name: str, data: dict[str, Any]) -> ServerVariable:
    if not isinstance(data, dict):
        msg = f"server variable {name!r} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if "default" not in data:
        msg = f"server variable {name!r} missing required field 'default'"
        raise ConfigParseError(msg)

    enum = data.get("enum", [])
    if not isinstance(enum, list):
        msg = f"server variable {name!r} 'enum' must be a list, got {type(enum).__name__}"
        raise ConfigParseError(msg)

    return ServerVariable(
        default=str(data["default"]),
        enum=tuple(str(v) for v in enum),
        description=data.get("description"),
    )


def _require_str(data: dict[str, Any], key: str, kind: str) -> str:
    if key not in data:
        msg = f"{kind} missing required field {key!r}"
        raise ConfigParseError(msg)
    value = data[key]
    if not isinstance(value, str):
        msg = f"{kind} {key!r} must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value
