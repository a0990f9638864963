"""Tests for operation config parsing (oprouter._config)."""

import pytest

from oprouter import (
    ConfigParseError,
    HttpOperation,
    HttpServer,
    ServerVariable,
    parse_openapi_paths,
    parse_operation,
    parse_operations,
    parse_server,
)


class TestParseOperation:
    def test_minimal(self) -> None:
        assert parse_operation({"method": "GET", "path": "/pets"}) == HttpOperation("get", "/pets")

    def test_with_servers_and_id(self) -> None:
        operation = parse_operation(
            {
                "method": "post",
                "path": "/pets",
                "id": "createPet",
                "servers": [{"url": "https://api.example.com"}],
            }
        )
        assert operation.id == "createPet"
        assert operation.servers == (HttpServer("https://api.example.com"),)

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a dict"):
            parse_operation(["get", "/pets"])  # type: ignore[arg-type]

    @pytest.mark.parametrize("missing", ["method", "path"])
    def test_missing_field(self, missing: str) -> None:
        data = {"method": "get", "path": "/pets"}
        del data[missing]
        with pytest.raises(ConfigParseError, match=f"missing required field '{missing}'"):
            parse_operation(data)

    def test_method_must_be_string(self) -> None:
        with pytest.raises(ConfigParseError, match="'method' must be a string"):
            parse_operation({"method": 1, "path": "/pets"})

    def test_relative_path(self) -> None:
        with pytest.raises(ConfigParseError, match="must start with '/'"):
            parse_operation({"method": "get", "path": "pets"})

    def test_id_must_be_string(self) -> None:
        with pytest.raises(ConfigParseError, match="id must be a string"):
            parse_operation({"method": "get", "path": "/pets", "id": 3})

    def test_servers_must_be_list(self) -> None:
        with pytest.raises(ConfigParseError, match="'servers' must be a list"):
            parse_operation({"method": "get", "path": "/pets", "servers": {"url": "x"}})


class TestParseOperations:
    def test_preserves_order(self) -> None:
        ops = parse_operations(
            [{"method": "get", "path": "/b"}, {"method": "get", "path": "/a"}]
        )
        assert [o.path for o in ops] == ["/b", "/a"]

    def test_not_a_list(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a list"):
            parse_operations({"method": "get"})  # type: ignore[arg-type]


class TestParseServer:
    def test_variables(self) -> None:
        server = parse_server(
            {
                "url": "https://{region}.example.com",
                "description": "regional",
                "variables": {"region": {"default": "eu", "enum": ["eu", "us"]}},
            }
        )
        assert server.description == "regional"
        assert server.variables == {"region": ServerVariable("eu", enum=("eu", "us"))}
        assert server.is_templated

    def test_missing_url(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'url'"):
            parse_server({})

    def test_variable_missing_default(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'default'"):
            parse_server({"url": "https://{env}", "variables": {"env": {}}})

    def test_variable_enum_must_be_list(self) -> None:
        with pytest.raises(ConfigParseError, match="'enum' must be a list"):
            parse_server(
                {"url": "https://{env}", "variables": {"env": {"default": "a", "enum": "a"}}}
            )

    def test_variables_must_be_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="'variables' must be a dict"):
            parse_server({"url": "https://{env}", "variables": []})


class TestParseOpenapiPaths:
    DOCUMENT = {
        "servers": [{"url": "https://api.example.com"}],
        "paths": {
            "/pets": {
                "summary": "Pets",
                "parameters": [],
                "get": {"operationId": "listPets"},
                "post": {
                    "operationId": "createPet",
                    "servers": [{"url": "https://write.example.com"}],
                },
            },
            "/pets/{id}": {
                "servers": [{"url": "https://{env}.example.com"}],
                "GET": {"operationId": "getPet"},
                "delete": None,
            },
        },
    }

    def test_flattens_in_document_order(self) -> None:
        ops = parse_openapi_paths(self.DOCUMENT)
        assert [(o.method, o.path, o.id) for o in ops] == [
            ("get", "/pets", "listPets"),
            ("post", "/pets", "createPet"),
            ("get", "/pets/{id}", "getPet"),
            ("delete", "/pets/{id}", None),
        ]

    def test_server_overrides(self) -> None:
        urls = [[s.url for s in o.servers] for o in parse_openapi_paths(self.DOCUMENT)]
        assert urls == [
            ["https://api.example.com"],
            ["https://write.example.com"],
            ["https://{env}.example.com"],
            ["https://{env}.example.com"],
        ]

    def test_no_document_servers(self) -> None:
        ops = parse_openapi_paths({"paths": {"/pets": {"get": {}}}})
        assert ops == [HttpOperation("get", "/pets")]

    def test_missing_paths(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'paths'"):
            parse_openapi_paths({})

    def test_path_item_must_be_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="path item '/pets' must be a dict"):
            parse_openapi_paths({"paths": {"/pets": []}})

    def test_operation_must_be_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="operation get /pets must be a dict"):
            parse_openapi_paths({"paths": {"/pets": {"get": "nope"}}})
