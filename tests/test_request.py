"""Tests for HttpRequest."""

from oprouter import HttpOperation, HttpRequest, route


class TestHttpRequest:
    def test_defaults(self) -> None:
        request = HttpRequest()
        assert request.method == "get"
        assert request.path == "/"
        assert request.base_url is None

    def test_query_string_stripped(self) -> None:
        assert HttpRequest("get", "/pets?limit=10&tag").path == "/pets"

    def test_query_string_ignored_by_routing(self) -> None:
        pets = HttpOperation("get", "/pets")
        assert route([pets], HttpRequest("get", "/pets?limit=10")) is pets

    def test_empty_base_url_is_none(self) -> None:
        assert HttpRequest("get", "/", base_url="").base_url is None

    def test_base_url_kept(self) -> None:
        request = HttpRequest("get", "/", base_url="https://api.example.com")
        assert request.base_url == "https://api.example.com"
