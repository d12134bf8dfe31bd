"""Tests for URL building, auth headers and body decoding."""

import base64

import pytest

from core.headers import USER_AGENT, HeaderBuilder, basic_credentials
from core.payload import ParsedJson, RawText, decode_payload, encode_body
from core.upstream_url import build_upstream_url, normalize_tool_path, strip_origin


class TestStripOrigin:
    @pytest.mark.parametrize(
        "origin",
        ["https://a.example", "https://a.example/", "https://a.example//", "", "/"],
    )
    def test_idempotent(self, origin: str) -> None:
        assert strip_origin(strip_origin(origin)) == strip_origin(origin)

    def test_single_trailing_slash_removed(self) -> None:
        assert strip_origin("https://a.example/") == "https://a.example"


class TestBuildUpstreamUrl:
    def test_query_preserved_exactly(self) -> None:
        path = "/wp-json/wp/v2/posts"
        query = "per_page=5&_embed&search=caf%C3%A9+au%20lait&b=2&a=1"

        url = build_upstream_url("https://a.example/", path, query)

        assert url == f"https://a.example{path}?{query}"
        assert url.endswith(f"{path}?{query}")

    def test_query_omitted_when_absent(self) -> None:
        assert build_upstream_url("https://a.example", "/wp-json/", None) == "https://a.example/wp-json/"
        assert build_upstream_url("https://a.example", "/wp-json/", "") == "https://a.example/wp-json/"

    def test_encoded_path_untouched(self) -> None:
        url = build_upstream_url("https://a.example", "/wp-json/wp/v2/tags%2Fx", None)
        assert url == "https://a.example/wp-json/wp/v2/tags%2Fx"


class TestNormalizeToolPath:
    def test_adds_leading_slash(self) -> None:
        assert normalize_tool_path("wp/v2/posts") == "/wp/v2/posts"

    def test_keeps_existing_slash(self) -> None:
        assert normalize_tool_path("/wp-json/wp/v2/posts") == "/wp-json/wp/v2/posts"

    def test_empty_path(self) -> None:
        assert normalize_tool_path("") == "/"


class TestHeaders:
    def test_basic_credentials(self) -> None:
        encoded = basic_credentials("editor", "abcd efgh")
        assert base64.b64decode(encoded).decode() == "editor:abcd efgh"

    def test_fixed_headers(self) -> None:
        headers = HeaderBuilder().build_wordpress_headers("editor", "pw")

        assert headers["Authorization"] == "Basic " + base64.b64encode(b"editor:pw").decode()
        assert headers["Content-Type"] == "application/json"
        assert headers["User-Agent"] == USER_AGENT


class TestPayload:
    def test_json_body(self) -> None:
        assert decode_payload('[{"id": 1}]') == ParsedJson([{"id": 1}])

    @pytest.mark.parametrize(
        "text",
        ["", "<html>Error</html>", "{not json", "NaN", '{"x": Infinity}', "-Infinity", "[" * 100000],
    )
    def test_raw_fallback(self, text: str) -> None:
        payload = decode_payload(text)

        assert payload == RawText(text)
        assert payload.as_json() == {"raw": text}

    def test_encode_body_is_compact(self) -> None:
        assert encode_body({"title": "Hi", "tags": [1, 2]}) == b'{"title":"Hi","tags":[1,2]}'
