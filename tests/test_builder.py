"""
Tests for the builder module.
"""

import dataclasses
import json

import pytest

from patternguide.creational.builder import (
    DEFAULT_TIMEOUT,
    HttpRequest,
    HttpRequestBuilder,
    RequestDirector,
)
from patternguide.errors import InvalidConfigurationError


@pytest.fixture
def builder():
    return HttpRequestBuilder().method("GET").url("https://api.example.com/items")


class TestFluentInterface:
    """Every setter returns the builder itself."""

    @pytest.mark.parametrize(
        "step",
        [
            lambda b: b.method("POST"),
            lambda b: b.url("https://example.com"),
            lambda b: b.header("Accept", "text/plain"),
            lambda b: b.headers({"X-Trace": "1"}),
            lambda b: b.query_param("q", "x"),
            lambda b: b.body("data"),
            lambda b: b.json_body({"a": 1}),
            lambda b: b.timeout(3),
            lambda b: b.retries(1),
            lambda b: b.follow_redirects(False),
        ],
    )
    def test_setter_returns_builder(self, step):
        b = HttpRequestBuilder()
        assert step(b) is b


class TestBuild:
    """Tests for build()."""

    def test_required_only_uses_documented_defaults(self, builder):
        request = builder.build()
        assert request.method == "GET"
        assert request.url == "https://api.example.com/items"
        assert dict(request.headers) == {}
        assert dict(request.query_params) == {}
        assert request.body is None
        assert request.timeout == DEFAULT_TIMEOUT == 30.0
        assert request.retries == 0
        assert request.follow_redirects is True

    def test_fields_match_what_was_set(self):
        request = (
            HttpRequestBuilder()
            .method("put")
            .url("https://api.example.com/items/7")
            .header("Authorization", "Bearer t")
            .body("payload")
            .timeout(2.5)
            .retries(3)
            .follow_redirects(False)
            .build()
        )
        assert request.method == "PUT"
        assert dict(request.headers) == {"Authorization": "Bearer t"}
        assert request.body == "payload"
        assert request.timeout == 2.5
        assert request.retries == 3
        assert request.follow_redirects is False

    def test_full_url_includes_query(self, builder):
        request = builder.query_param("page", 2).query_param("size", 10).build()
        assert request.full_url == "https://api.example.com/items?page=2&size=10"

    def test_json_body_sets_content_type(self):
        request = (
            HttpRequestBuilder()
            .method("POST")
            .url("https://example.com")
            .json_body({"b": 2, "a": 1})
            .build()
        )
        assert json.loads(request.body) == {"a": 1, "b": 2}
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.parametrize(
        "prepare, missing",
        [
            (lambda: HttpRequestBuilder(), ["method", "url"]),
            (lambda: HttpRequestBuilder().method("GET"), ["url"]),
            (lambda: HttpRequestBuilder().url("https://example.com"), ["method"]),
        ],
    )
    def test_missing_required_fields(self, prepare, missing):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            prepare().build()
        assert exc_info.value.fields == missing

    @pytest.mark.parametrize(
        "step",
        [
            lambda b: b.method("FETCH"),
            lambda b: b.url("ftp://example.com"),
            lambda b: b.url("not a url"),
            lambda b: b.timeout(0),
            lambda b: b.retries(-1),
            lambda b: b.body("not allowed on GET"),
            lambda b: b.timeout(True),
            lambda b: b.retries(True),
            lambda b: b.method(123),
            lambda b: b.url(42),
        ],
    )
    def test_invalid_values_rejected(self, builder, step):
        with pytest.raises(InvalidConfigurationError):
            step(builder).build()


class TestImmutability:
    """Built requests cannot change."""

    def test_fields_are_frozen(self, builder):
        request = builder.build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.url = "https://other.example.com"

    def test_headers_are_read_only(self, builder):
        request = builder.header("Accept", "text/html").build()
        with pytest.raises(TypeError):
            request.headers["Accept"] = "application/json"

    def test_direct_construction_is_read_only(self):
        headers = {"Accept": "text/html"}
        request = HttpRequest("GET", "https://example.com", headers=headers, query_params={"q": "1"})
        headers["Accept"] = "changed"
        assert request.headers["Accept"] == "text/html"
        with pytest.raises(TypeError):
            request.headers["X-New"] = "1"
        with pytest.raises(TypeError):
            request.query_params["q"] = "2"

    def test_later_builder_calls_do_not_leak(self, builder):
        first = builder.header("X-Id", "1").build()
        builder.header("X-Id", "2").header("X-Extra", "yes")
        assert dict(first.headers) == {"X-Id": "1"}

    def test_to_dict(self, builder):
        data = builder.build().to_dict()
        assert data["method"] == "GET"
        assert data["headers"] == {}


class TestDirector:
    """Tests for RequestDirector recipes."""

    def test_simple_get(self):
        request = RequestDirector(user_agent="tests/1.0").simple_get("https://example.com")
        assert isinstance(request, HttpRequest)
        assert request.method == "GET"
        assert request.headers["User-Agent"] == "tests/1.0"

    def test_json_post(self):
        request = RequestDirector().json_post("https://example.com/users", {"name": "Ada"})
        assert request.method == "POST"
        assert json.loads(request.body) == {"name": "Ada"}
        assert request.retries == 2


class TestMethodNormalization:
    """The method is stored as given and normalized when building."""

    def test_non_string_method_fails_at_build(self):
        builder = HttpRequestBuilder().method(123).url("https://example.com")
        with pytest.raises(InvalidConfigurationError) as exc_info:
            builder.build()
        assert exc_info.value.fields == ["method"]

    def test_lowercase_method_upper_cased(self):
        request = HttpRequestBuilder().method("delete").url("https://example.com").build()
        assert request.method == "DELETE"
