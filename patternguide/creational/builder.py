"""
Builder pattern: fluent, validated assembly of an immutable HTTP request.

Every setter on ``HttpRequestBuilder`` returns the builder so calls can be
chained. ``build()`` checks the required fields and the value ranges before
handing out a frozen ``HttpRequest``.
"""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlencode, urlparse

from ..errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")
METHODS_WITHOUT_BODY = ("GET", "HEAD")

DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 0
DEFAULT_FOLLOW_REDIRECTS = True


def _frozen(mapping: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class HttpRequest:
    """Immutable request value object produced by ``HttpRequestBuilder``."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=_frozen)
    query_params: Mapping[str, str] = field(default_factory=_frozen)
    body: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS

    def __post_init__(self):
        object.__setattr__(self, "headers", _frozen(self.headers))
        object.__setattr__(self, "query_params", _frozen(self.query_params))

    @property
    def full_url(self) -> str:
        if not self.query_params:
            return self.url
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{urlencode(dict(self.query_params))}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "query_params": dict(self.query_params),
            "body": self.body,
            "timeout": self.timeout,
            "retries": self.retries,
            "follow_redirects": self.follow_redirects,
        }


class HttpRequestBuilder:
    """Step-wise assembler for ``HttpRequest``; ``method`` and ``url`` are required."""

    def __init__(self):
        self._method: Optional[str] = None
        self._url: Optional[str] = None
        self._headers: Dict[str, str] = {}
        self._query_params: Dict[str, str] = {}
        self._body: Optional[str] = None
        self._timeout: float = DEFAULT_TIMEOUT
        self._retries: int = DEFAULT_RETRIES
        self._follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS

    def method(self, method: str) -> "HttpRequestBuilder":
        self._method = method
        return self

    def url(self, url: str) -> "HttpRequestBuilder":
        self._url = url
        return self

    def header(self, name: str, value: str) -> "HttpRequestBuilder":
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> "HttpRequestBuilder":
        self._headers.update(headers)
        return self

    def query_param(self, name: str, value: Any) -> "HttpRequestBuilder":
        self._query_params[name] = str(value)
        return self

    def body(self, body: Optional[str]) -> "HttpRequestBuilder":
        self._body = body
        return self

    def json_body(self, payload: Any) -> "HttpRequestBuilder":
        self._body = json.dumps(payload, sort_keys=True)
        self._headers["Content-Type"] = "application/json"
        return self

    def timeout(self, seconds: float) -> "HttpRequestBuilder":
        self._timeout = seconds
        return self

    def retries(self, count: int) -> "HttpRequestBuilder":
        self._retries = count
        return self

    def follow_redirects(self, enabled: bool = True) -> "HttpRequestBuilder":
        self._follow_redirects = enabled
        return self

    def _validate(self) -> str:
        """Check every field and return the normalized method."""
        missing: List[str] = [
            name for name, value in (("method", self._method), ("url", self._url)) if not value
        ]
        if missing:
            raise InvalidConfigurationError(
                f"Cannot build request, missing required field(s): {', '.join(missing)}",
                fields=missing,
            )

        method = self._method.upper() if isinstance(self._method, str) else self._method
        if method not in SUPPORTED_METHODS:
            raise InvalidConfigurationError(
                f"Unsupported method: {self._method!r}. Supported: {list(SUPPORTED_METHODS)}",
                fields=["method"],
            )

        if not isinstance(self._url, str):
            raise InvalidConfigurationError(f"URL must be a string: {self._url!r}", fields=["url"])

        parsed = urlparse(self._url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidConfigurationError(
                f"URL must be absolute http(s): {self._url}", fields=["url"]
            )

        if (
            isinstance(self._timeout, bool)
            or not isinstance(self._timeout, (int, float))
            or self._timeout <= 0
        ):
            raise InvalidConfigurationError("timeout must be positive", fields=["timeout"])

        if isinstance(self._retries, bool) or not isinstance(self._retries, int) or self._retries < 0:
            raise InvalidConfigurationError("retries must be a non-negative integer", fields=["retries"])

        if self._body is not None and method in METHODS_WITHOUT_BODY:
            raise InvalidConfigurationError(
                f"{method} requests cannot carry a body", fields=["body"]
            )

        return method

    def build(self) -> HttpRequest:
        """
        Validate the collected fields and create the request.

        Returns:
            A new ``HttpRequest``; later builder calls do not affect it.

        Raises:
            InvalidConfigurationError: If a required field is missing or a value is invalid
        """
        method = self._validate()
        request = HttpRequest(
            method=method,
            url=self._url,
            headers=_frozen(self._headers),
            query_params=_frozen(self._query_params),
            body=self._body,
            timeout=float(self._timeout),
            retries=self._retries,
            follow_redirects=self._follow_redirects,
        )
        logger.debug("Built %s %s", request.method, request.full_url)
        return request


class RequestDirector:
    """Knows a few common recipes and drives a fresh builder for each."""

    def __init__(self, user_agent: str = "patternguide/0.1.0"):
        self.user_agent = user_agent

    def simple_get(self, url: str) -> HttpRequest:
        return (
            HttpRequestBuilder()
            .method("GET")
            .url(url)
            .header("User-Agent", self.user_agent)
            .build()
        )

    def json_post(self, url: str, payload: Any) -> HttpRequest:
        return (
            HttpRequestBuilder()
            .method("POST")
            .url(url)
            .header("User-Agent", self.user_agent)
            .header("Accept", "application/json")
            .json_body(payload)
            .retries(2)
            .build()
        )


def demo(transcript) -> None:
    transcript.write("Builder: fluent assembly with a validating build()")

    request = (
        HttpRequestBuilder()
        .method("get")
        .url("https://api.example.com/users")
        .header("Accept", "application/json")
        .query_param("page", 2)
        .timeout(5)
        .build()
    )
    transcript.write(f"  built: {request.method} {request.full_url}")
    transcript.write(
        f"  defaults kept: retries={request.retries}, follow_redirects={request.follow_redirects}"
    )

    post = RequestDirector().json_post("https://api.example.com/users", {"name": "Ada"})
    transcript.write(f"  director recipe: {post.method} {post.url} body={post.body}")

    try:
        HttpRequestBuilder().url("https://api.example.com").build()
    except InvalidConfigurationError as e:
        transcript.write(f"  rejected: {e}")
