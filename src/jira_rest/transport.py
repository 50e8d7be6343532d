"""Pluggable HTTP transport used by the dispatcher.

A transport performs exactly one round trip and never raises for network
problems: it returns a ``Response`` or an ``ErrorResponse``. The default
implementation wraps a long-lived ``httpx.Client``; tests substitute a scripted
double implementing the same two methods.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol, Union, runtime_checkable

import httpx

logger = logging.getLogger("jira_rest.transport")

__all__ = [
    "ErrorResponse",
    "HttpTransport",
    "HttpxTransport",
    "Response",
    "TransportResult",
    "available_transports",
    "build_transport",
    "register_transport",
]


@dataclass(frozen=True)
class Response:
    """A completed HTTP exchange. Header names are lower-case."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")


@dataclass(frozen=True)
class ErrorResponse:
    """The round trip failed before a response arrived."""

    message: str


TransportResult = Union[Response, ErrorResponse]


@runtime_checkable
class HttpTransport(Protocol):
    """What the dispatcher needs from an HTTP client.

    ``timeout`` is in milliseconds.
    """

    name: str

    def get(
        self, url: str, *, timeout: int, headers: dict[str, str]
    ) -> TransportResult: ...

    def post(
        self, url: str, *, body: str, timeout: int, headers: dict[str, str]
    ) -> TransportResult: ...


class HttpxTransport:
    """Transport backed by a reusable ``httpx.Client`` (connection pooling).

    Example:
        >>> transport = HttpxTransport()
        >>> result = transport.get(url, timeout=30_000, headers={})
        >>> transport.close()
    """

    name = "httpx"

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the transport.

        Args:
            client: Pre-built client, e.g. one using ``httpx.MockTransport``.
                A default pooled client is created when omitted.
        """
        if client is None:
            client = httpx.Client(
                limits=httpx.Limits(
                    max_keepalive_connections=20,
                    max_connections=100,
                    keepalive_expiry=10.0,
                ),
            )
        self.client = client

    def get(
        self, url: str, *, timeout: int, headers: dict[str, str]
    ) -> TransportResult:
        return self._send("GET", url, None, timeout, headers)

    def post(
        self, url: str, *, body: str, timeout: int, headers: dict[str, str]
    ) -> TransportResult:
        return self._send("POST", url, body, timeout, headers)

    def _send(
        self,
        method: str,
        url: str,
        body: str | None,
        timeout: int,
        headers: dict[str, str],
    ) -> TransportResult:
        try:
            response = self.client.request(
                method,
                url,
                content=body.encode("utf-8") if body else None,
                headers=headers,
                timeout=httpx.Timeout(timeout / 1000.0),
            )
        except httpx.TimeoutException as e:
            logger.error("jira_transport_timeout", extra={"url": url, "error": str(e)})
            return ErrorResponse(message=f"timeout: {e}" if str(e) else "timeout")
        except httpx.HTTPError as e:
            logger.error("jira_transport_error", extra={"url": url, "error": str(e)})
            return ErrorResponse(message=str(e) or type(e).__name__)

        return Response(
            status_code=response.status_code,
            body=response.text,
            headers={k.lower(): v for k, v in response.headers.items()},
        )

    def close(self) -> None:
        self.client.close()


_TRANSPORTS: dict[str, Callable[[], HttpTransport]] = {
    HttpxTransport.name: HttpxTransport,
}


def register_transport(name: str, factory: Callable[[], HttpTransport]) -> None:
    """Make a transport selectable through ``jira_http_client``."""
    _TRANSPORTS[name.strip().lower()] = factory


def available_transports() -> list[str]:
    return sorted(_TRANSPORTS)


def build_transport(name: str) -> HttpTransport:
    """Instantiate the transport registered under ``name``.

    Raises:
        ValueError: If no transport is registered under that name.
    """
    try:
        factory = _TRANSPORTS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown http client '{name}'. Available: {', '.join(available_transports())}"
        ) from None
    return factory()
