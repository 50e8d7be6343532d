"""Request dispatcher for the Jira REST API.

Builds the URL and Basic Auth header, hands a single round trip to the
configured transport, and normalizes whatever comes back into ``Ok``/``Err``.

Normalization is an ordered chain; the first check that fails decides the
result:

1. transport failure          -> TransportError
2. 404                        -> NotFoundError ("404 - Not Found")
3. content-type mismatch      -> UnexpectedContentTypeError
4. body is not valid JSON     -> DecodeError

Any other status is judged by its content-type alone, so a JSON error body
from Jira (400, 401, 500) decodes to ``Ok``.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Callable

from . import codec
from .config import JiraConfig
from .errors import (
    JiraRequestError,
    NotFoundError,
    TransportError,
    UnexpectedContentTypeError,
)
from .result import Err, Result
from .transport import ErrorResponse, HttpTransport, TransportResult, build_transport

logger = logging.getLogger("jira_rest.request")

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
METHODS = ("GET", "POST")


@dataclass(frozen=True)
class RequestDescriptor:
    """One request to issue. ``query_params`` is a pre-encoded "a=b&c=d" string."""

    method: str
    resource_path: str
    query_params: str = ""
    payload: str = ""

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(
                f"Unsupported method '{self.method}', expected one of {METHODS}"
            )


def basic_auth_header(username: str, password: str) -> str:
    """Return "Basic base64(username:password)"."""
    encoded = base64.b64encode(f"{username}:{password}".encode()).decode()
    return f"Basic {encoded}"


def build_url(config: JiraConfig, resource_path: str, query_params: str) -> str:
    """Target URL: https://<account>/rest/api/latest<resource_path>?<query_params>."""
    return f"{config.base_url}{resource_path}?{query_params}"


# =============================================================================
# Response normalization
# =============================================================================


def _check_transport(response: TransportResult) -> None:
    if isinstance(response, ErrorResponse):
        raise TransportError(response.message)


def _check_not_found(response) -> None:
    if response.status_code == 404:
        raise NotFoundError()


def _check_content_type(response) -> None:
    if response.content_type != JSON_CONTENT_TYPE:
        raise UnexpectedContentTypeError(response.content_type)


RESPONSE_CHECKS: tuple[Callable[[TransportResult], None], ...] = (
    _check_transport,
    _check_not_found,
    _check_content_type,
)


def normalize_response(response: TransportResult) -> Result:
    """Turn a raw transport outcome into ``Ok(decoded JSON)`` or ``Err``."""
    try:
        for check in RESPONSE_CHECKS:
            check(response)
    except JiraRequestError as e:
        return Err.from_exception(e)
    return codec.decode(response.body)


# =============================================================================
# Dispatcher
# =============================================================================


class Dispatcher:
    """Issues single authenticated requests against one Jira account.

    Attributes:
        config: Account, credentials, timeout and transport selection
        transport: HTTP client performing the round trips
        base_url: Root URL of the account's REST API
        auth_header: Precomputed Basic Auth header value

    Example:
        >>> dispatcher = Dispatcher(JiraConfig(jira_account="company.atlassian.net"))
        >>> result = dispatcher.get_one("/issue/PROJ-1", "fields=summary")
        >>> if result.is_ok():
        ...     print(result.value["fields"]["summary"])
    """

    def __init__(
        self, config: JiraConfig, transport: HttpTransport | None = None
    ) -> None:
        self.config = config
        # Fail before a transport is built for an unusable account
        self.base_url = config.base_url
        if transport is None:
            transport = build_transport(config.jira_http_client)
        self.transport = transport
        self.auth_header = basic_auth_header(
            config.jira_username, config.jira_password.get_secret_value()
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": self.auth_header,
        }

    def request(
        self, method: str, resource_path: str, query_params: str = "", payload: str = ""
    ) -> Result:
        """Send one request and normalize the response.

        Args:
            method: "GET" or "POST"
            resource_path: Path below /rest/api/latest, with leading slash
            query_params: Encoded query string without the leading '?'
            payload: Request body, only sent with POST

        Returns:
            ``Ok(decoded JSON)`` or ``Err(reason)``.

        Raises:
            ValueError: If ``method`` is not GET or POST.
        """
        return self.dispatch(
            RequestDescriptor(method, resource_path, query_params, payload)
        )

    def dispatch(self, descriptor: RequestDescriptor) -> Result:
        url = build_url(self.config, descriptor.resource_path, descriptor.query_params)
        transport_name = getattr(
            self.transport, "name", type(self.transport).__name__
        )
        logger.debug(
            "jira_request_sending",
            extra={
                "method": descriptor.method,
                "url": url,
                "http_client": transport_name,
            },
        )

        if descriptor.method == "GET":
            raw = self.transport.get(
                url, timeout=self.config.jira_timeout, headers=self.headers
            )
        else:
            raw = self.transport.post(
                url,
                body=descriptor.payload,
                timeout=self.config.jira_timeout,
                headers=self.headers,
            )

        result = normalize_response(raw)
        if result.is_err():
            logger.warning(
                "jira_request_failed",
                extra={
                    "method": descriptor.method,
                    "url": url,
                    "reason": result.reason,
                },
            )
        return result

    def get_one(self, resource_path: str, query_params: str = "") -> Result:
        """GET an endpoint known to return a single object."""
        return self.request("GET", resource_path, query_params, "")

    def post(self, resource_path: str, query_params: str, payload) -> Result:
        """POST ``payload`` (a JSON string, or any JSON-serializable value)."""
        return self.request("POST", resource_path, query_params, codec.encode(payload))
