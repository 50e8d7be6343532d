"""Jira REST client facade.

Wires configuration, transport, dispatcher and paginator together and owns the
transport's lifecycle.
"""

import logging

from .config import JiraConfig, get_config
from .pagination import Paginator
from .request import Dispatcher
from .result import Result
from .transport import HttpTransport

logger = logging.getLogger("jira_rest.client")


class JiraClient:
    """Synchronous Jira REST API client with transparent pagination.

    Every operation returns ``Ok``/``Err``; expected failures (network errors,
    404s, bad content types, malformed JSON) never raise.

    Attributes:
        config: Settings for the target account
        dispatcher: Single-request engine
        paginator: Multi-page aggregation on top of ``dispatcher``

    Example:
        >>> with JiraClient(JiraConfig(jira_account="company.atlassian.net")) as client:
        ...     result = client.get_all("/search", "issues", "jql=project%3DPROJ")
        ...     if result.is_ok():
        ...         print(len(result.value))
    """

    def __init__(
        self,
        config: JiraConfig | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Settings to use. Defaults to the process-wide ``get_config()``.
            transport: Explicit transport, overriding ``config.jira_http_client``.
        """
        self.config = config or get_config()
        self.dispatcher = Dispatcher(self.config, transport)
        self.paginator = Paginator(
            self.dispatcher,
            page_size=self.config.jira_page_size,
            max_pages=self.config.jira_max_pages,
        )

    @property
    def transport(self) -> HttpTransport:
        return self.dispatcher.transport

    def request(
        self, method: str, resource_path: str, query_params: str = "", payload: str = ""
    ) -> Result:
        return self.dispatcher.request(method, resource_path, query_params, payload)

    def get_one(self, resource_path: str, query_params: str = "") -> Result:
        return self.dispatcher.get_one(resource_path, query_params)

    def get_all(
        self, resource_path: str, resource_field_name: str, query_params: str = ""
    ) -> Result:
        return self.paginator.get_all(resource_path, resource_field_name, query_params)

    def post(self, resource_path: str, query_params: str, payload) -> Result:
        return self.dispatcher.post(resource_path, query_params, payload)

    def close(self) -> None:
        """Release the transport's connections, if it holds any."""
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
