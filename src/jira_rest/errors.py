"""Failure taxonomy for Jira requests.

These are raised inside the dispatcher and paginator and converted to
``Err`` values before leaving them, so callers branch on the result instead of
catching. The original exception stays reachable through ``Err.cause``.
"""


class JiraRequestError(Exception):
    """Base class for every expected request failure."""

    pass


class TransportError(JiraRequestError):
    """The transport could not complete the round trip (connection, timeout)."""

    pass


class NotFoundError(JiraRequestError):
    """The server answered 404."""

    def __init__(self, message: str = "404 - Not Found"):
        super().__init__(message)


class UnexpectedContentTypeError(JiraRequestError):
    """The response was not ``application/json;charset=UTF-8``."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"Invalid content-type returned: {content_type or ''}")


class DecodeError(JiraRequestError):
    """The response body was not valid JSON."""

    pass


class MalformedEnvelopeError(JiraRequestError):
    """A paginated response lacked an integer ``total`` or its item list."""

    pass


class PaginationLimitError(JiraRequestError):
    """Pagination hit the configured page limit before reaching ``total``."""

    def __init__(self, max_pages: int, fetched: int, total: int):
        self.max_pages = max_pages
        self.fetched = fetched
        self.total = total
        super().__init__(
            f"Pagination stopped after {max_pages} pages: "
            f"{fetched} of {total} items fetched"
        )
