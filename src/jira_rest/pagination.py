"""Offset-based pagination over Jira collection endpoints.

Jira pages collections with startAt/maxResults and reports the size of the
whole collection in ``total``. ``Paginator.get_all`` keeps requesting pages
until it holds at least ``total`` items, then returns them in fetch order.
"""

import logging
from typing import Any

from .config import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE
from .errors import JiraRequestError, MalformedEnvelopeError, PaginationLimitError
from .request import Dispatcher
from .result import Err, Ok, Result
from .timing import timed_operation

logger = logging.getLogger("jira_rest.pagination")


def page_query(start_at: int, query_params: str, page_size: int) -> str:
    """Query string for a follow-up page: startAt=<n>&<query_params>&maxResults=<size>."""
    parts = [f"startAt={start_at}"]
    if query_params:
        parts.append(query_params)
    parts.append(f"maxResults={page_size}")
    return "&".join(parts)


def read_envelope(envelope: Any, resource_field_name: str) -> tuple[int, list]:
    """Extract ``(total, items)`` from a decoded page.

    Raises:
        MalformedEnvelopeError: If ``total`` is not an integer or the item
            field is missing or not a list.
    """
    if not isinstance(envelope, dict):
        raise MalformedEnvelopeError(
            f"Expected a JSON object page, got {type(envelope).__name__}"
        )

    total = envelope.get("total")
    # bool is an int subclass; a boolean total is still malformed
    if not isinstance(total, int) or isinstance(total, bool):
        raise MalformedEnvelopeError("Page is missing an integer 'total' field")

    items = envelope.get(resource_field_name)
    if not isinstance(items, list):
        raise MalformedEnvelopeError(
            f"Page is missing a '{resource_field_name}' list"
        )
    return total, items


class Paginator:
    """Aggregates every page of a collection endpoint into one list.

    Attributes:
        dispatcher: Issues the individual page requests
        page_size: maxResults sent with follow-up requests
        max_pages: Request budget per call, None for no limit

    Example:
        >>> paginator = Paginator(dispatcher)
        >>> result = paginator.get_all("/search", "issues", "jql=project%3DPROJ")
        >>> issues = result.unwrap_or([])
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int | None = DEFAULT_MAX_PAGES,
    ) -> None:
        self.dispatcher = dispatcher
        self.page_size = page_size
        self.max_pages = max_pages

    def get_all(
        self, resource_path: str, resource_field_name: str, query_params: str = ""
    ) -> Result:
        """Fetch every page of ``resource_path``.

        The first request uses ``query_params`` untouched; later ones are
        offset by the number of items accumulated so far. Items are never
        de-duplicated, and the loop stops as soon as the accumulated count is
        >= the ``total`` of the latest page.

        Args:
            resource_path: Collection endpoint below /rest/api/latest
            resource_field_name: Envelope field holding the page items
            query_params: Encoded query string for the collection

        Returns:
            ``Ok(list of items)``, or the first ``Err`` encountered.
        """
        items: list = []
        pages = 0

        with timed_operation(
            "jira_get_all",
            logger,
            level=logging.DEBUG,
            extra={"resource_path": resource_path},
        ) as ctx:
            result = self.dispatcher.request("GET", resource_path, query_params, "")
            while True:
                pages += 1
                ctx["pages"] = pages

                if result.is_err():
                    ctx["status"] = "failed"
                    ctx["error"] = result.reason
                    return result

                try:
                    total, page_items = read_envelope(result.value, resource_field_name)
                except JiraRequestError as e:
                    ctx["status"] = "failed"
                    ctx["error"] = str(e)
                    logger.warning(
                        "jira_malformed_page",
                        extra={"resource_path": resource_path, "error": str(e)},
                    )
                    return Err.from_exception(e)

                items.extend(page_items)
                ctx["items"] = len(items)
                logger.debug(
                    "jira_get_all_page",
                    extra={
                        "resource_path": resource_path,
                        "page": pages,
                        "page_items": len(page_items),
                        "total_so_far": len(items),
                        "total": total,
                    },
                )

                if len(items) >= total:
                    return Ok(items)

                if self.max_pages is not None and pages >= self.max_pages:
                    error = PaginationLimitError(self.max_pages, len(items), total)
                    ctx["status"] = "failed"
                    ctx["error"] = str(error)
                    logger.warning(
                        "jira_pagination_limit_reached",
                        extra={"resource_path": resource_path, "error": str(error)},
                    )
                    return Err.from_exception(error)

                result = self.dispatcher.request(
                    "GET",
                    resource_path,
                    page_query(len(items), query_params, self.page_size),
                    "",
                )
