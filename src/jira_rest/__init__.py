"""Jira REST client - authenticated requests with transparent pagination.

Provides:
- Configuration management with environment overrides (pydantic-settings)
- Pluggable HTTP transport (httpx by default)
- Request dispatcher normalizing responses into Ok/Err results
- Offset-based pagination aggregating collection endpoints

Python Version: 3.10+ required
"""

# Configure before other imports so module loggers inherit the handler
from .logging_config import StructuredFormatter, TextFormatter, configure_logging

configure_logging()

from .__version__ import __version__
from .client import JiraClient
from .config import JiraConfig, get_config, reset_config
from .errors import (
    DecodeError,
    JiraRequestError,
    MalformedEnvelopeError,
    NotFoundError,
    PaginationLimitError,
    TransportError,
    UnexpectedContentTypeError,
)
from .pagination import Paginator
from .request import Dispatcher, RequestDescriptor, basic_auth_header
from .result import Err, Ok, Result
from .timing import timed_operation
from .transport import (
    ErrorResponse,
    HttpTransport,
    HttpxTransport,
    Response,
    build_transport,
    register_transport,
)

__all__ = [
    "DecodeError",
    "Dispatcher",
    "Err",
    "ErrorResponse",
    "HttpTransport",
    "HttpxTransport",
    "JiraClient",
    "JiraConfig",
    "JiraRequestError",
    "MalformedEnvelopeError",
    "NotFoundError",
    "Ok",
    "PaginationLimitError",
    "Paginator",
    "RequestDescriptor",
    "Response",
    "Result",
    "StructuredFormatter",
    "TextFormatter",
    "TransportError",
    "UnexpectedContentTypeError",
    "__version__",
    "basic_auth_header",
    "build_transport",
    "configure_logging",
    "get_config",
    "register_transport",
    "reset_config",
    "timed_operation",
]
