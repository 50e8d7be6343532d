"""Ok / Err result values returned by every request operation."""

from dataclasses import dataclass, field
from typing import Any, Union

from .errors import JiraRequestError

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True)
class Ok:
    """Successful request. ``value`` is decoded JSON or a list of page items."""

    value: Any

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed request.

    Attributes:
        reason: Human-readable failure description, e.g. "404 - Not Found".
        cause: The exception the failure was classified as. Not part of
            equality, so ``Err("timeout") == Err("timeout", cause=exc)``.
    """

    reason: str
    cause: JiraRequestError | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: JiraRequestError) -> "Err":
        return cls(str(exc), cause=exc)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Raise the underlying failure.

        Raises:
            JiraRequestError: ``cause`` if set, otherwise a new one carrying ``reason``.
        """
        if self.cause is not None:
            raise self.cause
        raise JiraRequestError(self.reason)

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok, Err]
