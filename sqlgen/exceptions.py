from typing import Any, Optional

__all__ = (
    "ConditionGroupError",
    "InvalidLimitError",
    "QueryTypeConflictError",
    "QueryTypeNotSetError",
    "SQLBuilderError",
    "SQLGenError",
)


class SQLGenError(Exception):
    """Base exception class from which all sqlgen exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLGenError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLGenError):
    """Issues building or generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class QueryTypeNotSetError(SQLBuilderError):
    """Raised when a statement is built before any of select/insert_into/update/delete_from."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "No query type set. Start the statement with select, insert_into, update or delete_from."
        super().__init__(message)


class QueryTypeConflictError(SQLBuilderError):
    """Raised when a second statement-initiating call is made before build."""


class ConditionGroupError(SQLBuilderError):
    """Raised when AND/OR is requested before a WHERE or HAVING clause was started."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "AND/OR requires a preceding where() or having() call."
        super().__init__(message)


class InvalidLimitError(SQLBuilderError, ValueError):
    """Raised for negative or non-integer LIMIT/OFFSET values."""
