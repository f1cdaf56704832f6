from typing import Any

__all__ = ("ImproperConfigurationError", "LiteQueryError", "SQLBuilderError")


class LiteQueryError(Exception):
    """Base exception class from which all litequery exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``LiteQueryError``.

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


class SQLBuilderError(LiteQueryError):
    """Issues building SQL statements, such as calling chained steps out of order."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class ImproperConfigurationError(LiteQueryError):
    """Improper configuration error.

    Raised when a logging or builder setting is given a value litequery does not understand.
    """
