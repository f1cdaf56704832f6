from typing import TYPE_CHECKING, cast

from mypy_extensions import trait
from typing_extensions import Self

from litequery.builder._base import PLACEHOLDER

if TYPE_CHECKING:
    from litequery.builder.protocols import BuilderProtocol

__all__ = ("LimitOffsetClauseMixin", "OrderByClauseMixin", "ReturningClauseMixin")


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY clause for SELECT builders."""

    __slots__ = ()

    def order_by(self, *columns: str) -> Self:
        """Set ``ORDER BY <columns>``. Direction keywords go inside the column text, e.g. ``"age DESC"``."""
        builder = cast("BuilderProtocol", self)
        if not columns:
            builder._raise_sql_builder_error("order_by() requires at least one column.")
        builder._set_fragment("order_by", f"ORDER BY {', '.join(columns)}")
        return self


@trait
class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses for SELECT builders.

    Both values are bound as arguments rather than spliced into the text.
    """

    __slots__ = ()

    def limit(self, value: int) -> Self:
        """Set ``LIMIT ?`` bound to ``value``.

        Args:
            value: The maximum number of rows to return.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._set_fragment("limit", f"LIMIT {PLACEHOLDER}", [value])
        return self

    def offset(self, value: int) -> Self:
        """Set ``OFFSET ?`` bound to ``value``.

        Args:
            value: The number of rows to skip before starting to return rows.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._set_fragment("offset", f"OFFSET {PLACEHOLDER}", [value])
        return self

    def paginate(self, page: int, size: int) -> Self:
        """Limit the result to one page of ``size`` rows.

        Pages are 1-based. The offset ``(page - 1) * size`` is only bound when it
        is positive, so the first page renders exactly like ``limit(size)``.

        Raises:
            SQLBuilderError: If ``page`` or ``size`` is less than 1.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if page < 1 or size < 1:
            builder._raise_sql_builder_error(f"Invalid page ({page}) or page size ({size}); both must be >= 1.")
        self.limit(size)
        offset = (page - 1) * size
        if offset > 0:
            self.offset(offset)
        else:
            builder._clear_fragment("offset")
        return self


@trait
class ReturningClauseMixin:
    """Mixin providing the RETURNING clause for INSERT and DELETE builders."""

    __slots__ = ()

    def returning(self, *columns: str) -> Self:
        """Set ``RETURNING <columns>``."""
        builder = cast("BuilderProtocol", self)
        if not columns:
            builder._raise_sql_builder_error("returning() requires at least one column.")
        builder._set_fragment("returning", f"RETURNING {', '.join(columns)}")
        return self
