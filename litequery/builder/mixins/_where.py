from typing import TYPE_CHECKING, Any, cast

from mypy_extensions import trait
from typing_extensions import Self

if TYPE_CHECKING:
    from litequery.builder.protocols import BuilderProtocol

__all__ = ("ArgumentBindingMixin", "HavingClauseMixin", "WhereClauseMixin")


@trait
class WhereClauseMixin:
    """Mixin providing the WHERE clause for SELECT and DELETE builders."""

    __slots__ = ()

    def where(self, predicate: str) -> Self:
        """Set the WHERE predicate.

        The predicate is spliced verbatim; write ``?`` where values belong and
        bind them with :meth:`ArgumentBindingMixin.args`. A second call replaces
        the first, along with any arguments bound to it.

        Args:
            predicate: Raw SQL boolean expression.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._set_fragment("where", f"WHERE {predicate}")
        builder._last_predicate = "where"
        return self


@trait
class HavingClauseMixin:
    """Mixin providing the HAVING clause for SELECT builders."""

    __slots__ = ()

    def having(self, predicate: str) -> Self:
        """Set the HAVING predicate; bind its ``?`` values with ``args``."""
        builder = cast("BuilderProtocol", self)
        builder._set_fragment("having", f"HAVING {predicate}")
        builder._last_predicate = "having"
        return self


@trait
class ArgumentBindingMixin:
    """Mixin binding values to the placeholders of the latest predicate."""

    __slots__ = ()

    def args(self, *values: Any) -> Self:
        """Bind ``values`` to the most recently set WHERE or HAVING predicate.

        Values are appended in call order, so ``args(1).args(2)`` binds ``[1, 2]``.

        Raises:
            SQLBuilderError: If no predicate has been set yet.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if builder._last_predicate is None:
            builder._raise_sql_builder_error("args() must follow where() or having().")
        builder._fragments[builder._last_predicate].parameters.extend(values)
        return self
