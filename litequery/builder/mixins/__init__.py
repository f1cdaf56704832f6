"""SQL statement builder mixins."""

from litequery.builder.mixins._join import JoinClauseMixin
from litequery.builder.mixins._order_limit import LimitOffsetClauseMixin, OrderByClauseMixin, ReturningClauseMixin
from litequery.builder.mixins._where import ArgumentBindingMixin, HavingClauseMixin, WhereClauseMixin

__all__ = (
    "ArgumentBindingMixin",
    "HavingClauseMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "ReturningClauseMixin",
    "WhereClauseMixin",
)
