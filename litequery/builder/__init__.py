"""Statement builders for SQLite.

Each builder accumulates clause text and positional arguments through chained
calls and renders once, through ``query()`` (text) or ``build()`` (text and
arguments).
"""

from litequery.builder._base import PLACEHOLDER, QueryBuilder, SafeQuery, StatementBuilder
from litequery.builder._database import AttachDatabaseBuilder, DetachDatabaseBuilder
from litequery.builder._ddl import (
    AlterTableBuilder,
    CreateBuilder,
    CreateIndexBuilder,
    CreateTableBuilder,
    CreateTriggerBuilder,
    CreateViewBuilder,
    DDLBuilder,
    DropBuilder,
    VacuumBuilder,
)
from litequery.builder._delete import DeleteBuilder
from litequery.builder._insert import ConflictActionBuilder, ConflictBuilder, ConflictUpdateBuilder, InsertBuilder
from litequery.builder._select import SelectBuilder
from litequery.builder._transaction import TransactionBuilder
from litequery.builder._with import WithBuilder, WithQuery
from litequery.builder.column import Column, Field

__all__ = (
    "PLACEHOLDER",
    "AlterTableBuilder",
    "AttachDatabaseBuilder",
    "Column",
    "ConflictActionBuilder",
    "ConflictBuilder",
    "ConflictUpdateBuilder",
    "CreateBuilder",
    "CreateIndexBuilder",
    "CreateTableBuilder",
    "CreateTriggerBuilder",
    "CreateViewBuilder",
    "DDLBuilder",
    "DeleteBuilder",
    "DetachDatabaseBuilder",
    "DropBuilder",
    "Field",
    "InsertBuilder",
    "QueryBuilder",
    "SafeQuery",
    "SelectBuilder",
    "StatementBuilder",
    "TransactionBuilder",
    "VacuumBuilder",
    "WithBuilder",
    "WithQuery",
)
