"""litequery: fluent SQL statement building for SQLite.

Builders render ``(sql, parameters)`` pairs for an execution layer the caller
owns; nothing here talks to a database.
"""

from litequery import builder, exceptions, utils
from litequery.__metadata__ import __version__
from litequery._sql import (
    alter_table,
    attach_database,
    begin,
    commit,
    create_index,
    create_table,
    create_trigger,
    create_view,
    delete_from,
    detach_database,
    drop_index,
    drop_table,
    drop_trigger,
    drop_view,
    insert_into,
    release_savepoint,
    rollback,
    savepoint,
    select,
    vacuum,
    with_,
)
from litequery.builder import Column, Field, SafeQuery, WithQuery
from litequery.config import BuilderConfig, builder_config, get_builder_config
from litequery.exceptions import ImproperConfigurationError, LiteQueryError, SQLBuilderError

__all__ = (
    "BuilderConfig",
    "Column",
    "Field",
    "ImproperConfigurationError",
    "LiteQueryError",
    "SQLBuilderError",
    "SafeQuery",
    "WithQuery",
    "__version__",
    "alter_table",
    "attach_database",
    "begin",
    "builder",
    "builder_config",
    "commit",
    "create_index",
    "create_table",
    "create_trigger",
    "create_view",
    "delete_from",
    "detach_database",
    "drop_index",
    "drop_table",
    "drop_trigger",
    "drop_view",
    "exceptions",
    "get_builder_config",
    "insert_into",
    "release_savepoint",
    "rollback",
    "savepoint",
    "select",
    "utils",
    "vacuum",
    "with_",
)
