"""Entry points: one constructor function per statement family.

Each call allocates a fresh builder; nothing is shared between calls.

    >>> select("name", "age").from_("users").limit(1).build()
    SafeQuery(sql='SELECT name, age FROM users LIMIT ?', parameters=[1])
    >>> begin("IMMEDIATE").query()
    'BEGIN IMMEDIATE TRANSACTION;'
"""

from collections.abc import Sequence

from litequery.builder import (
    AlterTableBuilder,
    AttachDatabaseBuilder,
    Column,
    CreateIndexBuilder,
    CreateTableBuilder,
    CreateTriggerBuilder,
    CreateViewBuilder,
    DeleteBuilder,
    DetachDatabaseBuilder,
    DropBuilder,
    InsertBuilder,
    SelectBuilder,
    TransactionBuilder,
    VacuumBuilder,
    WithBuilder,
    WithQuery,
)

__all__ = (
    "alter_table",
    "attach_database",
    "begin",
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
    "insert_into",
    "release_savepoint",
    "rollback",
    "savepoint",
    "select",
    "vacuum",
    "with_",
)


# -- transaction control --
def begin(mode: str = "") -> TransactionBuilder:
    """``BEGIN [<mode>] TRANSACTION;``; chain ``.commit()`` to append ``COMMIT TRANSACTION;``."""
    return TransactionBuilder().begin(mode)


def commit() -> TransactionBuilder:
    return TransactionBuilder().commit()


def rollback(savepoint: str = "") -> TransactionBuilder:
    """``ROLLBACK TRANSACTION;`` or ``ROLLBACK TRANSACTION TO SAVEPOINT <savepoint>;``."""
    return TransactionBuilder().rollback(savepoint)


def savepoint(name: str) -> TransactionBuilder:
    return TransactionBuilder().savepoint(name)


def release_savepoint(name: str) -> TransactionBuilder:
    return TransactionBuilder().release_savepoint(name)


# -- DDL --
def create_table(name: str, columns: Sequence[Column]) -> CreateTableBuilder:
    return CreateTableBuilder(name, columns)


def drop_table(name: str) -> DropBuilder:
    return DropBuilder("TABLE", name)


def alter_table(name: str) -> AlterTableBuilder:
    """Start an ALTER TABLE; follow with exactly one of rename_to, rename_column, add_column or drop_column."""
    return AlterTableBuilder(name)


def create_index(name: str, table: str, columns: Sequence[str], unique: bool = False) -> CreateIndexBuilder:
    return CreateIndexBuilder(name, table, columns, unique)


def drop_index(name: str) -> DropBuilder:
    return DropBuilder("INDEX", name)


def create_view(name: str, select_sql: str) -> CreateViewBuilder:
    return CreateViewBuilder(name, select_sql)


def drop_view(name: str) -> DropBuilder:
    return DropBuilder("VIEW", name)


def create_trigger(name: str, table: str, timing: str, event: str, body: str) -> CreateTriggerBuilder:
    return CreateTriggerBuilder(name, table, timing, event, body)


def drop_trigger(name: str) -> DropBuilder:
    return DropBuilder("TRIGGER", name)


def vacuum(schema: str = "", target_file: str = "") -> VacuumBuilder:
    return VacuumBuilder(schema, target_file)


def attach_database(path: str, alias: str) -> AttachDatabaseBuilder:
    """``ATTACH DATABASE ? AS ?;`` with ``path`` and ``alias`` bound, not spliced."""
    return AttachDatabaseBuilder(path, alias)


def detach_database(alias: str) -> DetachDatabaseBuilder:
    return DetachDatabaseBuilder(alias)


# -- DML --
def delete_from(table: str) -> DeleteBuilder:
    return DeleteBuilder(table)


def insert_into(table: str) -> InsertBuilder:
    return InsertBuilder(table)


def select(*columns: str) -> SelectBuilder:
    return SelectBuilder(*columns)


def with_(*queries: WithQuery) -> WithBuilder:
    """Prefix the next statement with ``WITH <name> AS (<select>), ...``."""
    return WithBuilder(*queries)
