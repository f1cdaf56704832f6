# DDL builders for litequery: CREATE/DROP of tables, indexes, views and triggers, ALTER TABLE and VACUUM.

from collections.abc import Sequence
from typing import Any

from typing_extensions import Self

from litequery.builder._base import StatementBuilder
from litequery.builder.column import Column

__all__ = (
    "AlterTableBuilder",
    "CreateBuilder",
    "CreateIndexBuilder",
    "CreateTableBuilder",
    "CreateTriggerBuilder",
    "CreateViewBuilder",
    "DDLBuilder",
    "DropBuilder",
    "VacuumBuilder",
)


class DDLBuilder(StatementBuilder):
    """Base class for DDL builders. DDL statements bind no arguments and end with ``;``."""

    __slots__ = ()


class CreateBuilder(DDLBuilder):
    """Base class for CREATE builders, which share the ``TEMP`` and ``IF NOT EXISTS`` options."""

    __slots__ = ("_if_not_exists", "_temporary")

    def __init__(self) -> None:
        self._if_not_exists = False
        self._temporary = False

    def _create_prefix(self, kind: str) -> str:
        """Return ``CREATE [TEMP] <KIND> [IF NOT EXISTS]``."""
        parts = ["CREATE"]
        if self._temporary:
            parts.append("TEMP")
        parts.append(kind)
        if self._if_not_exists:
            parts.append("IF NOT EXISTS")
        return " ".join(parts)


class _TemporaryMixin:
    __slots__ = ()

    _temporary: bool

    def temporary(self) -> Self:
        """Create the object in the ``temp`` schema."""
        self._temporary = True
        return self


class _IfNotExistsMixin:
    __slots__ = ()

    _if_not_exists: bool

    def if_not_exists(self) -> Self:
        """Add IF NOT EXISTS clause."""
        self._if_not_exists = True
        return self


# --- CREATE TABLE ---
class CreateTableBuilder(_TemporaryMixin, _IfNotExistsMixin, CreateBuilder):
    """Builder for CREATE TABLE statements.

    Example:
        create_table(
            "users",
            [
                Column("id", "INTEGER", primary_key=True, auto_increment=True),
                Column("email", "TEXT", not_null=True, unique=True),
            ],
        ).query()
    """

    __slots__ = ("_columns", "_table_name")

    def __init__(self, table_name: str, columns: Sequence[Column]) -> None:
        super().__init__()
        self._table_name = table_name
        self._columns = list(columns)

    def _compile(self) -> tuple[str, list[Any]]:
        if not self._columns:
            self._raise_sql_builder_error(f"CREATE TABLE {self._table_name} requires at least one column.")
        definitions = ", ".join(column.to_sql() for column in self._columns)
        return f"{self._create_prefix('TABLE')} {self._table_name} ({definitions})", []


# --- DROP TABLE / INDEX / VIEW / TRIGGER ---
class DropBuilder(DDLBuilder):
    """Builder for ``DROP <KIND> [IF EXISTS] <name>``."""

    __slots__ = ("_if_exists", "_kind", "_name")

    def __init__(self, kind: str, name: str) -> None:
        super().__init__()
        self._kind = kind
        self._name = name
        self._if_exists = False

    def if_exists(self) -> Self:
        """Add IF EXISTS clause."""
        self._if_exists = True
        return self

    def _compile(self) -> tuple[str, list[Any]]:
        if_exists = " IF EXISTS" if self._if_exists else ""
        return f"DROP {self._kind}{if_exists} {self._name}", []


# --- ALTER TABLE ---
class AlterTableBuilder(DDLBuilder):
    """Builder for ALTER TABLE statements.

    SQLite allows exactly one alteration per statement, so each operation may be
    chosen once; a second one raises :class:`~litequery.exceptions.SQLBuilderError`.
    """

    __slots__ = ("_operation", "_table_name")

    def __init__(self, table_name: str) -> None:
        super().__init__()
        self._table_name = table_name
        self._operation: str | None = None

    def _set_operation(self, operation: str) -> Self:
        if self._operation is not None:
            self._raise_sql_builder_error(
                f"ALTER TABLE {self._table_name} already has an operation ({self._operation}); "
                "SQLite applies one alteration per statement."
            )
        self._operation = operation
        return self

    def rename_to(self, new_name: str) -> Self:
        return self._set_operation(f"RENAME TO {new_name}")

    def rename_column(self, old_name: str, new_name: str) -> Self:
        return self._set_operation(f"RENAME COLUMN {old_name} TO {new_name}")

    def add_column(self, column: Column) -> Self:
        return self._set_operation(f"ADD COLUMN {column.to_sql()}")

    def drop_column(self, name: str) -> Self:
        return self._set_operation(f"DROP COLUMN {name}")

    def _compile(self) -> tuple[str, list[Any]]:
        if self._operation is None:
            self._raise_sql_builder_error(f"ALTER TABLE {self._table_name} has no operation.")
        return f"ALTER TABLE {self._table_name} {self._operation}", []


# --- CREATE INDEX ---
class CreateIndexBuilder(_IfNotExistsMixin, CreateBuilder):
    """Builder for ``CREATE [UNIQUE] INDEX <name> ON <table> (<columns>)``."""

    __slots__ = ("_columns", "_index_name", "_table_name", "_unique")

    def __init__(self, index_name: str, table_name: str, columns: Sequence[str], unique: bool = False) -> None:
        super().__init__()
        self._index_name = index_name
        self._table_name = table_name
        self._columns = list(columns)
        self._unique = unique

    def _compile(self) -> tuple[str, list[Any]]:
        if not self._columns:
            self._raise_sql_builder_error(f"CREATE INDEX {self._index_name} requires at least one column.")
        kind = "UNIQUE INDEX" if self._unique else "INDEX"
        columns = ", ".join(self._columns)
        return f"{self._create_prefix(kind)} {self._index_name} ON {self._table_name} ({columns})", []


# --- CREATE VIEW ---
class CreateViewBuilder(_TemporaryMixin, _IfNotExistsMixin, CreateBuilder):
    """Builder for ``CREATE VIEW <name> AS <select>``; the SELECT text is spliced verbatim."""

    __slots__ = ("_select_sql", "_view_name")

    def __init__(self, view_name: str, select_sql: str) -> None:
        super().__init__()
        self._view_name = view_name
        self._select_sql = select_sql

    def _compile(self) -> tuple[str, list[Any]]:
        return f"{self._create_prefix('VIEW')} {self._view_name} AS {self._select_sql}", []


# --- CREATE TRIGGER ---
class CreateTriggerBuilder(_TemporaryMixin, _IfNotExistsMixin, CreateBuilder):
    """Builder for ``CREATE TRIGGER <name> <TIMING> <EVENT> ON <table> <body>``.

    ``body`` is the trigger action (``BEGIN ...; END``), appended verbatim.
    """

    __slots__ = ("_body", "_event", "_table_name", "_timing", "_trigger_name")

    def __init__(self, trigger_name: str, table_name: str, timing: str, event: str, body: str) -> None:
        super().__init__()
        self._trigger_name = trigger_name
        self._table_name = table_name
        self._timing = timing
        self._event = event
        self._body = body

    def _compile(self) -> tuple[str, list[Any]]:
        return (
            f"{self._create_prefix('TRIGGER')} {self._trigger_name} {self._timing} {self._event} "
            f"ON {self._table_name} {self._body}"
        ), []


# --- VACUUM ---
class VacuumBuilder(DDLBuilder):
    """Builder for ``VACUUM [<schema>] [INTO <file>]``."""

    __slots__ = ("_schema", "_target_file")

    def __init__(self, schema: str = "", target_file: str = "") -> None:
        super().__init__()
        self._schema = schema
        self._target_file = target_file

    def _compile(self) -> tuple[str, list[Any]]:
        parts = ["VACUUM"]
        if self._schema:
            parts.append(self._schema)
        if self._target_file:
            parts.append(f"INTO {self._target_file}")
        return " ".join(parts), []
