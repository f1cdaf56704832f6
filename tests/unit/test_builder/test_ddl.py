"""Unit tests for DDL builders.

Covers CREATE/DROP for tables, indexes, views and triggers, single-shot
ALTER TABLE, and VACUUM.
"""

import pytest

from litequery import (
    Column,
    alter_table,
    create_index,
    create_table,
    create_trigger,
    create_view,
    drop_index,
    drop_table,
    drop_trigger,
    drop_view,
    vacuum,
)
from litequery.builder import CreateBuilder, DDLBuilder, StatementBuilder
from litequery.exceptions import SQLBuilderError


@pytest.fixture
def foo_columns() -> list[Column]:
    return [
        Column(name="id", type="INTEGER", primary_key=True, auto_increment=True),
        Column(name="name", type="TEXT", not_null=True, unique=True),
        Column(name="age", type="INTEGER", not_null=True, default="0", check="age > 0"),
        Column(name="created_at", type="DATETIME", not_null=True, default="CURRENT_TIMESTAMP"),
    ]


def test_create_table(foo_columns: list[Column]) -> None:
    """Test that column constraints render in their fixed order."""
    assert create_table("foo", foo_columns).query() == (
        "CREATE TABLE foo (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT UNIQUE NOT NULL, "
        "age INTEGER NOT NULL CHECK (age > 0) DEFAULT 0, "
        "created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP);"
    )


def test_create_table_single_primary_key_column() -> None:
    columns = [Column("id", "INTEGER", primary_key=True, auto_increment=True)]
    assert create_table("foo", columns).query() == "CREATE TABLE foo (id INTEGER PRIMARY KEY AUTOINCREMENT);"


def test_column_constraint_order_with_every_flag() -> None:
    column = Column(
        "code", "TEXT", primary_key=True, unique=True, not_null=True, check="length(code) = 3", default="'abc'"
    )
    assert column.to_sql() == "code TEXT PRIMARY KEY UNIQUE NOT NULL CHECK (length(code) = 3) DEFAULT 'abc'"


def test_column_empty_default_and_check_are_omitted() -> None:
    assert Column("note", "TEXT", default="", check="").to_sql() == "note TEXT"


@pytest.mark.parametrize(
    ("default", "expected"),
    [(0, "age INTEGER DEFAULT 0"), (1.5, "age INTEGER DEFAULT 1.5"), ("NULL", "age INTEGER DEFAULT NULL")],
)
def test_column_non_string_and_falsy_defaults_are_rendered(default: object, expected: str) -> None:
    assert Column("age", "INTEGER", default=default).to_sql() == expected


def test_create_table_temporary_if_not_exists() -> None:
    builder = create_table("foo", [Column("id", "INTEGER")]).temporary().if_not_exists()
    assert builder.query() == "CREATE TEMP TABLE IF NOT EXISTS foo (id INTEGER);"


def test_create_table_without_columns_raises() -> None:
    with pytest.raises(SQLBuilderError, match="at least one column"):
        create_table("foo", []).query()


@pytest.mark.parametrize(
    "builder,expected",
    [
        (drop_table("foo"), "DROP TABLE foo;"),
        (drop_index("foo"), "DROP INDEX foo;"),
        (drop_view("foo"), "DROP VIEW foo;"),
        (drop_trigger("foo"), "DROP TRIGGER foo;"),
    ],
)
def test_drop(builder: StatementBuilder, expected: str) -> None:
    assert builder.query() == expected


def test_drop_if_exists() -> None:
    assert drop_table("foo").if_exists().query() == "DROP TABLE IF EXISTS foo;"
    assert drop_view("foo").if_exists().query() == "DROP VIEW IF EXISTS foo;"


def test_alter_table_rename_to() -> None:
    assert alter_table("foo").rename_to("bar").query() == "ALTER TABLE foo RENAME TO bar;"


def test_alter_table_rename_column() -> None:
    assert alter_table("foo").rename_column("id", "foo_id").query() == "ALTER TABLE foo RENAME COLUMN id TO foo_id;"


def test_alter_table_add_column() -> None:
    column = Column(name="id", type="INTEGER", primary_key=True, auto_increment=True)
    assert alter_table("foo").add_column(column).query() == (
        "ALTER TABLE foo ADD COLUMN id INTEGER PRIMARY KEY AUTOINCREMENT;"
    )


def test_alter_table_drop_column() -> None:
    assert alter_table("foo").drop_column("id").query() == "ALTER TABLE foo DROP COLUMN id;"


def test_alter_table_allows_one_operation() -> None:
    """Test that a second alteration on the same builder fails fast."""
    builder = alter_table("foo").rename_to("bar")
    with pytest.raises(SQLBuilderError, match="one alteration per statement"):
        builder.drop_column("id")
    assert builder.query() == "ALTER TABLE foo RENAME TO bar;"


def test_alter_table_without_operation_raises() -> None:
    with pytest.raises(SQLBuilderError, match="has no operation"):
        alter_table("foo").query()


def test_create_index() -> None:
    assert create_index("foo", "bar", ["name"], True).query() == "CREATE UNIQUE INDEX foo ON bar (name);"
    assert create_index("idx", "bar", ["a", "b"]).query() == "CREATE INDEX idx ON bar (a, b);"


def test_create_index_if_not_exists() -> None:
    assert create_index("idx", "bar", ["a"]).if_not_exists().query() == "CREATE INDEX IF NOT EXISTS idx ON bar (a);"


def test_create_index_without_columns_raises() -> None:
    with pytest.raises(SQLBuilderError):
        create_index("idx", "bar", []).query()


def test_create_view() -> None:
    assert create_view("foo", "SELECT * FROM bar").query() == "CREATE VIEW foo AS SELECT * FROM bar;"


def test_create_view_temporary_if_not_exists() -> None:
    builder = create_view("foo", "SELECT 1").temporary().if_not_exists()
    assert builder.query() == "CREATE TEMP VIEW IF NOT EXISTS foo AS SELECT 1;"


def test_create_trigger() -> None:
    builder = create_trigger("foo", "bar", "BEFORE", "INSERT", "BEGIN SELECT 1; END")
    assert builder.query() == "CREATE TRIGGER foo BEFORE INSERT ON bar BEGIN SELECT 1; END;"


def test_create_trigger_if_not_exists() -> None:
    builder = create_trigger("audit", "users", "AFTER", "DELETE", "BEGIN SELECT 1; END").if_not_exists()
    assert builder.query() == "CREATE TRIGGER IF NOT EXISTS audit AFTER DELETE ON users BEGIN SELECT 1; END;"


@pytest.mark.parametrize(
    "schema,target,expected",
    [
        ("foo", "foo.db", "VACUUM foo INTO foo.db;"),
        ("", "", "VACUUM;"),
        ("main", "", "VACUUM main;"),
        ("", "'backup.db'", "VACUUM INTO 'backup.db';"),
    ],
)
def test_vacuum(schema: str, target: str, expected: str) -> None:
    assert vacuum(schema, target).query() == expected


def test_ddl_builders_bind_no_arguments() -> None:
    assert not hasattr(create_table("foo", [Column("id", "INTEGER")]), "build")


@pytest.mark.parametrize(
    "statement",
    [
        create_table("foo", [Column("id", "INTEGER")]),
        create_index("idx", "foo", ["id"]),
        create_view("v", "SELECT 1"),
        create_trigger("t", "foo", "AFTER", "DELETE", "BEGIN SELECT 1; END"),
    ],
    ids=["table", "index", "view", "trigger"],
)
def test_create_builders_share_create_options(statement: DDLBuilder) -> None:
    assert isinstance(statement, CreateBuilder)
    assert hasattr(statement, "if_not_exists")


@pytest.mark.parametrize(
    "statement",
    [drop_table("foo"), alter_table("foo").rename_to("bar"), vacuum()],
    ids=["drop", "alter", "vacuum"],
)
def test_non_create_builders_carry_no_create_options(statement: DDLBuilder) -> None:
    assert isinstance(statement, DDLBuilder)
    assert not isinstance(statement, CreateBuilder)
    assert not hasattr(statement, "if_not_exists")
    assert not hasattr(statement, "temporary")
    assert not hasattr(statement, "_create_prefix")
