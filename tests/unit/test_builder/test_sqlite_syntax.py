"""Check that rendered statements are accepted by a SQLite grammar.

Statements are parsed with sqlglot's SQLite dialect and the number of
positional placeholders in the parsed tree is compared with the number of
bound arguments.
"""

from typing import Any

import pytest
from sqlglot import exp, parse_one

from litequery import (
    Column,
    WithQuery,
    create_index,
    create_table,
    delete_from,
    drop_table,
    insert_into,
    select,
    with_,
)


def _parse(sql: str) -> exp.Expression:
    return parse_one(sql.rstrip(";"), read="sqlite")


def _placeholder_count(expression: exp.Expression) -> int:
    return len(list(expression.find_all(exp.Placeholder)))


@pytest.mark.parametrize(
    ("builder", "expected_type"),
    [
        (
            select("u.name", "COUNT(*)")
            .from_("users u")
            .left_join("teams t", "u.team_id = t.id")
            .where("u.age > ? AND t.name <> ?")
            .args(18, "ops")
            .group_by("u.name")
            .having("COUNT(*) > ?")
            .args(1)
            .order_by("u.name DESC"),
            exp.Select,
        ),
        (insert_into("users").columns("name", "age").values("a", 1).values("b", 2), exp.Insert),
        (insert_into("users").columns("name").values("a").returning("id"), exp.Insert),
        (delete_from("users").where("id = ?").args(3), exp.Delete),
        (
            with_(WithQuery("adults", select("id", "name").from_("users").where("age >= ?").args(18)))
            .select("name")
            .from_("adults")
            .where("id <> ?")
            .args(0),
            exp.Select,
        ),
    ],
    ids=["select", "insert_multi_row", "insert_returning", "delete", "with_select"],
)
def test_dml_parses_as_sqlite(builder: Any, expected_type: type[exp.Expression]) -> None:
    sql, parameters = builder.build()
    parsed = _parse(sql)
    assert isinstance(parsed, expected_type)
    assert _placeholder_count(parsed) == len(parameters)


@pytest.mark.parametrize(
    ("statement", "expected_type"),
    [
        (
            create_table(
                "users",
                [
                    Column("id", "INTEGER", primary_key=True),
                    Column("name", "TEXT", not_null=True, unique=True),
                    Column("age", "INTEGER", default="0"),
                ],
            ).if_not_exists(),
            exp.Create,
        ),
        (create_index("idx_users_name", "users", ["name"], unique=True), exp.Create),
        (drop_table("users").if_exists(), exp.Drop),
    ],
    ids=["create_table", "create_index", "drop_table"],
)
def test_ddl_parses_as_sqlite(statement: Any, expected_type: type[exp.Expression]) -> None:
    assert isinstance(_parse(statement.query()), expected_type)
