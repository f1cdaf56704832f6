"""Value objects describing table columns and SET-clause fields."""

from dataclasses import dataclass
from typing import Any

__all__ = ("Column", "Field")


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


@dataclass
class Column:
    """Column definition for CREATE TABLE and ALTER TABLE ... ADD COLUMN.

    ``default`` and ``check`` are raw SQL (a literal, an expression such as
    ``CURRENT_TIMESTAMP``, or a boolean expression) and are spliced verbatim.
    Non-string defaults such as ``0`` are rendered with ``str()``; ``None`` or
    ``""`` leaves the constraint out.
    ``auto_increment`` is only meaningful together with ``primary_key``; no
    attempt is made to enforce that.
    """

    name: str
    type: str
    primary_key: bool = False
    auto_increment: bool = False
    not_null: bool = False
    unique: bool = False
    default: Any = None
    check: str | None = None

    def to_sql(self) -> str:
        """Render ``name TYPE`` followed by its constraints in SQLite's canonical order."""
        tokens = [self.name, self.type]
        if self.primary_key:
            tokens.append("PRIMARY KEY")
            if self.auto_increment:
                tokens.append("AUTOINCREMENT")
        if self.unique:
            tokens.append("UNIQUE")
        if self.not_null:
            tokens.append("NOT NULL")
        if _is_set(self.check):
            tokens.append(f"CHECK ({self.check})")
        if _is_set(self.default):
            tokens.append(f"DEFAULT {self.default}")
        return " ".join(tokens)


@dataclass
class Field:
    """A column assignment in an UPDATE-style SET list; ``value`` is bound, never spliced."""

    name: str
    value: Any
