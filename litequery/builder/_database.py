"""ATTACH and DETACH DATABASE.

These are the only DDL-family statements that bind arguments: the file path
and schema alias are passed as values, never spliced into the text.
"""

from typing import ClassVar

from litequery.builder._base import PLACEHOLDER, QueryBuilder

__all__ = ("AttachDatabaseBuilder", "DetachDatabaseBuilder")


class AttachDatabaseBuilder(QueryBuilder):
    """Builder for ``ATTACH DATABASE ? AS ?;``."""

    __slots__ = ()

    terminator: ClassVar[str] = ";"
    clause_order: ClassVar[tuple[str, ...]] = ("attach",)

    def __init__(self, path: str, alias: str) -> None:
        super().__init__()
        self._set_fragment("attach", f"ATTACH DATABASE {PLACEHOLDER} AS {PLACEHOLDER}", [path, alias])


class DetachDatabaseBuilder(QueryBuilder):
    """Builder for ``DETACH DATABASE ?;``."""

    __slots__ = ()

    terminator: ClassVar[str] = ";"
    clause_order: ClassVar[tuple[str, ...]] = ("detach",)

    def __init__(self, alias: str) -> None:
        super().__init__()
        self._set_fragment("detach", f"DETACH DATABASE {PLACEHOLDER}", [alias])
