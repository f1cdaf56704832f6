"""Transaction control and savepoint statements.

A :class:`TransactionBuilder` holds a sequence of whole statements rather than
clauses: ``begin().commit()`` renders two statements,
``BEGIN TRANSACTION; COMMIT TRANSACTION;``. Savepoint names and transaction
modes are spliced as raw identifiers.
"""

from typing import Any

from typing_extensions import Self

from litequery.builder._base import StatementBuilder

__all__ = ("TransactionBuilder",)


class TransactionBuilder(StatementBuilder):
    """Builder for BEGIN, COMMIT, ROLLBACK, SAVEPOINT and RELEASE statements."""

    __slots__ = ("_statements",)

    def __init__(self) -> None:
        self._statements: list[str] = []

    def begin(self, mode: str = "") -> Self:
        """Append ``BEGIN [<MODE>] TRANSACTION``; ``mode`` is DEFERRED, IMMEDIATE or EXCLUSIVE."""
        self._statements.append(f"BEGIN {mode} TRANSACTION" if mode else "BEGIN TRANSACTION")
        return self

    def commit(self) -> Self:
        self._statements.append("COMMIT TRANSACTION")
        return self

    def rollback(self, savepoint: str = "") -> Self:
        """Append a rollback of the whole transaction, or back to ``savepoint`` when given."""
        if savepoint:
            self._statements.append(f"ROLLBACK TRANSACTION TO SAVEPOINT {savepoint}")
        else:
            self._statements.append("ROLLBACK TRANSACTION")
        return self

    def savepoint(self, name: str) -> Self:
        self._statements.append(f"SAVEPOINT {name}")
        return self

    def release_savepoint(self, name: str) -> Self:
        self._statements.append(f"RELEASE SAVEPOINT {name}")
        return self

    def _compile(self) -> tuple[str, list[Any]]:
        if not self._statements:
            self._raise_sql_builder_error("Transaction builder has no statements to render.")
        # The final terminator is appended by StatementBuilder._render.
        return "; ".join(self._statements), []
