from collections.abc import Sequence
from typing import Any, NoReturn, Protocol

from litequery.builder._base import Fragment

__all__ = ("BuilderProtocol",)


class BuilderProtocol(Protocol):
    _fragments: dict[str, Fragment]
    _last_predicate: str | None

    def _set_fragment(self, slot: str, sql: str, parameters: Sequence[Any] = ()) -> None: ...

    def _append_fragment(
        self, slot: str, sql: str, parameters: Sequence[Any] = (), separator: str = " "
    ) -> None: ...

    def _clear_fragment(self, slot: str) -> None: ...

    @staticmethod
    def _raise_sql_builder_error(message: str, cause: BaseException | None = None) -> NoReturn: ...
