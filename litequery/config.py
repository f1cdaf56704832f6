"""Builder configuration.

Rendering is a pure function of builder state; the only tunables are whether
the builders log what they render. The active :class:`BuilderConfig` is scoped
to the current context, so concurrent tasks can each install their own.
"""

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

__all__ = ("BuilderConfig", "builder_config", "get_builder_config")


@dataclass(slots=True)
class BuilderConfig:
    """Logging switches consulted by every builder at render time."""

    log_queries: bool = False
    """Log each rendered statement (builder type, SQL length, argument count) at DEBUG."""
    debug_mode: bool = False
    """Time the individual render phases and log their durations at DEBUG."""

    def copy(self) -> "BuilderConfig":
        """Return a copy to avoid sharing mutable state."""
        return BuilderConfig(log_queries=self.log_queries, debug_mode=self.debug_mode)


_DEFAULT_CONFIG = BuilderConfig()
_active_config: ContextVar[BuilderConfig | None] = ContextVar("litequery_builder_config", default=None)


def get_builder_config() -> BuilderConfig:
    """Return the config installed for the current context, or the defaults."""
    return _active_config.get() or _DEFAULT_CONFIG


@contextmanager
def builder_config(config: BuilderConfig) -> Generator[BuilderConfig, None, None]:
    """Install ``config`` for the enclosed block.

    Example:
        with builder_config(BuilderConfig(log_queries=True)):
            sql, args = select("*").from_("users").build()

    Yields:
        A private copy of ``config`` that is active inside the block.
    """
    active = config.copy()
    token = _active_config.set(active)
    try:
        yield active
    finally:
        _active_config.reset(token)
