"""Unit tests for the context-scoped builder configuration."""

import asyncio

import pytest

from litequery import BuilderConfig, builder_config, get_builder_config


def test_builder_config_defaults() -> None:
    config = BuilderConfig()
    assert config.log_queries is False
    assert config.debug_mode is False


def test_builder_config_copy_and_equality() -> None:
    config = BuilderConfig(log_queries=True, debug_mode=True)
    clone = config.copy()
    assert clone == config
    assert clone is not config


def test_builder_config_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(BuilderConfig())


def test_default_config_outside_block() -> None:
    assert get_builder_config() == BuilderConfig()


def test_builder_config_scopes_to_block() -> None:
    config = BuilderConfig(log_queries=True)
    with builder_config(config) as active:
        assert get_builder_config() is active
        assert active == config
        assert active is not config
    assert get_builder_config().log_queries is False


def test_builder_config_nests() -> None:
    with builder_config(BuilderConfig(log_queries=True)):
        with builder_config(BuilderConfig(debug_mode=True)):
            assert get_builder_config() == BuilderConfig(debug_mode=True)
        assert get_builder_config() == BuilderConfig(log_queries=True)


def test_builder_config_restored_after_error() -> None:
    with pytest.raises(RuntimeError), builder_config(BuilderConfig(debug_mode=True)):
        raise RuntimeError("boom")
    assert get_builder_config().debug_mode is False


def test_builder_config_is_task_local() -> None:
    async def observe(log_queries: bool) -> bool:
        with builder_config(BuilderConfig(log_queries=log_queries)):
            await asyncio.sleep(0)
            return get_builder_config().log_queries

    async def main() -> list[bool]:
        return list(await asyncio.gather(observe(True), observe(False)))

    assert asyncio.run(main()) == [True, False]
