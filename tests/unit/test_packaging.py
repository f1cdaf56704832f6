"""Checks on the project metadata declared in pyproject.toml."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).parents[2] / "pyproject.toml"


@pytest.fixture
def project() -> dict:
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]


def test_long_description_is_not_the_design_ledger(project: dict) -> None:
    assert project.get("readme") != "DESIGN.md"


def test_runtime_dependencies(project: dict) -> None:
    names = {requirement.split(">=")[0] for requirement in project["dependencies"]}
    assert names == {"typing-extensions", "mypy-extensions", "msgspec"}


def test_sqlglot_is_test_only(project: dict) -> None:
    assert not any(requirement.startswith("sqlglot") for requirement in project["dependencies"])
    assert any(requirement.startswith("sqlglot") for requirement in project["optional-dependencies"]["test"])
