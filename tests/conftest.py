"""Shared fixtures and helpers for tests."""

import io

import pytest
from rich.console import Console

from syntax_scan.core.languages import Grammar, GrammarRegistry
from syntax_scan.core.render import OutlineRenderer

# ---------------------------------------------------------------------------
# Auto-marker: tag every test as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def registry() -> GrammarRegistry:
    """Return a registry with every bundled grammar loaded."""
    return GrammarRegistry.load()


@pytest.fixture
def rust_grammar(registry: GrammarRegistry) -> Grammar:
    grammar = registry.lookup("rs")
    assert grammar is not None
    return grammar


@pytest.fixture
def typescript_grammar(registry: GrammarRegistry) -> Grammar:
    grammar = registry.lookup("ts")
    assert grammar is not None
    return grammar


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(output: io.StringIO) -> OutlineRenderer:
    """Return a renderer writing uncolored text into ``output``."""
    return OutlineRenderer(Console(file=output, color_system=None, width=200))

