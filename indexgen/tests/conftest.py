"""Shared fixtures for the indexgen test suite."""

from pathlib import Path

import pytest

SAMPLES = Path(__file__).parent / "generator"


def pytest_configure(config):
    """Keep test output compact."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def people_records() -> str:
    """Declaration file with one partial record, one closed record and an empty type."""
    return (SAMPLES / "people.records").read_text(encoding="utf-8")


@pytest.fixture
def people_models() -> str:
    """Python module with `@indexed` classes."""
    return (SAMPLES / "people_models.py").read_text(encoding="utf-8")
