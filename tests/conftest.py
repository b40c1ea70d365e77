"""Pytest configuration and shared fixtures for the fastcat test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from fastcat.constants import ENV_PREFIX

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Hypothesis property-based tests")


@pytest.fixture(autouse=True)
def clean_fastcat_env(monkeypatch):
    """Remove FASTCAT_* variables so the host environment cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def csv_text() -> str:
    """Small CSV document with a short row."""
    return "name,age\nAlice,30\nBob,7\n"


@pytest.fixture
def csv_file(tmp_path: Path, csv_text: str) -> Path:
    """CSV document written to a temporary ``people.csv``."""
    path = tmp_path / "people.csv"
    path.write_text(csv_text, encoding="utf-8")
    return path


@pytest.fixture
def markdown_lines() -> list[str]:
    """Markdown document with one table between two paragraphs."""
    return [
        "# Title",
        "",
        "| name | qty |",
        "|---|:--:|",
        "| apple | 3 |",
        "| kiwi | 12 |",
        "",
        "Some **bold** text.",
    ]


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after CLI runs reconfigure logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
