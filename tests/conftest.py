"""Shared pytest fixtures and test vectors for thaiid tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from thaiid.config.settings import ThaiIdSettings

# Checked by hand against the weighted-sum-mod-11 rule.
KNOWN_VALID_IDS = [
    "1234567890121",
    "1111111111119",
    "2222222222227",
    "3333333333335",
    "4444444444443",
    "5555555555551",
    "6666666666660",
    "7777777777778",
    "8888888888886",
    "9999999999994",
    "1000000000009",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep THAIID_* variables from the developer's shell out of tests."""
    for name in ("THAIID_CONFIG", "THAIID_QUIET", "THAIID_JSON_OUTPUT", "THAIID_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo configure_logging() so handlers bound to CliRunner streams don't leak."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("thaiid")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ThaiIdSettings:
    """Default settings, discovered from an empty temp directory."""
    return ThaiIdSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory so no config is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
