"""Config file discovery and loading.

Walks up from the working directory looking for either a dedicated
``thaiid.toml`` or a ``pyproject.toml`` carrying a ``[tool.thaiid]``
table, so a test suite can keep its fixture defaults next to its
pytest configuration. ``THAIID_CONFIG`` and ``--config`` override the
walk-up.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from thaiid.config.models import ThaiIdConfig

CONFIG_FILENAME = "thaiid.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "THAIID_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return isinstance(data.get("tool", {}).get("thaiid"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    In each directory ``thaiid.toml`` wins over ``pyproject.toml``; a
    pyproject only counts when it has a ``[tool.thaiid]`` table.
    Returns None if nothing is found. Checks THAIID_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        dedicated = current / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the thaiid settings table.

    For ``pyproject.toml`` this is the ``[tool.thaiid]`` table; any other
    file is read as a whole.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("thaiid", {}))
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> ThaiIdConfig:
    """Load and validate the config sections only (no CLI flags or env vars).

    Returns default ThaiIdConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return ThaiIdConfig()
    return ThaiIdConfig.model_validate(read_config_table(path))
