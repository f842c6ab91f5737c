"""
pytest configuration and shared fixtures for newcomponent tests.

This module provides fixtures and configuration used across all test modules.
Fixtures defined here are automatically available to all tests.

Fixtures
--------
project_dir : Path
    A temporary project root, also made the working directory.

home_dir : Path
    A temporary home directory, exported as ``HOME``.

write_config : Callable
    Writes an override file into a directory.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from newcomponent.config import CONFIG_FILE_NAME


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create a temporary project directory and chdir into it.

    Returns
    -------
    Path
        Path to the project directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create a temporary home directory so the user's real global
    config file is never read.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def write_config() -> Callable[[Path, Any], Path]:
    """
    Provide a helper that writes an override file.

    Dicts and lists are dumped as JSON; strings are written verbatim so
    tests can produce malformed files.
    """

    def _write(directory: Path, content: Any) -> Path:
        path = directory / CONFIG_FILE_NAME
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
