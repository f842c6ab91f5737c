"""
newcomponent.config - Layered Configuration Resolution
======================================================

Resolves the file-based configuration for a scaffold run. Sources are
merged shallowly, later sources winning per key:

    1. Built-in defaults
    2. Global override   ~/.new-component-config.json
    3. Local override    ./.new-component-config.json

Command line overrides are applied on top of the result by the caller
(see ``ComponentConfig.with_overrides``).

Override files are optional. A missing file is an expected outcome and
is reported as an absent ``OverrideFile``; any other problem reading,
parsing or validating a file raises ``ConfigLoadError`` and aborts the
run before anything touches the filesystem.

Example override file::

    {
      "lang": "ts",
      "dir": "app/components",
      "fileNameCase": "kebab"
    }
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from newcomponent.errors import ConfigLoadError
from newcomponent.models import DEFAULT_COMPONENT_DIR, ComponentConfig


logger = logging.getLogger(__name__)


CONFIG_FILE_NAME = ".new-component-config.json"

# Keys recognised in override files; anything else is ignored.
OVERRIDE_KEYS = ("lang", "dir", "fileNameCase")

DEFAULTS: dict[str, Any] = {
    "lang": "js",
    "dir": DEFAULT_COMPONENT_DIR,
    "fileNameCase": "pascal",
}


# =============================================================================
# Override Files
# =============================================================================

@dataclass(frozen=True)
class OverrideFile:
    """
    Outcome of reading one optional override file.

    Attributes
    ----------
    path : Path
        Location that was read.

    present : bool
        False when the file does not exist. An absent file contributes
        no values.

    values : dict[str, Any]
        The parsed JSON object (empty when absent).
    """

    path: Path
    present: bool
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def absent(cls, path: Path) -> OverrideFile:
        return cls(path=path, present=False)

    @property
    def known_values(self) -> dict[str, Any]:
        """The subset of ``values`` this tool understands."""
        return {key: self.values[key] for key in OVERRIDE_KEYS if key in self.values}


def global_config_path(home: Path) -> Path:
    return home / CONFIG_FILE_NAME


def local_config_path(cwd: Path) -> Path:
    return cwd / CONFIG_FILE_NAME


def read_override(path: Path) -> OverrideFile:
    """
    Read and parse one override file.

    Parameters
    ----------
    path : Path
        Location of the JSON override file.

    Returns
    -------
    OverrideFile
        Absent if the file does not exist, loaded otherwise.

    Raises
    ------
    ConfigLoadError
        If the file exists but cannot be read, is not valid JSON, or does
        not contain a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config file at %s", path)
        return OverrideFile.absent(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Could not read config file: {e}", path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Config file is not valid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigLoadError("Config file must contain a JSON object", path)

    logger.debug("Loaded config file %s: %s", path, data)
    return OverrideFile(path=path, present=True, values=data)


def validate_override(source: OverrideFile) -> dict[str, Any]:
    """
    Check an override's known keys against the config constraints.

    Each file is validated on its own so that an error can name the file
    that caused it.

    Returns
    -------
    dict[str, Any]
        The known keys of the override.

    Raises
    ------
    ConfigLoadError
        If a known key carries an invalid value.
    """
    values = source.known_values
    try:
        ComponentConfig.model_validate(values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigLoadError(f"Invalid value in config file: {problems}", source.path) from e
    return values


def merge_overrides(*layers: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge layers left to right; later layers win per key."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


# =============================================================================
# Resolution
# =============================================================================

async def resolve_config(
    home: Path | None = None,
    cwd: Path | None = None,
) -> ComponentConfig:
    """
    Build the file-based configuration for this run.

    Parameters
    ----------
    home : Path | None
        Directory holding the global override. Defaults to the user's
        home directory.

    cwd : Path | None
        Directory holding the project-local override. Defaults to the
        current working directory.

    Returns
    -------
    ComponentConfig
        Defaults overlaid with the global, then the local override.

    Raises
    ------
    ConfigLoadError
        If either override file exists but is unusable.

    Examples
    --------
    >>> config = asyncio.run(resolve_config())
    >>> config.lang
    <Language.JS: 'js'>
    """
    home = Path.home() if home is None else Path(home)
    cwd = Path.cwd() if cwd is None else Path(cwd)

    global_override = await asyncio.to_thread(read_override, global_config_path(home))
    local_override = await asyncio.to_thread(read_override, local_config_path(cwd))

    merged = merge_overrides(
        DEFAULTS,
        validate_override(global_override),
        validate_override(local_override),
    )
    config = ComponentConfig.model_validate(merged)

    logger.debug("Resolved configuration: %s", config.model_dump(mode="json", by_alias=True))
    return config
