"""
newcomponent.models - Configuration and Plan Models
===================================================

This module defines the data models shared by every stage of the
scaffold pipeline. Configuration is a frozen Pydantic model so that it
can be validated once, when it is assembled from its sources, and then
passed around as a plain immutable value.

Architecture Notes
------------------
    ComponentConfig (effective configuration)
    ├── lang: Language (enum)
    ├── dir: str
    └── file_name_case: FileNameCase (enum)

    ScaffoldPlan (derived from config + component name)
    ├── component_dir
    ├── component_file
    └── index_file

Override files use the JSON key ``fileNameCase``; the model accepts
both that alias and the Python field name.

Usage Example
-------------
>>> config = ComponentConfig(lang="ts", fileNameCase="kebab")
>>> config.lang.file_extension
'tsx'
>>> config.with_overrides(dir="lib/ui").dir
'lib/ui'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enumerations
# =============================================================================

class Language(str, Enum):
    """
    Source language of the generated component.

    Attributes
    ----------
    JS : str
        JavaScript; component written as ``.jsx``, barrel as ``.js``.

    TS : str
        TypeScript; component written as ``.tsx``, barrel as ``.ts``.
    """

    JS = "js"
    TS = "ts"

    @property
    def file_extension(self) -> str:
        """Extension of the component source file."""
        return "jsx" if self == Language.JS else "tsx"

    @property
    def index_extension(self) -> str:
        """Extension of the index (barrel) file."""
        return "js" if self == Language.JS else "ts"

    @property
    def display_name(self) -> str:
        return "JavaScript" if self == Language.JS else "TypeScript"


class FileNameCase(str, Enum):
    """Case policy for generated file and directory names."""

    PASCAL = "pascal"
    KEBAB = "kebab"

    @property
    def display_name(self) -> str:
        return "PascalCase" if self == FileNameCase.PASCAL else "kebab-case"


class Step(str, Enum):
    """
    Stages of a scaffold run, in the order they execute.

    Every stage can end the run; ``DONE`` is only reached when all the
    others completed. Template rendering is pure and happens before the
    first filesystem change, so a missing template never leaves partial
    output behind.
    """

    VALIDATING_NAME = "validating_name"
    RESOLVING_CONFIG = "resolving_config"
    PLANNING = "planning"
    RENDERING_TEMPLATES = "rendering_templates"
    ENSURING_PARENT = "ensuring_parent"
    CHECKING_COLLISION = "checking_collision"
    CREATING_DIRECTORY = "creating_directory"
    WRITING_COMPONENT_FILE = "writing_component_file"
    WRITING_INDEX_FILE = "writing_index_file"
    DONE = "done"


# =============================================================================
# Effective Configuration
# =============================================================================

DEFAULT_COMPONENT_DIR = "src/components"


class ComponentConfig(BaseModel):
    """
    Effective configuration for one scaffold invocation.

    Produced by merging, in increasing precedence: built-in defaults,
    the global override file, the project-local override file, and
    caller-supplied overrides. Unknown keys in any source are ignored.
    Enum values must be given exactly (``"ts"``, not ``"TS"``); only the
    command line folds their case.

    Attributes
    ----------
    lang : Language
        Language of the generated component.

    dir : str
        Directory the component directory is created in. Relative paths
        are resolved against the working directory at planning time.

    file_name_case : FileNameCase
        Case policy for file and directory names (JSON key
        ``fileNameCase``).

    Examples
    --------
    >>> ComponentConfig().model_dump(by_alias=True, mode="json")
    {'lang': 'js', 'dir': 'src/components', 'fileNameCase': 'pascal'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    lang: Language = Field(
        default=Language.JS,
        description="Component language (js, ts)",
    )
    dir: str = Field(
        default=DEFAULT_COMPONENT_DIR,
        description="Path to the components directory",
        min_length=1,
    )
    file_name_case: FileNameCase = Field(
        default=FileNameCase.PASCAL,
        alias="fileNameCase",
        description="File and directory name case (pascal, kebab)",
    )

    def with_overrides(self, **overrides: Any) -> ComponentConfig:
        """
        Return a new config with caller-supplied values merged on top.

        Keys whose value is ``None`` are skipped, so unset command line
        options fall through to the file-based configuration.

        Raises
        ------
        pydantic.ValidationError
            If an override value violates the field constraints.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self

        return ComponentConfig.model_validate({**self.model_dump(), **values})


# =============================================================================
# Scaffold Plan
# =============================================================================

@dataclass(frozen=True)
class ScaffoldPlan:
    """
    Every path the writer will touch, computed up front.

    A plan is fully determined by the effective configuration, the
    component name and the base directory; it is never mutated.

    Attributes
    ----------
    component_name : str
        The original PascalCase name, used inside the rendered source.

    file_name : str
        The name formatted according to the case policy.

    root_dir : Path
        The configured components directory.

    component_dir : Path
        ``root_dir / file_name``.

    component_file : Path
        ``component_dir / <file_name>.<jsx|tsx>``.

    index_file : Path
        ``component_dir / index.<js|ts>``.
    """

    component_name: str
    file_name: str
    lang: Language
    file_name_case: FileNameCase
    root_dir: Path
    component_dir: Path
    component_file: Path
    index_file: Path

    @property
    def file_extension(self) -> str:
        return self.lang.file_extension

    @property
    def index_extension(self) -> str:
        return self.lang.index_extension
