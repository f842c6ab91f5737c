"""
newcomponent - React Component Scaffolder
=========================================

A CLI tool that creates a new React component directory: the component
source file plus an index file that re-exports it.

Features
--------
- **Layered Configuration**: Defaults, a global and a per-project JSON
  override file, and command line options
- **Two Languages**: JavaScript (``.jsx``) or TypeScript (``.tsx``)
- **File Name Case**: PascalCase or kebab-case file and directory names
- **Safe Writes**: Never writes into an existing component directory

Quick Start
-----------
```bash
pip install newcomponent

new-component Button
new-component NavBar --lang ts --case kebab
```

Example
-------
>>> from newcomponent import ComponentConfig, create_component
>>> result = create_component("Button", ComponentConfig(lang="ts"))
>>> result.success
True

Architecture
------------
- ``cli``: Typer command line interface and Rich output
- ``config``: Layered configuration resolution
- ``naming``: Name validation and case formatting
- ``templating``: Component and index template rendering
- ``generator``: The scaffold pipeline and filesystem writes
- ``models``: Pydantic configuration model and scaffold plan
- ``errors``: Failure taxonomy

License
-------
MIT License - see LICENSE file for details.
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from newcomponent.config import resolve_config
from newcomponent.errors import (
    CollisionError,
    ConfigLoadError,
    NameValidationError,
    ScaffoldError,
    TemplateLoadError,
    WriteError,
)
from newcomponent.generator import (
    ScaffoldEvent,
    ScaffoldResult,
    create_component,
    run_pipeline,
)
from newcomponent.models import ComponentConfig, FileNameCase, Language, Step
from newcomponent.naming import format_component_name


__all__ = [
    # Errors
    "CollisionError",
    # Configuration models
    "ComponentConfig",
    "ConfigLoadError",
    "FileNameCase",
    "Language",
    "NameValidationError",
    "ScaffoldError",
    # Pipeline
    "ScaffoldEvent",
    "ScaffoldResult",
    "Step",
    "TemplateLoadError",
    "WriteError",
    # Version info
    "__version__",
    "create_component",
    "format_component_name",
    "resolve_config",
    "run_pipeline",
]
