"""
newcomponent.generator - Scaffold Pipeline
==========================================

This module turns a component name and an effective configuration into
files on disk. It is the only part of the package that mutates the
filesystem.

Architecture
------------
The pipeline is a fixed sequence of steps; the first failure ends it:

    1. Validate the component name (PascalCase)
    2. Resolve configuration (``run_pipeline`` only)
    3. Plan every output path
    4. Render the component and index templates
    5. Ensure the components directory exists
    6. Refuse to continue if the component directory exists
    7. Create the component directory
    8. Write the component file, then the index file

Nothing is rolled back. If a write fails after the component directory
was created, the partial output stays on disk and a re-run is blocked by
the collision check until the user removes it.

Progress is reported through ``ScaffoldEvent`` callbacks rather than
printed, so the pipeline can be driven and tested without a terminal.

Output Layout
-------------
    <dir>/<F>/<F>.<jsx|tsx>     component source
    <dir>/<F>/index.<js|ts>     export * from './<F>';

Usage Example
-------------
>>> from newcomponent.models import ComponentConfig
>>> result = create_component("Button", ComponentConfig())
>>> result.files_created
[PosixPath('/project/src/components/Button/Button.jsx'),
 PosixPath('/project/src/components/Button/index.js')]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from newcomponent.config import resolve_config
from newcomponent.errors import (
    CollisionError,
    ConfigLoadError,
    NameValidationError,
    ScaffoldError,
    WriteError,
)
from newcomponent.models import ComponentConfig, ScaffoldPlan, Step
from newcomponent.naming import format_component_name, is_pascal_case
from newcomponent.templating import create_jinja_env, render_component, render_index


logger = logging.getLogger(__name__)


# =============================================================================
# Events and Results
# =============================================================================

@dataclass(frozen=True)
class ScaffoldEvent:
    """
    Notification that a pipeline step finished or failed.

    Attributes
    ----------
    step : Step
        The step this event is about.

    path : Path | None
        The path the step worked on, if any.

    plan : ScaffoldPlan | None
        Set on the ``PLANNING`` event and later ones that carry it.

    error : ScaffoldError | None
        Set when the step failed. A failed event is always the last one
        of a run.
    """

    step: Step
    path: Path | None = None
    plan: ScaffoldPlan | None = None
    error: ScaffoldError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


EventCallback = Callable[[ScaffoldEvent], None]

# formatter(text, file_extension) -> formatted text
Formatter = Callable[[str, str], str]


@dataclass
class ScaffoldResult:
    """
    Outcome of a scaffold run.

    Attributes
    ----------
    success : bool
        True when both files were written.

    component_dir : Path | None
        The planned component directory (None if planning never ran).

    files_created : list[Path]
        Files written before the run ended, in write order. May be
        partial when a write failed.

    error : ScaffoldError | None
        The error that ended the run.

    failed_step : Step | None
        The step that raised ``error``.
    """

    success: bool
    component_dir: Path | None = None
    files_created: list[Path] = field(default_factory=list)
    error: ScaffoldError | None = None
    failed_step: Step | None = None


def _emit(on_event: EventCallback | None, event: ScaffoldEvent) -> None:
    if on_event is not None:
        on_event(event)


@contextmanager
def _step(step: Step) -> Iterator[None]:
    """Tag any ScaffoldError raised inside the block with ``step``."""
    logger.debug("Step: %s", step.value)
    try:
        yield
    except ScaffoldError as e:
        if e.step is None:
            e.step = step
        raise


# =============================================================================
# Pipeline Steps
# =============================================================================

def validate_component_name(name: str | None) -> str:
    """
    Check that a component name was given and is PascalCase.

    Returns
    -------
    str
        The name, unchanged.

    Raises
    ------
    NameValidationError
        If the name is missing, empty, or not PascalCase.
    """
    if not name:
        raise NameValidationError(
            "You need to specify a name for your component, "
            "like this: new-component MyComponent"
        )

    if not is_pascal_case(name):
        raise NameValidationError(
            f"Component name '{name}' must be in PascalCase format. "
            'Example: "MyComponent", not "myComponent" or "my-component".'
        )

    return name


def plan_scaffold(
    name: str,
    config: ComponentConfig,
    base_dir: Path | None = None,
) -> ScaffoldPlan:
    """
    Work out every path the scaffold will create.

    Parameters
    ----------
    name : str
        Validated PascalCase component name.

    config : ComponentConfig
        Effective configuration.

    base_dir : Path | None
        Directory that a relative ``config.dir`` is resolved against.
        Defaults to the current working directory.

    Examples
    --------
    >>> plan = plan_scaffold("NavBar", ComponentConfig(fileNameCase="kebab"), Path("/app"))
    >>> plan.component_file
    PosixPath('/app/src/components/nav-bar/nav-bar.jsx')
    """
    base_dir = Path.cwd() if base_dir is None else Path(base_dir)
    file_name = format_component_name(name, config.file_name_case)

    root_dir = base_dir / config.dir
    component_dir = root_dir / file_name

    return ScaffoldPlan(
        component_name=name,
        file_name=file_name,
        lang=config.lang,
        file_name_case=config.file_name_case,
        root_dir=root_dir,
        component_dir=component_dir,
        component_file=component_dir / f"{file_name}.{config.lang.file_extension}",
        index_file=component_dir / f"index.{config.lang.index_extension}",
    )


def ensure_parent_directory(root_dir: Path) -> bool:
    """
    Create the components directory if it is missing.

    An existing directory is fine here; the stricter existence check
    applies to the component directory itself.

    Returns
    -------
    bool
        True if the directory had to be created.

    Raises
    ------
    WriteError
        If the directory cannot be created.
    """
    if root_dir.is_dir():
        return False

    try:
        root_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Could not create the components directory: {e}", root_dir) from e

    logger.debug("Created components directory %s", root_dir)
    return True


def check_collision(plan: ScaffoldPlan) -> None:
    """
    Refuse to scaffold over an existing component.

    Raises
    ------
    CollisionError
        If anything already exists at the component directory path.
    """
    if plan.component_dir.exists():
        raise CollisionError(
            "Looks like this component already exists! "
            "Please delete this directory and try again.",
            plan.component_dir,
        )


def create_component_directory(plan: ScaffoldPlan) -> None:
    """
    Create the component directory.

    The directory is created without ``exist_ok``: if something appeared
    there after the collision check, it is reported as a collision
    instead of being written into.
    """
    try:
        plan.component_dir.mkdir()
    except FileExistsError as e:
        raise CollisionError(
            "Looks like this component already exists! "
            "Please delete this directory and try again.",
            plan.component_dir,
        ) from e
    except OSError as e:
        raise WriteError(f"Could not create the component directory: {e}", plan.component_dir) from e


def write_file(path: Path, content: str) -> Path:
    """Write ``content`` to ``path`` as UTF-8, wrapping OS errors."""
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Could not write file: {e}", path) from e

    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path


def write_scaffold(
    plan: ScaffoldPlan,
    rendered_component: str,
    rendered_index: str,
    on_event: EventCallback | None = None,
) -> list[Path]:
    """
    Materialize a rendered scaffold on disk.

    Runs the filesystem steps strictly in order, emitting one event per
    completed step. The first failure raises and skips the rest; nothing
    already written is removed.

    Parameters
    ----------
    plan : ScaffoldPlan
        Paths to write.

    rendered_component : str
        Content of the component file.

    rendered_index : str
        Content of the index file.

    on_event : EventCallback | None
        Receives a ``ScaffoldEvent`` after each completed step.

    Returns
    -------
    list[Path]
        The component file and the index file, in write order.

    Raises
    ------
    CollisionError
        If the component directory already exists.
    WriteError
        If a directory or file cannot be created.
    """
    with _step(Step.ENSURING_PARENT):
        ensure_parent_directory(plan.root_dir)
    _emit(on_event, ScaffoldEvent(Step.ENSURING_PARENT, path=plan.root_dir, plan=plan))

    with _step(Step.CHECKING_COLLISION):
        check_collision(plan)
    _emit(on_event, ScaffoldEvent(Step.CHECKING_COLLISION, path=plan.component_dir, plan=plan))

    with _step(Step.CREATING_DIRECTORY):
        create_component_directory(plan)
    _emit(on_event, ScaffoldEvent(Step.CREATING_DIRECTORY, path=plan.component_dir, plan=plan))

    written: list[Path] = []

    with _step(Step.WRITING_COMPONENT_FILE):
        written.append(write_file(plan.component_file, rendered_component))
    _emit(on_event, ScaffoldEvent(Step.WRITING_COMPONENT_FILE, path=plan.component_file, plan=plan))

    with _step(Step.WRITING_INDEX_FILE):
        written.append(write_file(plan.index_file, rendered_index))
    _emit(on_event, ScaffoldEvent(Step.WRITING_INDEX_FILE, path=plan.index_file, plan=plan))

    return written


# =============================================================================
# Main Generation Functions
# =============================================================================

def _recording(result: ScaffoldResult, on_event: EventCallback | None) -> EventCallback:
    """Wrap ``on_event`` so written files are tracked on ``result``."""

    def record(event: ScaffoldEvent) -> None:
        if event.step in {Step.WRITING_COMPONENT_FILE, Step.WRITING_INDEX_FILE} and event.path:
            result.files_created.append(event.path)
        _emit(on_event, event)

    return record


def _fail(
    result: ScaffoldResult,
    error: ScaffoldError,
    on_event: EventCallback | None,
) -> ScaffoldResult:
    result.success = False
    result.error = error
    result.failed_step = error.step
    logger.debug("Scaffold failed at %s: %s", error.step, error)
    _emit(on_event, ScaffoldEvent(error.step, path=error.path, error=error))
    return result


def _generate(
    name: str,
    config: ComponentConfig,
    result: ScaffoldResult,
    *,
    base_dir: Path | None,
    on_event: EventCallback | None,
    formatter: Formatter | None,
) -> ScaffoldResult:
    """Planning through the final write, for an already validated name."""
    with _step(Step.PLANNING):
        plan = plan_scaffold(name, config, base_dir)
    result.component_dir = plan.component_dir
    _emit(on_event, ScaffoldEvent(Step.PLANNING, path=plan.component_dir, plan=plan))

    with _step(Step.RENDERING_TEMPLATES):
        env = create_jinja_env()
        component_source = render_component(plan.lang, plan.component_name, env)
        index_source = render_index(plan.file_name, env)

        if formatter is not None:
            component_source = formatter(component_source, plan.file_extension)
            index_source = formatter(index_source, plan.index_extension)
    _emit(on_event, ScaffoldEvent(Step.RENDERING_TEMPLATES, plan=plan))

    write_scaffold(plan, component_source, index_source, _recording(result, on_event))

    result.success = True
    _emit(on_event, ScaffoldEvent(Step.DONE, path=plan.component_dir, plan=plan))
    return result


def create_component(
    name: str | None,
    config: ComponentConfig,
    *,
    base_dir: Path | None = None,
    on_event: EventCallback | None = None,
    formatter: Formatter | None = None,
) -> ScaffoldResult:
    """
    Scaffold a component from an already resolved configuration.

    Parameters
    ----------
    name : str | None
        Component name as typed by the user.

    config : ComponentConfig
        Effective configuration, overrides already applied.

    base_dir : Path | None
        Directory that a relative ``config.dir`` is resolved against.

    on_event : EventCallback | None
        Receives a ``ScaffoldEvent`` for each completed or failed step.

    formatter : Formatter | None
        Optional ``formatter(text, extension)`` applied to both rendered
        files before they are written.

    Returns
    -------
    ScaffoldResult
        ``success`` is False and ``error`` is set if any step failed.
        Unexpected exceptions (not ``ScaffoldError``) propagate.
    """
    result = ScaffoldResult(success=False)

    try:
        with _step(Step.VALIDATING_NAME):
            validate_component_name(name)
        _emit(on_event, ScaffoldEvent(Step.VALIDATING_NAME))

        return _generate(
            name,
            config,
            result,
            base_dir=base_dir,
            on_event=on_event,
            formatter=formatter,
        )
    except ScaffoldError as e:
        return _fail(result, e, on_event)


async def run_pipeline(
    name: str | None,
    *,
    overrides: dict[str, Any] | None = None,
    home: Path | None = None,
    cwd: Path | None = None,
    on_event: EventCallback | None = None,
    formatter: Formatter | None = None,
) -> ScaffoldResult:
    """
    Run the whole scaffold pipeline, configuration resolution included.

    The name is validated before any configuration file is read, and
    the configuration is fully resolved before anything is written.

    Parameters
    ----------
    name : str | None
        Component name as typed by the user.

    overrides : dict[str, Any] | None
        Caller-supplied config values (``lang``, ``dir``,
        ``file_name_case``); ``None`` values are ignored.

    home, cwd : Path | None
        Where to look for the global and local override files. ``cwd``
        is also the base for a relative components directory.

    on_event, formatter
        As for ``create_component``.

    Examples
    --------
    >>> result = asyncio.run(run_pipeline("NavBar", overrides={"file_name_case": "kebab"}))
    >>> result.component_dir.name
    'nav-bar'
    """
    result = ScaffoldResult(success=False)

    try:
        with _step(Step.VALIDATING_NAME):
            validate_component_name(name)
        _emit(on_event, ScaffoldEvent(Step.VALIDATING_NAME))

        with _step(Step.RESOLVING_CONFIG):
            config = await resolve_config(home=home, cwd=cwd)
            try:
                config = config.with_overrides(**(overrides or {}))
            except ValidationError as e:
                raise ConfigLoadError(f"Invalid option value: {e.errors()[0]['msg']}") from e
        _emit(on_event, ScaffoldEvent(Step.RESOLVING_CONFIG))

        return _generate(
            name,
            config,
            result,
            base_dir=cwd,
            on_event=on_event,
            formatter=formatter,
        )
    except ScaffoldError as e:
        return _fail(result, e, on_event)
