"""
newcomponent.templating - Component and Index Rendering
=======================================================

Templates ship inside the package (``newcomponent/templates/``) and are
located through a Jinja2 ``PackageLoader``.

Two kinds of template are used:

- **Component templates** (``js.jsx``, ``ts.tsx``) are plain source files
  containing the literal token ``COMPONENT_NAME``. They are not run
  through Jinja; every occurrence of the token is replaced verbatim with
  the component name as the user typed it.
- **Index template** (``index.j2``) is a one-line Jinja template that
  re-exports the component file by its formatted file name.

The component body always uses the PascalCase name, even when file names
are kebab-case, because the name doubles as the exported identifier.

Usage Example
-------------
>>> render_component(Language.JS, "NavBar")  # doctest: +SKIP
"import React from 'react';\\n\\nfunction NavBar() {..."
>>> render_index("nav-bar")
"export * from './nav-bar';\\n"
"""

from __future__ import annotations

import logging

from jinja2 import Environment, PackageLoader, TemplateNotFound, select_autoescape

from newcomponent.errors import TemplateLoadError
from newcomponent.models import Language


logger = logging.getLogger(__name__)


PLACEHOLDER = "COMPONENT_NAME"

COMPONENT_TEMPLATES: dict[Language, str] = {
    Language.JS: "js.jsx",
    Language.TS: "ts.tsx",
}

INDEX_TEMPLATE = "index.j2"


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment used to locate and render templates.

    Autoescaping is disabled since the output is source code, and
    trailing newlines are preserved so generated files end cleanly.
    """
    return Environment(
        loader=PackageLoader("newcomponent", "templates"),
        autoescape=select_autoescape([]),
        keep_trailing_newline=True,
    )


def load_component_template(lang: Language, env: Environment | None = None) -> str:
    """
    Return the raw source of the component template for ``lang``.

    Raises
    ------
    TemplateLoadError
        If the template cannot be located or read.
    """
    env = env or create_jinja_env()
    template_name = COMPONENT_TEMPLATES[Language(lang)]

    try:
        source, filename, _ = env.loader.get_source(env, template_name)
    except TemplateNotFound as e:
        raise TemplateLoadError(f"No template found for language '{Language(lang).value}'") from e
    except OSError as e:
        raise TemplateLoadError(f"Could not read template '{template_name}': {e}") from e

    logger.debug("Loaded component template %s", filename)
    return source


def substitute_placeholder(template: str, component_name: str) -> str:
    """Replace every ``COMPONENT_NAME`` token with ``component_name``."""
    return template.replace(PLACEHOLDER, component_name)


def render_component(
    lang: Language,
    component_name: str,
    env: Environment | None = None,
) -> str:
    """
    Render the component source for ``lang``.

    Parameters
    ----------
    lang : Language
        Selects the template.

    component_name : str
        The original PascalCase name, not the case-formatted file name.

    Returns
    -------
    str
        Template text with every placeholder replaced.
    """
    return substitute_placeholder(load_component_template(lang, env), component_name)


def render_index(file_name: str, env: Environment | None = None) -> str:
    """
    Render the barrel file that re-exports the component.

    ``file_name`` is the formatted name, so the import path matches the
    file actually written to disk.
    """
    env = env or create_jinja_env()

    try:
        template = env.get_template(INDEX_TEMPLATE)
    except TemplateNotFound as e:
        raise TemplateLoadError(f"Index template '{INDEX_TEMPLATE}' is missing") from e

    return template.render(file_name=file_name)
