"""
newcomponent.naming - Component Name Validation and Case Formatting
===================================================================

Component names are always typed in PascalCase (``MyComponent``). The
name itself is used verbatim inside the rendered source, while the file
and directory names follow the configured case policy.

>>> format_component_name("MyComponent", FileNameCase.KEBAB)
'my-component'
>>> format_component_name("MyComponent", FileNameCase.PASCAL)
'MyComponent'
"""

from __future__ import annotations

import re

from newcomponent.models import FileNameCase


# Always applied with fullmatch; a "$" anchor would accept a trailing newline.
PASCAL_CASE_PATTERN = re.compile(r"[A-Z][a-zA-Z0-9]*")

# Only lower->upper and digit->upper transitions get a hyphen, so acronym
# runs stay together: "HTTPServer" -> "httpserver".
_KEBAB_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def is_pascal_case(name: str) -> bool:
    """Return True if ``name`` starts uppercase and is purely alphanumeric."""
    return PASCAL_CASE_PATTERN.fullmatch(name) is not None


def format_component_name(raw_name: str, case: FileNameCase) -> str:
    """
    Convert a PascalCase component name to the configured file-name case.

    The input is assumed to be valid PascalCase already; it is not
    re-validated here.

    Parameters
    ----------
    raw_name : str
        The component name as the user typed it.

    case : FileNameCase
        Target case policy for file and directory names.

    Returns
    -------
    str
        ``raw_name`` unchanged for pascal, its kebab-case form otherwise.
    """
    if case == FileNameCase.KEBAB:
        return _KEBAB_BOUNDARY.sub(r"\1-\2", raw_name).lower()

    return raw_name
