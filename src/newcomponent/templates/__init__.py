"""
newcomponent.templates - Component Template Files
=================================================

This package holds the template files used to render new components.
They are located through Jinja2's PackageLoader by ``templating``.

Available Templates
-------------------
Components (literal ``COMPONENT_NAME`` substitution, no Jinja syntax):
    - js.jsx: React component in JavaScript
    - ts.tsx: React component in TypeScript, with a props interface

Index:
    - index.j2: Barrel file, receives ``file_name`` in its context

Adding a Language
-----------------
Drop the template here and register it in
``newcomponent.templating.COMPONENT_TEMPLATES``.
"""
