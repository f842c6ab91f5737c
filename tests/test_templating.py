"""
Tests for newcomponent.templating
=================================

Test Organization
-----------------
- TestLoadComponentTemplate: Tests for locating template sources
- TestSubstitutePlaceholder: Tests for token replacement
- TestRenderComponent: Tests for full component rendering
- TestRenderIndex: Tests for the barrel file
"""

import pytest
from jinja2 import DictLoader, Environment

from newcomponent.errors import TemplateLoadError
from newcomponent.models import Language
from newcomponent.templating import (
    PLACEHOLDER,
    create_jinja_env,
    load_component_template,
    render_component,
    render_index,
    substitute_placeholder,
)


class TestLoadComponentTemplate:
    """Tests for load_component_template."""

    @pytest.mark.parametrize("lang", list(Language))
    def test_every_language_has_a_template(self, lang: Language) -> None:
        source = load_component_template(lang)
        assert PLACEHOLDER in source

    def test_accepts_plain_string(self) -> None:
        assert PLACEHOLDER in load_component_template("ts")

    def test_missing_template_raises(self) -> None:
        env = Environment(loader=DictLoader({}))

        with pytest.raises(TemplateLoadError, match="ts"):
            load_component_template(Language.TS, env)

    def test_env_keeps_trailing_newline(self) -> None:
        assert create_jinja_env().keep_trailing_newline is True


class TestSubstitutePlaceholder:
    """Tests for substitute_placeholder."""

    def test_replaces_every_occurrence(self) -> None:
        template = "function COMPONENT_NAME() {}\nexport default COMPONENT_NAME;\n"
        rendered = substitute_placeholder(template, "Button")

        assert rendered.count(PLACEHOLDER) == 0
        assert rendered == "function Button() {}\nexport default Button;\n"

    def test_replacement_is_case_sensitive(self) -> None:
        rendered = substitute_placeholder("component_name COMPONENT_NAME", "Card")
        assert rendered == "component_name Card"

    def test_token_inside_identifier(self) -> None:
        assert substitute_placeholder("COMPONENT_NAMEProps", "Card") == "CardProps"


class TestRenderComponent:
    """Tests for render_component."""

    def test_js_component(self) -> None:
        rendered = render_component(Language.JS, "Button")

        assert PLACEHOLDER not in rendered
        assert "function Button()" in rendered
        assert "export default Button;" in rendered

    def test_ts_component_has_props_interface(self) -> None:
        rendered = render_component(Language.TS, "Button")

        assert PLACEHOLDER not in rendered
        assert "interface ButtonProps" in rendered

    def test_uses_name_verbatim(self) -> None:
        rendered = render_component(Language.JS, "NavBar")
        assert "NavBar" in rendered
        assert "nav-bar" not in rendered

    def test_with_custom_env(self) -> None:
        env = Environment(loader=DictLoader({"js.jsx": "<COMPONENT_NAME />"}))
        assert render_component(Language.JS, "Card", env) == "<Card />"


class TestRenderIndex:
    """Tests for render_index."""

    def test_pascal_file_name(self) -> None:
        assert render_index("Button") == "export * from './Button';\n"

    def test_kebab_file_name(self) -> None:
        assert render_index("nav-bar") == "export * from './nav-bar';\n"

    def test_missing_index_template_raises(self) -> None:
        env = Environment(loader=DictLoader({}))

        with pytest.raises(TemplateLoadError):
            render_index("Button", env)
