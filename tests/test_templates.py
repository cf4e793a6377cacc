"""Tests for the template engine and naming filters."""

import pytest

import jinja2

from struct_to_string.core.naming import to_camel_case, to_pascal_case, to_snake_case
from struct_to_string.core.templates import TemplateEngine, TemplateError, get_template_engine
from struct_to_string.languages import GO_PROFILE, RUST_PROFILE


@pytest.mark.parametrize(
    "name, convert, expected",
    [
        ("int_field", to_pascal_case, "IntField"),
        ("user_name", to_camel_case, "userName"),
        ("userName", to_snake_case, "user_name"),
        ("user-name", to_snake_case, "user_name"),
    ],
)
def test_case_conversion(name, convert, expected):
    assert convert(name) == expected


def test_case_helpers_keep_degenerate_names():
    assert to_pascal_case("_") == "_"
    assert to_camel_case("__") == "__"
    assert to_snake_case("field1") == "field1"


def test_filters_available_in_templates():
    engine = TemplateEngine()

    rendered = engine.render_string(
        "{{ name | pascal_case }} {{ name | camel_case }} {{ name | snake_case }}",
        {"name": "next_node"},
    )

    assert rendered == "NextNode nextNode next_node"


def test_comment_filter_styles():
    engine = TemplateEngine()

    assert engine.render_string("{{ text | comment }}", {"text": "note"}) == "// note"
    assert engine.render_string("{{ text | comment('#') }}", {"text": "a\n\nb"}) == (
        "# a\n\n# b"
    )


def test_no_html_escaping():
    engine = TemplateEngine()

    assert engine.render_string("{{ t }}", {"t": "Vec<Option<&str>>"}) == (
        "Vec<Option<&str>>"
    )


def test_undefined_variable_raises():
    with pytest.raises(TemplateError, match="Failed to render"):
        TemplateEngine().render_string("{{ missing }}", {})


def test_shared_engine():
    assert get_template_engine() is get_template_engine()


def test_profiles_compile_templates_once():
    assert isinstance(GO_PROFILE.compiled_field, jinja2.Template)
    assert GO_PROFILE.compiled_field is GO_PROFILE.compiled_field

    derived = RUST_PROFILE.with_overrides(indent="  ")
    assert derived.compiled_block is not RUST_PROFILE.compiled_block


def test_template_syntax_error_surfaces_at_profile_construction():
    with pytest.raises(TemplateError, match="Failed to compile"):
        RUST_PROFILE.with_overrides(field_template="{{ indent }}{{ name ")


def test_engine_keeps_no_template_cache():
    engine = TemplateEngine()
    engine.render_string("{{ a }}", {"a": 1})

    assert not hasattr(engine, "_compiled")
