"""Tests for the language profile registry."""

import pytest

from struct_to_string.core import types as tx
from struct_to_string.core.profile import ContainerSyntax, LanguageProfile
from struct_to_string.core.schema import FieldDescriptor, StructDescriptor
from struct_to_string.entry import render_struct
from struct_to_string.languages import GO_PROFILE, RUST_PROFILE
from struct_to_string.registry import (
    ProfileRegistry,
    RegistryError,
    get_language_info,
    get_registry,
    is_language_supported,
    list_supported_languages,
    register_profile,
)

KOTLIN_PROFILE = LanguageProfile(
    language_id="kotlin",
    display_name="Kotlin",
    file_extension=".kt",
    aliases=("kt",),
    block_template="data class {{ name }}(",
    field_template="{{ indent }}val {{ name | camel_case }}: {{ type }}",
    field_separator=",\n",
    closing=")",
    type_table={tx.ScalarKind.INT32: "Int", tx.ScalarKind.STRING: "String"},
    container_syntax=ContainerSyntax(
        optional="{inner}?",
        sequence="List<{inner}>",
        mapping="Map<{key}, {value}>",
        generic="{base}<{args}>",
    ),
    unsupported="Any",
)


@pytest.fixture
def registry():
    reg = ProfileRegistry()
    reg.register(RUST_PROFILE)
    reg.register(GO_PROFILE)
    return reg


@pytest.fixture
def kotlin_registered():
    register_profile(KOTLIN_PROFILE)
    yield KOTLIN_PROFILE
    get_registry().unregister("kotlin")


def test_lookup_by_id_and_alias(registry):
    assert registry.get_profile("rust") is RUST_PROFILE
    assert registry.get_profile("RS") is RUST_PROFILE
    assert registry.get_profile("golang") is GO_PROFILE
    assert registry.canonical_name("rs") == "rust"


def test_unknown_language_lists_available(registry):
    with pytest.raises(RegistryError, match="Available: go, rust"):
        registry.get_profile("cobol")


def test_alias_conflict_leaves_registry_unchanged(registry):
    clash = KOTLIN_PROFILE.with_overrides(aliases=("rs",))

    with pytest.raises(RegistryError, match="already points to 'rust'"):
        registry.register(clash)

    assert not registry.is_supported("kotlin")


def test_alias_conflicting_with_primary(registry):
    with pytest.raises(RegistryError, match="primary language"):
        registry.register(KOTLIN_PROFILE, aliases=["go"])


def test_register_skips_existing_unless_replace(registry):
    replacement = RUST_PROFILE.with_overrides(indent="  ")

    registry.register(replacement)
    assert registry.get_profile("rust") is RUST_PROFILE

    registry.register(replacement, replace=True)
    assert registry.get_profile("rust") is replacement


def test_unregister_removes_aliases(registry):
    registry.unregister("rs")

    assert registry.list_languages() == ["go"]
    assert not registry.is_supported("rust")
    assert registry.get_aliases_for_language("rust") == []


def test_register_rejects_non_profile(registry):
    with pytest.raises(RegistryError, match="Expected a LanguageProfile"):
        registry.register({"language_id": "fake"})


def test_builtin_languages():
    assert list_supported_languages() == [
        "csharp",
        "go",
        "java",
        "python",
        "rust",
        "typescript",
    ]
    for alias in ("rs", "golang", "py", "ts", "cs", "c#"):
        assert is_language_supported(alias)


def test_language_info():
    info = get_language_info("c#")

    assert info["name"] == "csharp"
    assert info["display_name"] == "C#"
    assert info["aliases"] == ["c#", "cs"]
    assert info["scalar_types"]["uint64"] == "ulong"


def test_new_language_needs_only_a_profile(kotlin_registered):
    struct = StructDescriptor(
        "User",
        (
            FieldDescriptor("user_name", tx.scalar("string")),
            FieldDescriptor("friends", tx.Sequence(tx.named("User"))),
            FieldDescriptor("age", tx.Optional(tx.scalar("int32"))),
        ),
    )

    assert render_struct(struct, "kt") == (
        "data class User(\n"
        "    val userName: String,\n"
        "    val friends: List<User>,\n"
        "    val age: Int?\n"
        ")"
    )
