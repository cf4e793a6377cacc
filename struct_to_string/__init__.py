"""
struct_to_string

Renders one canonical struct definition as Rust, Go, Python, TypeScript,
Java and C# source snippets for documentation.
"""

from .core import (
    ConfigError,
    DescriptorError,
    FieldDescriptor,
    LanguageProfile,
    RenderConfig,
    RenderResult,
    ScalarKind,
    StructDescriptor,
    render,
    resolve,
    struct_from_dict,
)
from .entry import render_all, render_struct, render_struct_result, struct_to_string
from .introspect import describe_class
from .registry import (
    ProfileRegistry,
    RegistryError,
    get_language_info,
    get_profile,
    get_registry,
    is_language_supported,
    list_supported_languages,
    register_profile,
)

# Version info
__version__ = "0.1.0"

__all__ = [
    "StructDescriptor",
    "FieldDescriptor",
    "ScalarKind",
    "LanguageProfile",
    "RenderConfig",
    "RenderResult",
    "DescriptorError",
    "ConfigError",
    "RegistryError",
    "ProfileRegistry",
    "struct_to_string",
    "describe_class",
    "struct_from_dict",
    "render",
    "resolve",
    "render_struct",
    "render_struct_result",
    "render_all",
    "get_registry",
    "get_profile",
    "register_profile",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
]
