"""
Core rendering components.

Provides the canonical type model, struct descriptors, language profiles
and the resolver/renderer shared by all target languages.
"""

from .config import ConfigError, ConfigManager, RenderConfig, apply_config, load_config
from .profile import ContainerSyntax, LanguageProfile
from .renderer import RenderResult, render, render_result
from .resolver import resolve
from .schema import (
    FieldDescriptor,
    StructDescriptor,
    struct_from_dict,
    struct_to_dict,
    type_from_dict,
    type_to_dict,
)
from .templates import TemplateEngine, TemplateError
from .types import (
    Array,
    DescriptorError,
    Mapping,
    Named,
    Optional,
    Scalar,
    ScalarKind,
    Sequence,
    Tuple,
    TypeExpr,
    named,
    references,
    scalar,
    walk,
)

__all__ = [
    # Type model
    "TypeExpr",
    "Scalar",
    "ScalarKind",
    "Optional",
    "Sequence",
    "Mapping",
    "Array",
    "Tuple",
    "Named",
    "scalar",
    "named",
    "walk",
    "references",
    "DescriptorError",
    # Struct descriptors
    "FieldDescriptor",
    "StructDescriptor",
    "struct_from_dict",
    "struct_to_dict",
    "type_from_dict",
    "type_to_dict",
    # Profiles and rendering
    "ContainerSyntax",
    "LanguageProfile",
    "resolve",
    "render",
    "render_result",
    "RenderResult",
    # Configuration
    "RenderConfig",
    "ConfigManager",
    "ConfigError",
    "apply_config",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
]
