"""
Language profiles: per-target syntax rules and type-name mappings.

A profile is static configuration data. It is built once, registered,
and never mutated; ``with_overrides`` derives a new profile instead.
Its Jinja2 templates are compiled at construction, so a template syntax
error surfaces as a ``TemplateError`` before anything is rendered.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from jinja2 import Template

from .templates import get_template_engine
from .types import ScalarKind


@dataclass(frozen=True)
class ContainerSyntax:
    """
    ``str.format`` templates for compound types.

    ``optional``, ``sequence`` and ``array`` receive ``{inner}`` (``array``
    also ``{length}``), ``mapping`` receives ``{key}`` and ``{value}``,
    ``tuple`` receives ``{elements}`` and ``generic`` receives ``{base}``
    and ``{args}``. A ``None`` template marks the construct as unsupported.
    """

    optional: str
    sequence: str
    mapping: str
    generic: str
    array: Optional[str] = None
    tuple: Optional[str] = None
    arg_separator: str = ", "
    # Wrapping applied to inner fragments of postfix containers (T[])
    group: str = "({inner})"
    grouped_kinds: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LanguageProfile:
    """Syntax rules and type-name mappings for one target language."""

    language_id: str
    display_name: str
    file_extension: str

    # Jinja2 templates; block gets ``name``, field gets ``name``, ``type``,
    # ``indent`` and ``note``
    block_template: str
    field_template: str
    closing: str

    type_table: Mapping[ScalarKind, str]
    container_syntax: ContainerSyntax

    indent: str = "    "
    field_separator: str = "\n"
    empty_body: Optional[str] = None
    # Lines emitted verbatim above the opening line (decorators, attributes)
    prefix_lines: Tuple[str, ...] = ()

    # Scalar names used in generic positions (Java boxes primitives there)
    boxed_table: Mapping[ScalarKind, str] = field(default_factory=dict)
    named_overrides: Mapping[str, str] = field(default_factory=dict)

    # Fragment emitted for constructs the language cannot express
    unsupported: str = "object"
    aliases: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("type_table", "boxed_table", "named_overrides"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "prefix_lines", tuple(self.prefix_lines))

        # Templates are compiled once here; rendering only reads them
        engine = get_template_engine()
        object.__setattr__(self, "_block", engine.compile(self.block_template))
        object.__setattr__(self, "_field", engine.compile(self.field_template))

    @property
    def compiled_block(self) -> Template:
        return self._block

    @property
    def compiled_field(self) -> Template:
        return self._field

    def scalar_name(self, kind: ScalarKind, boxed: bool = False) -> Optional[str]:
        """Look up a scalar's fragment; None when the profile has no entry."""
        if boxed and kind in self.boxed_table:
            return self.boxed_table[kind]
        return self.type_table.get(kind)

    def supports(self, tag: str) -> bool:
        """Check whether the profile has syntax for an optional construct."""
        return getattr(self.container_syntax, tag, None) is not None

    def with_overrides(self, **changes) -> "LanguageProfile":
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)
