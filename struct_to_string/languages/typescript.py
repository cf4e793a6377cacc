"""
TypeScript profile.

Renders an ``interface`` with two-space indentation. Every numeric kind
maps to ``number``; optional values are ``T | undefined`` unions, which get
parenthesised inside array suffixes.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

TYPESCRIPT_TYPE_MAP = {
    ScalarKind.BOOL: "boolean",
    ScalarKind.INT8: "number",
    ScalarKind.INT16: "number",
    ScalarKind.INT32: "number",
    ScalarKind.INT64: "number",
    ScalarKind.UINT8: "number",
    ScalarKind.UINT16: "number",
    ScalarKind.UINT32: "number",
    ScalarKind.UINT64: "number",
    ScalarKind.FLOAT32: "number",
    ScalarKind.FLOAT64: "number",
    ScalarKind.STRING: "string",
    ScalarKind.CHAR: "string",
    ScalarKind.UNIT: "void",
}

TYPESCRIPT_PROFILE = LanguageProfile(
    language_id="typescript",
    display_name="TypeScript",
    file_extension=".ts",
    aliases=("ts",),
    block_template="interface {{ name }} {",
    field_template=(
        "{{ indent }}{{ name }}: {{ type }};"
        "{% if note %} {{ note | comment('//') }}{% endif %}"
    ),
    closing="}",
    indent="  ",
    type_table=TYPESCRIPT_TYPE_MAP,
    container_syntax=ContainerSyntax(
        optional="{inner} | undefined",
        sequence="{inner}[]",
        mapping="Record<{key}, {value}>",
        generic="{base}<{args}>",
        array="{inner}[]",
        tuple="[{elements}]",
        grouped_kinds=("optional",),
    ),
    unsupported="unknown",
)
