"""
C# profile.

Renders a ``public class`` with public fields, nullable ``T?`` optionals
and value tuples.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

CSHARP_TYPE_MAP = {
    ScalarKind.BOOL: "bool",
    ScalarKind.INT8: "sbyte",
    ScalarKind.INT16: "short",
    ScalarKind.INT32: "int",
    ScalarKind.INT64: "long",
    ScalarKind.UINT8: "byte",
    ScalarKind.UINT16: "ushort",
    ScalarKind.UINT32: "uint",
    ScalarKind.UINT64: "ulong",
    ScalarKind.FLOAT32: "float",
    ScalarKind.FLOAT64: "double",
    ScalarKind.STRING: "string",
    ScalarKind.CHAR: "char",
    ScalarKind.UNIT: "void",
}

CSHARP_PROFILE = LanguageProfile(
    language_id="csharp",
    display_name="C#",
    file_extension=".cs",
    aliases=("cs", "c#"),
    block_template="public class {{ name }} {",
    field_template=(
        "{{ indent }}public {{ type }} {{ name }};"
        "{% if note %} {{ note | comment('//') }}{% endif %}"
    ),
    closing="}",
    type_table=CSHARP_TYPE_MAP,
    container_syntax=ContainerSyntax(
        optional="{inner}?",
        sequence="List<{inner}>",
        mapping="Dictionary<{key}, {value}>",
        generic="{base}<{args}>",
        array="{inner}[]",
        tuple="({elements})",
    ),
    unsupported="object",
)
