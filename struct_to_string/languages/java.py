"""
Java profile.

Renders a ``public class`` with public fields. Primitives are boxed in
generic positions, and an optional value is simply its boxed (nullable)
type. Unsigned kinds widen to the next signed type.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

JAVA_TYPE_MAP = {
    ScalarKind.BOOL: "boolean",
    ScalarKind.INT8: "byte",
    ScalarKind.INT16: "short",
    ScalarKind.INT32: "int",
    ScalarKind.INT64: "long",
    ScalarKind.UINT8: "short",
    ScalarKind.UINT16: "int",
    ScalarKind.UINT32: "long",
    ScalarKind.UINT64: "long",
    ScalarKind.FLOAT32: "float",
    ScalarKind.FLOAT64: "double",
    ScalarKind.STRING: "String",
    ScalarKind.CHAR: "char",
    ScalarKind.UNIT: "void",
}

JAVA_BOXED_MAP = {
    ScalarKind.BOOL: "Boolean",
    ScalarKind.INT8: "Byte",
    ScalarKind.INT16: "Short",
    ScalarKind.INT32: "Integer",
    ScalarKind.INT64: "Long",
    ScalarKind.UINT8: "Short",
    ScalarKind.UINT16: "Integer",
    ScalarKind.UINT32: "Long",
    ScalarKind.UINT64: "Long",
    ScalarKind.FLOAT32: "Float",
    ScalarKind.FLOAT64: "Double",
    ScalarKind.CHAR: "Character",
    ScalarKind.UNIT: "Void",
}

JAVA_PROFILE = LanguageProfile(
    language_id="java",
    display_name="Java",
    file_extension=".java",
    block_template="public class {{ name }} {",
    field_template=(
        "{{ indent }}public {{ type }} {{ name }};"
        "{% if note %} {{ note | comment('//') }}{% endif %}"
    ),
    closing="}",
    type_table=JAVA_TYPE_MAP,
    boxed_table=JAVA_BOXED_MAP,
    container_syntax=ContainerSyntax(
        optional="{inner}",
        sequence="List<{inner}>",
        mapping="Map<{key}, {value}>",
        generic="{base}<{args}>",
        array="{inner}[]",
        tuple="Tuple<{elements}>",
    ),
    unsupported="Object",
)
