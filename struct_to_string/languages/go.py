"""
Go profile.

Fields are exported (PascalCase) and indented with tabs as gofmt does.
Go has no tuples; a tuple field renders as ``struct{}`` with a trailing
comment describing the original shape.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

GO_TYPE_MAP = {
    ScalarKind.BOOL: "bool",
    ScalarKind.INT8: "int8",
    ScalarKind.INT16: "int16",
    ScalarKind.INT32: "int32",
    ScalarKind.INT64: "int64",
    ScalarKind.UINT8: "uint8",
    ScalarKind.UINT16: "uint16",
    ScalarKind.UINT32: "uint32",
    ScalarKind.UINT64: "uint64",
    ScalarKind.FLOAT32: "float32",
    ScalarKind.FLOAT64: "float64",
    ScalarKind.STRING: "string",
    ScalarKind.CHAR: "rune",
    ScalarKind.UNIT: "struct{}",
}

GO_PROFILE = LanguageProfile(
    language_id="go",
    display_name="Go",
    file_extension=".go",
    aliases=("golang",),
    block_template="type {{ name }} struct {",
    field_template=(
        "{{ indent }}{{ name | pascal_case }} {{ type }}"
        "{% if note %} {{ note | comment('//') }}{% endif %}"
    ),
    closing="}",
    indent="\t",
    type_table=GO_TYPE_MAP,
    container_syntax=ContainerSyntax(
        optional="*{inner}",
        sequence="[]{inner}",
        mapping="map[{key}]{value}",
        generic="{base}[{args}]",
        array="[{length}]{inner}",
        tuple=None,
    ),
    unsupported="struct{}",
)
