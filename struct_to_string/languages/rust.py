"""
Rust profile.

Renders ``struct`` definitions the way rustfmt lays them out, except that
the last field carries no trailing comma.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

RUST_TYPE_MAP = {
    ScalarKind.BOOL: "bool",
    ScalarKind.INT8: "i8",
    ScalarKind.INT16: "i16",
    ScalarKind.INT32: "i32",
    ScalarKind.INT64: "i64",
    ScalarKind.UINT8: "u8",
    ScalarKind.UINT16: "u16",
    ScalarKind.UINT32: "u32",
    ScalarKind.UINT64: "u64",
    ScalarKind.FLOAT32: "f32",
    ScalarKind.FLOAT64: "f64",
    ScalarKind.STRING: "String",
    ScalarKind.CHAR: "char",
    ScalarKind.UNIT: "()",
}

RUST_PROFILE = LanguageProfile(
    language_id="rust",
    display_name="Rust",
    file_extension=".rs",
    aliases=("rs",),
    block_template="struct {{ name }} {",
    field_template="{{ indent }}{{ name }}: {{ type }}",
    field_separator=",\n",
    closing="}",
    type_table=RUST_TYPE_MAP,
    container_syntax=ContainerSyntax(
        optional="Option<{inner}>",
        sequence="Vec<{inner}>",
        mapping="HashMap<{key}, {value}>",
        generic="{base}<{args}>",
        array="[{inner}; {length}]",
        tuple="({elements})",
    ),
    unsupported="()",
)
