"""
Python profile.

Renders a ``@dataclass`` with ``typing`` generics (``List``, ``Dict``,
``Optional``). Python has no closing delimiter; an empty struct gets a
``pass`` body.
"""

from ..core.profile import ContainerSyntax, LanguageProfile
from ..core.types import ScalarKind

# Python ints and floats are unbounded / double precision
PYTHON_TYPE_MAP = {
    ScalarKind.BOOL: "bool",
    ScalarKind.INT8: "int",
    ScalarKind.INT16: "int",
    ScalarKind.INT32: "int",
    ScalarKind.INT64: "int",
    ScalarKind.UINT8: "int",
    ScalarKind.UINT16: "int",
    ScalarKind.UINT32: "int",
    ScalarKind.UINT64: "int",
    ScalarKind.FLOAT32: "float",
    ScalarKind.FLOAT64: "float",
    ScalarKind.STRING: "str",
    ScalarKind.CHAR: "str",
    ScalarKind.UNIT: "None",
}

PYTHON_PROFILE = LanguageProfile(
    language_id="python",
    display_name="Python",
    file_extension=".py",
    aliases=("py",),
    prefix_lines=("@dataclass",),
    block_template="class {{ name }}:",
    field_template=(
        "{{ indent }}{{ name }}: {{ type }}"
        "{% if note %}  {{ note | comment('#') }}{% endif %}"
    ),
    closing="",
    empty_body="pass",
    type_table=PYTHON_TYPE_MAP,
    container_syntax=ContainerSyntax(
        optional="Optional[{inner}]",
        sequence="List[{inner}]",
        mapping="Dict[{key}, {value}]",
        generic="{base}[{args}]",
        array="List[{inner}]",
        tuple="Tuple[{elements}]",
    ),
    unsupported="Any",
)
