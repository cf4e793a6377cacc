"""Shared fixtures for struct_to_string tests."""

import pytest

from struct_to_string.core import types as tx
from struct_to_string.core.schema import FieldDescriptor, StructDescriptor, struct_from_dict


COMPREHENSIVE_DOCUMENT = {
    "name": "ComprehensiveTestStruct",
    "fields": [
        {"name": "int_field", "type": "int32"},
        {"name": "uint_field", "type": "uint32"},
        {"name": "float_field", "type": "float64"},
        {"name": "bool_field", "type": "bool"},
        {"name": "char_field", "type": "char"},
        {"name": "str_field", "type": "string"},
        {"name": "option_field", "type": {"optional": "int32"}},
        {"name": "array_field", "type": {"array": "int32", "length": 3}},
        {"name": "slice_field", "type": {"sequence": "int32"}},
        {"name": "tuple_field", "type": {"tuple": ["int32", "string"]}},
        {"name": "tuple_struct_field", "type": "TupleStruct"},
        {"name": "enum_field", "type": "AnEnum"},
        {"name": "nested_struct_field", "type": "NestedStruct"},
    ],
}


@pytest.fixture
def comprehensive_document():
    """JSON-style description of a struct using every construct."""
    return COMPREHENSIVE_DOCUMENT


@pytest.fixture
def comprehensive_struct():
    """Descriptor of a struct using every construct."""
    return struct_from_dict(COMPREHENSIVE_DOCUMENT)


@pytest.fixture
def my_struct():
    return StructDescriptor(
        "MyStruct",
        (
            FieldDescriptor("field1", tx.scalar("int32")),
            FieldDescriptor("field2", tx.scalar("string")),
        ),
    )


@pytest.fixture
def node_struct():
    """Self-referencing linked list node."""
    return StructDescriptor(
        "Node",
        (
            FieldDescriptor("value", tx.scalar("int32")),
            FieldDescriptor("next", tx.Optional(tx.named("Node"))),
        ),
    )
