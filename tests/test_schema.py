"""Tests for struct descriptors and the JSON-style loader."""

import pytest

from struct_to_string.core import types as tx
from struct_to_string.core.schema import (
    FieldDescriptor,
    StructDescriptor,
    struct_from_dict,
    struct_to_dict,
    type_from_dict,
    type_to_dict,
)
from struct_to_string.core.types import DescriptorError, ScalarKind


class TestDescriptors:
    def test_fields_keep_declaration_order(self, comprehensive_struct):
        assert comprehensive_struct.field_names()[:3] == [
            "int_field",
            "uint_field",
            "float_field",
        ]
        assert len(comprehensive_struct.fields) == 13

    def test_duplicate_field_names_pass_through(self):
        struct = StructDescriptor(
            "Dup",
            [
                FieldDescriptor("x", tx.scalar("int32")),
                FieldDescriptor("x", tx.scalar("string")),
            ],
        )

        assert struct.field_names() == ["x", "x"]
        assert struct.get_field("x").type == tx.scalar("int32")
        assert struct.get_field("y") is None

    @pytest.mark.parametrize("name", ["", "has space", "1abc", None])
    def test_invalid_struct_name(self, name):
        with pytest.raises(DescriptorError):
            StructDescriptor(name, ())

    def test_invalid_field_type(self):
        with pytest.raises(DescriptorError, match="must be a TypeExpr"):
            FieldDescriptor("age", "int32")

    def test_is_recursive(self, node_struct, my_struct):
        assert node_struct.is_recursive()
        assert not my_struct.is_recursive()


class TestTypeFromDict:
    def test_scalar_strings(self):
        assert type_from_dict("int32") == tx.Scalar(ScalarKind.INT32)
        assert type_from_dict("void") == tx.Scalar(ScalarKind.UNIT)

    def test_other_strings_are_named(self):
        assert type_from_dict("chrono::DateTime") == tx.Named(("chrono", "DateTime"))

    def test_containers(self):
        expr = type_from_dict(
            {"mapping": ["string", {"sequence": {"optional": "float32"}}]}
        )

        assert expr == tx.Mapping(
            tx.scalar("string"), tx.Sequence(tx.Optional(tx.scalar("float32")))
        )

    def test_array_and_tuple(self):
        assert type_from_dict({"array": "uint8", "length": 16}) == tx.Array(
            tx.scalar("uint8"), 16
        )
        assert type_from_dict({"tuple": ["int32", "string"]}) == tx.Tuple(
            (tx.scalar("int32"), tx.scalar("string"))
        )

    def test_generic_named(self):
        expr = type_from_dict({"named": "Result", "args": ["int32", "Error"]})

        assert expr == tx.named("Result", tx.scalar("int32"), tx.named("Error"))

    @pytest.mark.parametrize(
        "value, message",
        [
            ({"mapping": "string"}, "mapping"),
            ({"array": "int32"}, "length"),
            ({"tuple": "int32"}, "tuple"),
            ({"named": 3}, "named"),
            ({"unknown": "int32"}, "unrecognized"),
            (42, "expected a string or object"),
            ("::", "empty type name"),
            ({"optional": "int32", "sequence": "string"}, "got several \\(optional, sequence\\)"),
        ],
    )
    def test_malformed_descriptions(self, value, message):
        with pytest.raises(DescriptorError, match=message):
            type_from_dict(value)


class TestStructFromDict:
    def test_loads_comprehensive_document(self, comprehensive_struct):
        assert comprehensive_struct.name == "ComprehensiveTestStruct"
        assert comprehensive_struct.get_field("array_field").type == tx.Array(
            tx.scalar("int32"), 3
        )

    def test_error_names_offending_field(self):
        data = {
            "name": "Broken",
            "fields": [
                {"name": "ok", "type": "int32"},
                {"name": "bad", "type": {"mapping": ["string"]}},
            ],
        }

        with pytest.raises(DescriptorError, match=r"Broken\.fields\[1\]"):
            struct_from_dict(data)

    def test_missing_name(self):
        with pytest.raises(DescriptorError, match="Struct name"):
            struct_from_dict({"fields": []})

    def test_field_entry_without_type(self):
        with pytest.raises(DescriptorError, match="'name' and 'type'"):
            struct_from_dict({"name": "S", "fields": [{"name": "x"}]})

    def test_to_dict_reloads_to_same_struct(self, comprehensive_struct):
        dumped = struct_to_dict(comprehensive_struct)

        assert dumped["fields"][10] == {
            "name": "tuple_struct_field",
            "type": {"named": "TupleStruct"},
        }
        assert struct_from_dict(dumped) == comprehensive_struct

    def test_type_to_dict_joins_path(self):
        assert type_to_dict(tx.named("a.b.C", tx.scalar("bool"))) == {
            "named": "a::b::C",
            "args": ["bool"],
        }
