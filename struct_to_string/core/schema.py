"""
Core struct representation for rendering.

Holds the language-neutral description of a struct (its name and ordered
fields) and converts JSON-style dictionaries into that description so the
renderers can work with it consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from . import types as tx
from .types import DescriptorError, TypeExpr

# Object keys that each introduce one type construct
CONSTRUCT_KEYS = ("optional", "sequence", "mapping", "array", "tuple", "named")


def _check_identifier(what: str, name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise DescriptorError(f"{what} must be a non-empty string, got {name!r}")
    if not name.isidentifier():
        raise DescriptorError(f"{what} is not a valid identifier: {name!r}")


@dataclass(frozen=True)
class FieldDescriptor:
    """A single named, typed field."""

    name: str
    type: TypeExpr

    def __post_init__(self):
        _check_identifier("Field name", self.name)
        if not isinstance(self.type, TypeExpr):
            raise DescriptorError(
                f"Field {self.name!r} type must be a TypeExpr, "
                f"got {type(self.type).__name__}"
            )


@dataclass(frozen=True)
class StructDescriptor:
    """
    A struct's name and its fields in declaration order.

    Field order is preserved exactly. Duplicate field names are passed
    through; this layer does not check uniqueness.
    """

    name: str
    fields: Tuple[FieldDescriptor, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _check_identifier("Struct name", self.name)
        object.__setattr__(self, "fields", tuple(self.fields))
        for item in self.fields:
            if not isinstance(item, FieldDescriptor):
                raise DescriptorError(
                    f"Struct {self.name!r} fields must be FieldDescriptor, "
                    f"got {type(item).__name__}"
                )

    def field_names(self) -> List[str]:
        """Field names in declaration order."""
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldDescriptor]:
        """Get the first field with the given name."""
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def is_recursive(self) -> bool:
        """Check whether any field refers back to this struct by name."""
        return any(tx.references(f.type, self.name) for f in self.fields)


def type_from_dict(value: Any, where: str = "type") -> TypeExpr:
    """
    Convert a JSON-style type description into a TypeExpr.

    Strings naming a scalar kind become ``Scalar``; any other string is a
    ``Named`` reference. Objects use one of the keys ``optional``,
    ``sequence``, ``mapping``, ``array``, ``tuple`` or ``named``.

    Raises:
        DescriptorError: If the description is malformed
    """
    if isinstance(value, str):
        kind = tx.parse_scalar_kind(value)
        if kind is not None:
            return tx.Scalar(kind)
        path = tx.split_path(value)
        if not path:
            raise DescriptorError(f"{where}: empty type name")
        return tx.Named(path)

    if not isinstance(value, dict):
        raise DescriptorError(
            f"{where}: expected a string or object, got {type(value).__name__}"
        )

    present = [key for key in CONSTRUCT_KEYS if key in value]
    if len(present) > 1:
        raise DescriptorError(
            f"{where}: expected one of {', '.join(CONSTRUCT_KEYS)}, "
            f"got several ({', '.join(present)})"
        )

    if "optional" in value:
        return tx.Optional(type_from_dict(value["optional"], f"{where}.optional"))

    if "sequence" in value:
        return tx.Sequence(type_from_dict(value["sequence"], f"{where}.sequence"))

    if "mapping" in value:
        pair = value["mapping"]
        if not isinstance(pair, list) or len(pair) != 2:
            raise DescriptorError(f"{where}.mapping: expected [key, value]")
        return tx.Mapping(
            type_from_dict(pair[0], f"{where}.mapping[0]"),
            type_from_dict(pair[1], f"{where}.mapping[1]"),
        )

    if "array" in value:
        if "length" not in value:
            raise DescriptorError(f"{where}.array: missing 'length'")
        return tx.Array(type_from_dict(value["array"], f"{where}.array"), value["length"])

    if "tuple" in value:
        elements = value["tuple"]
        if not isinstance(elements, list):
            raise DescriptorError(f"{where}.tuple: expected a list of types")
        return tx.Tuple(
            tuple(
                type_from_dict(item, f"{where}.tuple[{i}]")
                for i, item in enumerate(elements)
            )
        )

    if "named" in value:
        name = value["named"]
        if not isinstance(name, str):
            raise DescriptorError(f"{where}.named: expected a string")
        args = value.get("args", [])
        if not isinstance(args, list):
            raise DescriptorError(f"{where}.args: expected a list of types")
        return tx.Named(
            tx.split_path(name),
            tuple(
                type_from_dict(arg, f"{where}.args[{i}]") for i, arg in enumerate(args)
            ),
        )

    raise DescriptorError(f"{where}: unrecognized type description {value!r}")


def type_to_dict(expr: TypeExpr) -> Any:
    """Convert a TypeExpr back into its JSON-style description."""
    if isinstance(expr, tx.Scalar):
        return expr.kind.value
    if isinstance(expr, tx.Optional):
        return {"optional": type_to_dict(expr.inner)}
    if isinstance(expr, tx.Sequence):
        return {"sequence": type_to_dict(expr.inner)}
    if isinstance(expr, tx.Mapping):
        return {"mapping": [type_to_dict(expr.key), type_to_dict(expr.value)]}
    if isinstance(expr, tx.Array):
        return {"array": type_to_dict(expr.inner), "length": expr.length}
    if isinstance(expr, tx.Tuple):
        return {"tuple": [type_to_dict(e) for e in expr.elements]}
    if isinstance(expr, tx.Named):
        result: Dict[str, Any] = {"named": "::".join(expr.path)}
        if expr.generic_args:
            result["args"] = [type_to_dict(a) for a in expr.generic_args]
        return result
    raise DescriptorError(f"Unsupported type expression: {expr!r}")


def struct_from_dict(data: Any) -> StructDescriptor:
    """
    Convert a JSON-style struct description into a StructDescriptor.

    Args:
        data: ``{"name": str, "fields": [{"name": str, "type": ...}, ...]}``

    Returns:
        StructDescriptor with fields in document order
    """
    if not isinstance(data, dict):
        raise DescriptorError(
            f"Struct description must be an object, got {type(data).__name__}"
        )

    name = data.get("name")
    raw_fields = data.get("fields", [])
    if not isinstance(raw_fields, list):
        raise DescriptorError(f"Struct {name!r}: 'fields' must be a list")

    fields = []
    for index, raw in enumerate(raw_fields):
        where = f"{name}.fields[{index}]"
        if not isinstance(raw, dict) or "name" not in raw or "type" not in raw:
            raise DescriptorError(f"{where}: expected an object with 'name' and 'type'")
        fields.append(
            FieldDescriptor(raw["name"], type_from_dict(raw["type"], f"{where}.type"))
        )

    return StructDescriptor(name, tuple(fields))


def struct_to_dict(struct: StructDescriptor) -> Dict[str, Any]:
    """Convert a StructDescriptor into its JSON-style description."""
    return {
        "name": struct.name,
        "fields": [{"name": f.name, "type": type_to_dict(f.type)} for f in struct.fields],
    }
