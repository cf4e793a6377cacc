"""
Canonical type expressions for struct fields.

A closed, immutable tree describing a field's declared type independently
of any target language. Structs never inline each other: a reference to a
struct (including the enclosing one) is always a ``Named`` node.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple as TupleT


class DescriptorError(ValueError):
    """Exception raised for malformed type or struct descriptors."""

    pass


class ScalarKind(Enum):
    """Language-neutral scalar kinds."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    CHAR = "char"
    UNIT = "unit"


# "void" is accepted as a spelling of unit
SCALAR_ALIASES = {"void": ScalarKind.UNIT}


class TypeExpr:
    """Base class for all type expression nodes."""

    tag: str = ""

    def children(self) -> Iterator["TypeExpr"]:
        """Iterate over immediate child types; each call starts over."""
        return iter(())


@dataclass(frozen=True)
class Scalar(TypeExpr):
    """A primitive value type."""

    kind: ScalarKind
    tag = "scalar"

    def __post_init__(self):
        if not isinstance(self.kind, ScalarKind):
            raise DescriptorError(f"Not a scalar kind: {self.kind!r}")


@dataclass(frozen=True)
class Optional(TypeExpr):
    """A value that may be absent."""

    inner: TypeExpr
    tag = "optional"

    def __post_init__(self):
        _check_type("Optional inner", self.inner)

    def children(self) -> Iterator[TypeExpr]:
        yield self.inner


@dataclass(frozen=True)
class Sequence(TypeExpr):
    """An ordered homogeneous collection."""

    inner: TypeExpr
    tag = "sequence"

    def __post_init__(self):
        _check_type("Sequence inner", self.inner)

    def children(self) -> Iterator[TypeExpr]:
        yield self.inner


@dataclass(frozen=True)
class Mapping(TypeExpr):
    """An associative collection."""

    key: TypeExpr
    value: TypeExpr
    tag = "mapping"

    def __post_init__(self):
        _check_type("Mapping key", self.key)
        _check_type("Mapping value", self.value)

    def children(self) -> Iterator[TypeExpr]:
        yield self.key
        yield self.value


@dataclass(frozen=True)
class Array(TypeExpr):
    """A fixed-length homogeneous array."""

    inner: TypeExpr
    length: int
    tag = "array"

    def __post_init__(self):
        _check_type("Array inner", self.inner)
        if not isinstance(self.length, int) or isinstance(self.length, bool):
            raise DescriptorError(f"Array length must be an int: {self.length!r}")
        if self.length < 0:
            raise DescriptorError(f"Array length must be >= 0: {self.length}")

    def children(self) -> Iterator[TypeExpr]:
        yield self.inner


@dataclass(frozen=True)
class Tuple(TypeExpr):
    """A fixed heterogeneous tuple."""

    elements: TupleT[TypeExpr, ...] = field(default_factory=tuple)
    tag = "tuple"

    def __post_init__(self):
        object.__setattr__(self, "elements", tuple(self.elements))
        for element in self.elements:
            _check_type("Tuple element", element)

    def children(self) -> Iterator[TypeExpr]:
        yield from self.elements


@dataclass(frozen=True)
class Named(TypeExpr):
    """
    Reference to a user-defined or library type, possibly generic.

    The last path segment is the display name used when rendering.
    """

    path: TupleT[str, ...]
    generic_args: TupleT[TypeExpr, ...] = field(default_factory=tuple)
    tag = "named"

    def __post_init__(self):
        if isinstance(self.path, str):
            raise DescriptorError(
                f"Named path must be a sequence of segments, not {self.path!r}"
            )
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "generic_args", tuple(self.generic_args))

        if not self.path or not all(
            isinstance(seg, str) and seg for seg in self.path
        ):
            raise DescriptorError(f"Named path needs non-empty segments: {self.path}")
        for arg in self.generic_args:
            _check_type("Generic argument", arg)

    @property
    def display_name(self) -> str:
        return self.path[-1]

    def children(self) -> Iterator[TypeExpr]:
        yield from self.generic_args


def _check_type(what: str, value) -> None:
    if not isinstance(value, TypeExpr):
        raise DescriptorError(f"{what} must be a TypeExpr, got {type(value).__name__}")


# Walkers


def walk(expr: TypeExpr) -> Iterator[TypeExpr]:
    """Depth-first, pre-order iteration over a type expression tree."""
    yield expr
    for child in expr.children():
        yield from walk(child)


def references(expr: TypeExpr, name: str) -> bool:
    """Check whether any ``Named`` node in the tree has display name ``name``."""
    return any(
        isinstance(node, Named) and node.display_name == name for node in walk(expr)
    )


# Convenience constructors

_PATH_SPLIT = re.compile(r"::|\.")


def parse_scalar_kind(name: str) -> "ScalarKind | None":
    """Look up a scalar kind by its canonical name; None if not a scalar."""
    if name in SCALAR_ALIASES:
        return SCALAR_ALIASES[name]
    try:
        return ScalarKind(name)
    except ValueError:
        return None


def scalar(name: str) -> Scalar:
    """Build a Scalar from its canonical name (e.g. ``"int32"``)."""
    kind = parse_scalar_kind(name)
    if kind is None:
        raise DescriptorError(f"Unknown scalar kind: {name}")
    return Scalar(kind)


def split_path(name: str) -> TupleT[str, ...]:
    """Split ``a::b::C`` or ``a.b.C`` into path segments."""
    return tuple(seg for seg in _PATH_SPLIT.split(name) if seg)


def named(name: str, *generic_args: TypeExpr) -> Named:
    """Build a Named reference from a ``::`` or ``.`` separated path."""
    return Named(split_path(name), generic_args)
