"""
Build struct descriptors from Python class declarations.

Dataclasses and other annotated classes are normalised into the canonical
model: builtin scalars and containers map onto ``Scalar``, ``Optional``,
``Sequence``, ``Mapping`` and ``Tuple``; every other class becomes a
``Named`` reference and is never expanded, so self-references are safe.
"""

import collections.abc
import dataclasses
import json
import types
import typing
from functools import lru_cache
from typing import Any, Annotated, ClassVar, Dict, Union, get_args, get_origin, get_type_hints

from .core import types as tx
from .core.schema import FieldDescriptor, StructDescriptor, type_to_dict
from .core.types import DescriptorError, ScalarKind
from .logging_config import get_logger

logger = get_logger(__name__)

# Plain Python ints and floats default to the widest canonical kinds;
# use Annotated[int, ScalarKind.INT32] for an explicit width
PYTHON_SCALARS: Dict[Any, ScalarKind] = {
    bool: ScalarKind.BOOL,
    int: ScalarKind.INT64,
    float: ScalarKind.FLOAT64,
    str: ScalarKind.STRING,
    type(None): ScalarKind.UNIT,
}

SEQUENCE_ORIGINS = {
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
}

MAPPING_ORIGINS = {
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
}

UNION_ORIGINS = {Union, types.UnionType}


def annotation_to_type(annotation: Any) -> tx.TypeExpr:
    """
    Normalise a Python type annotation into a TypeExpr.

    Unknown annotations become ``Named`` references to their own name.
    """
    if isinstance(annotation, tx.TypeExpr):
        return annotation

    if annotation is None:
        return tx.Scalar(ScalarKind.UNIT)

    if isinstance(annotation, type) and annotation in PYTHON_SCALARS:
        return tx.Scalar(PYTHON_SCALARS[annotation])

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        for meta in args[1:]:
            # A TypeExpr replaces the annotated type outright
            if isinstance(meta, tx.TypeExpr):
                return meta
        inner = annotation_to_type(args[0])
        for meta in args[1:]:
            if isinstance(meta, ScalarKind):
                return _with_width(inner, meta)
        return inner

    if origin in UNION_ORIGINS:
        return _union_to_type(args)

    if _is_one_of(annotation, origin, SEQUENCE_ORIGINS):
        inner = annotation_to_type(args[0]) if args else _any()
        return tx.Sequence(inner)

    if _is_one_of(annotation, origin, MAPPING_ORIGINS):
        if len(args) == 2:
            return tx.Mapping(annotation_to_type(args[0]), annotation_to_type(args[1]))
        return tx.Mapping(_any(), _any())

    if annotation is tuple:
        return tx.Sequence(_any())

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tx.Sequence(annotation_to_type(args[0]))
        if not args or args == ((),):
            return tx.Tuple(())
        return tx.Tuple(tuple(annotation_to_type(a) for a in args))

    if annotation is Any:
        return _any()

    if isinstance(annotation, typing.TypeVar):
        return tx.Named((annotation.__name__,))

    if origin is not None and isinstance(origin, type):
        return tx.Named(
            _class_path(origin), tuple(annotation_to_type(a) for a in args)
        )

    if isinstance(annotation, type):
        return tx.Named(_class_path(annotation))

    if isinstance(annotation, (str, typing.ForwardRef)):
        name = annotation if isinstance(annotation, str) else annotation.__forward_arg__
        return tx.named(name)

    logger.debug("Unrecognized annotation %r, using its repr as a name", annotation)
    return tx.Named((getattr(annotation, "__name__", None) or repr(annotation),))


def _is_one_of(annotation: Any, origin: Any, candidates) -> bool:
    return (isinstance(annotation, type) and annotation in candidates) or (
        origin is not None and origin in candidates
    )


def _with_width(expr: tx.TypeExpr, kind: ScalarKind) -> tx.TypeExpr:
    """Apply a scalar width to a scalar, or to the scalar inside an optional or sequence."""
    if isinstance(expr, tx.Scalar):
        return tx.Scalar(kind)
    if isinstance(expr, tx.Optional):
        return tx.Optional(_with_width(expr.inner, kind))
    if isinstance(expr, tx.Sequence):
        return tx.Sequence(_with_width(expr.inner, kind))
    logger.debug("Ignoring width %s on %r", kind.value, expr)
    return expr


def _any() -> tx.Named:
    return tx.Named(("Any",))


def _union_to_type(args) -> tx.TypeExpr:
    members = [a for a in args if a is not type(None)]
    optional = len(members) != len(args)

    if len(members) == 1:
        inner = annotation_to_type(members[0])
    else:
        # Union of several types: best effort as a generic reference.
        # Members are sorted; typing may hand back a cached union in any order
        converted = sorted(
            (annotation_to_type(m) for m in members),
            key=lambda t: json.dumps(type_to_dict(t), sort_keys=True),
        )
        inner = tx.Named(("Union",), tuple(converted))

    return tx.Optional(inner) if optional else inner


def _class_path(cls: type):
    # Local classes carry "<locals>" segments in their qualname; only the
    # last segment is ever displayed
    return tuple(cls.__qualname__.split("."))


@lru_cache(maxsize=None)
def describe_class(cls: type) -> StructDescriptor:
    """
    Build a StructDescriptor from a dataclass or annotated class.

    Fields keep their declaration order (base class fields first).
    Results are cached per class.

    Raises:
        DescriptorError: If the annotations cannot be resolved
    """
    if not isinstance(cls, type):
        raise DescriptorError(f"Expected a class, got {type(cls).__name__}")

    try:
        hints = get_type_hints(cls, localns={cls.__name__: cls}, include_extras=True)
    except (NameError, TypeError) as e:
        raise DescriptorError(f"Cannot resolve annotations of {cls.__name__}: {e}") from e

    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    else:
        names = [
            name for name, hint in hints.items() if get_origin(hint) is not ClassVar
        ]

    fields = tuple(FieldDescriptor(name, annotation_to_type(hints[name])) for name in names)
    logger.debug("Described %s with %d fields", cls.__name__, len(fields))
    return StructDescriptor(cls.__name__, fields)
