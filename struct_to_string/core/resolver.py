"""
Type resolution: canonical type expressions to target type syntax.

Resolution is structural and depth-first. Anything a profile has no entry
for is passed through verbatim rather than rejected, so the output may not
compile for exotic types.
"""

from typing import List

from ..logging_config import get_logger
from . import types as tx
from .profile import LanguageProfile

logger = get_logger(__name__)

# Containers whose template puts the inner fragment before a suffix (T[])
POSTFIX_TAGS = ("sequence", "array")


def resolve(expr: tx.TypeExpr, profile: LanguageProfile) -> str:
    """
    Resolve a type expression to a type fragment for the profile's language.

    Args:
        expr: Type to resolve
        profile: Target language profile

    Returns:
        Rendered type fragment
    """
    return _resolve(expr, profile, boxed=False)


def _resolve(expr: tx.TypeExpr, profile: LanguageProfile, boxed: bool) -> str:
    syntax = profile.container_syntax

    if isinstance(expr, tx.Scalar):
        fragment = profile.scalar_name(expr.kind, boxed)
        if fragment is None:
            logger.debug(
                "No %s mapping for scalar %s, passing through",
                profile.language_id,
                expr.kind.value,
            )
            return expr.kind.value
        return fragment

    if isinstance(expr, tx.Optional):
        inner = _resolve(expr.inner, profile, boxed=True)
        return syntax.optional.format(inner=inner)

    if isinstance(expr, tx.Sequence):
        inner = _resolve_postfix_inner(expr.inner, profile, syntax.sequence)
        return syntax.sequence.format(inner=inner)

    if isinstance(expr, tx.Mapping):
        key = _resolve(expr.key, profile, boxed=True)
        value = _resolve(expr.value, profile, boxed=True)
        return syntax.mapping.format(key=key, value=value)

    if isinstance(expr, tx.Array):
        if syntax.array is None:
            return profile.unsupported
        # Arrays keep primitive element types (int[] in Java)
        inner = _resolve(expr.inner, profile, boxed=False)
        if expr.inner.tag in syntax.grouped_kinds and _is_postfix(syntax.array):
            inner = syntax.group.format(inner=inner)
        return syntax.array.format(inner=inner, length=expr.length)

    if isinstance(expr, tx.Tuple):
        if syntax.tuple is None:
            return profile.unsupported
        elements = syntax.arg_separator.join(
            _resolve(e, profile, boxed=True) for e in expr.elements
        )
        return syntax.tuple.format(elements=elements)

    if isinstance(expr, tx.Named):
        base = profile.named_overrides.get(expr.display_name, expr.display_name)
        if not expr.generic_args:
            return base
        args = syntax.arg_separator.join(
            _resolve(arg, profile, boxed=True) for arg in expr.generic_args
        )
        return syntax.generic.format(base=base, args=args)

    # Unknown node types degrade to their repr rather than failing
    logger.warning("Unrecognized type expression %r, passing through", expr)
    return str(expr)


def _is_postfix(template: str) -> bool:
    return template.startswith("{inner}")


def _resolve_postfix_inner(
    inner: tx.TypeExpr, profile: LanguageProfile, template: str
) -> str:
    syntax = profile.container_syntax
    fragment = _resolve(inner, profile, boxed=True)
    if inner.tag in syntax.grouped_kinds and _is_postfix(template):
        return syntax.group.format(inner=fragment)
    return fragment


def unsupported_nodes(expr: tx.TypeExpr, profile: LanguageProfile) -> List[tx.TypeExpr]:
    """
    Find the outermost nodes the profile cannot express.

    Nodes nested inside an unsupported node are not reported separately.
    """
    if expr.tag in ("array", "tuple") and not profile.supports(expr.tag):
        return [expr]
    found: List[tx.TypeExpr] = []
    for child in expr.children():
        found.extend(unsupported_nodes(child, profile))
    return found


def passthrough_names(expr: tx.TypeExpr, profile: LanguageProfile) -> List[str]:
    """List scalar kinds in the tree that the profile emits verbatim."""
    names = []
    for node in tx.walk(expr):
        if isinstance(node, tx.Scalar) and node.kind not in profile.type_table:
            names.append(node.kind.value)
    return names
