"""
Struct rendering: assembles a full definition string for one target.

Fields are emitted strictly in declaration order so that rendered
definitions stay stable for documentation diffs.
"""

from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from . import types as tx
from .profile import LanguageProfile
from .resolver import passthrough_names, resolve, unsupported_nodes
from .schema import FieldDescriptor, StructDescriptor
from .templates import TemplateEngine, get_template_engine

logger = get_logger(__name__)


def _generic_rendering(node: tx.TypeExpr, profile: LanguageProfile) -> str:
    """Render an unsupported node using target scalar names and neutral syntax."""
    if isinstance(node, tx.Tuple):
        return "(" + ", ".join(resolve(e, profile) for e in node.elements) + ")"
    if isinstance(node, tx.Array):
        return f"[{resolve(node.inner, profile)}; {node.length}]"
    return resolve(node, profile)


def _field_note(item: FieldDescriptor, profile: LanguageProfile) -> str:
    notes = []
    for node in unsupported_nodes(item.type, profile):
        noun = "TUPLES" if node.tag == "tuple" else "FIXED-SIZE ARRAYS"
        notes.append(
            f"CANNOT CONVERT THIS TO THE {profile.display_name.upper()} PROGRAMMING "
            f"LANGUAGE. {noun} ARE UNSUPPORTED BY {profile.display_name.upper()}: "
            f"{_generic_rendering(node, profile)}"
        )
    return "; ".join(notes)


def render_field(
    item: FieldDescriptor,
    profile: LanguageProfile,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """Render one field line (without separator)."""
    engine = engine or get_template_engine()
    context = {
        "name": item.name,
        "type": resolve(item.type, profile),
        "indent": profile.indent,
        "note": _field_note(item, profile),
    }
    return engine.render_template(profile.compiled_field, context)


def render(struct: StructDescriptor, profile: LanguageProfile) -> str:
    """
    Render a struct definition for the profile's language.

    Args:
        struct: Struct to render
        profile: Target language profile

    Returns:
        Complete definition, without a trailing newline
    """
    engine = get_template_engine()

    parts = list(profile.prefix_lines)
    parts.append(
        engine.render_template(profile.compiled_block, {"name": struct.name})
    )

    if struct.fields:
        lines = [render_field(item, profile, engine) for item in struct.fields]
        parts.append(profile.field_separator.join(lines))
    elif profile.empty_body is not None:
        parts.append(profile.indent + profile.empty_body)

    if profile.closing:
        parts.append(profile.closing)

    logger.debug(
        "Rendered %s for %s (%d fields)",
        struct.name,
        profile.language_id,
        len(struct.fields),
    )
    return "\n".join(parts)


class RenderResult:
    """Container for a rendered definition and its metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize render result.

        Args:
            code: Rendered definition
            warnings: Fidelity warnings (passthrough types, unsupported constructs)
            metadata: Additional metadata about the rendering
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}

    @property
    def exact(self) -> bool:
        """True when nothing was passed through or left unsupported."""
        return not self.warnings


def collect_warnings(struct: StructDescriptor, profile: LanguageProfile) -> List[str]:
    """List the fidelity issues a rendering of ``struct`` will have."""
    warnings = []
    for item in struct.fields:
        for name in passthrough_names(item.type, profile):
            warnings.append(
                f"{struct.name}.{item.name}: no {profile.display_name} mapping "
                f"for {name}, emitted verbatim"
            )
        for node in unsupported_nodes(item.type, profile):
            warnings.append(
                f"{struct.name}.{item.name}: {node.tag} is not supported by "
                f"{profile.display_name}, emitted {profile.unsupported}"
            )
    return warnings


def render_result(struct: StructDescriptor, profile: LanguageProfile) -> RenderResult:
    """Render a struct and report fidelity warnings alongside the code."""
    code = render(struct, profile)
    warnings = collect_warnings(struct, profile)
    for warning in warnings:
        logger.info(warning)

    metadata = {
        "language": profile.language_id,
        "file_extension": profile.file_extension,
        "struct": struct.name,
        "field_count": len(struct.fields),
        "recursive": struct.is_recursive(),
    }
    return RenderResult(code, warnings, metadata)
