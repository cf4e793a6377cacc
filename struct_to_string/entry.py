"""
Entry points: render declared structs for each target language.

``render_struct`` is the boundary where a target language is looked up;
an unknown target fails there, before any type is resolved. The
``struct_to_string`` decorator attaches one ``to_<language>_string``
class method per built-in target to a Python class.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Union

from .core.config import RenderConfig, apply_config, load_config
from .core.renderer import RenderResult, render, render_result
from .core.schema import StructDescriptor
from .introspect import describe_class
from .registry import get_profile, list_supported_languages

ConfigSource = Union[RenderConfig, Dict[str, Any], str, Path, None]

# Class method name for each built-in target
ENTRY_POINTS = {
    "rust": "to_rust_string",
    "go": "to_go_string",
    "python": "to_python_string",
    "typescript": "to_typescript_string",
    "java": "to_java_string",
    "csharp": "to_csharp_string",
}

# Classes decorated here are declared in Python
DECLARING_LANGUAGE = "python"


def _descriptor(struct: Union[StructDescriptor, type]) -> StructDescriptor:
    if isinstance(struct, StructDescriptor):
        return struct
    return describe_class(struct)


def _resolve_config(language: str, config: ConfigSource) -> Optional[RenderConfig]:
    if config is None or isinstance(config, RenderConfig):
        return config
    if isinstance(config, dict):
        return load_config(language, custom_config=config)
    return load_config(language, config_file=config)


def _profile_for(language: str, config: ConfigSource):
    profile = get_profile(language)
    resolved = _resolve_config(profile.language_id, config)
    if resolved is not None:
        profile = apply_config(profile, resolved)
    return profile


def render_struct(
    struct: Union[StructDescriptor, type],
    language: str,
    config: ConfigSource = None,
) -> str:
    """
    Render a struct descriptor or an annotated class for one language.

    Args:
        struct: StructDescriptor, dataclass or annotated class
        language: Target language id or alias
        config: RenderConfig, dict of overrides or JSON config file path

    Returns:
        Rendered definition

    Raises:
        RegistryError: If no profile is registered for ``language``
        ConfigError: If the configuration is invalid
        DescriptorError: If ``struct`` cannot be described
    """
    profile = _profile_for(language, config)
    return render(_descriptor(struct), profile)


def render_struct_result(
    struct: Union[StructDescriptor, type],
    language: str,
    config: ConfigSource = None,
) -> RenderResult:
    """Like ``render_struct`` but also returns fidelity warnings and metadata."""
    profile = _profile_for(language, config)
    return render_result(_descriptor(struct), profile)


def render_all(
    struct: Union[StructDescriptor, type],
    languages: Optional[Iterable[str]] = None,
    config: ConfigSource = None,
) -> Dict[str, str]:
    """
    Render a struct for several languages.

    Args:
        struct: StructDescriptor or annotated class
        languages: Language ids or aliases (default: every registered one)
        config: Configuration applied to each language

    Returns:
        Dict mapping the canonical language id to its rendering
    """
    descriptor = _descriptor(struct)
    targets = list(languages) if languages is not None else list_supported_languages()

    # Look every target up before rendering anything
    profiles = [_profile_for(language, config) for language in targets]
    return {profile.language_id: render(descriptor, profile) for profile in profiles}


def _make_entry(language: str, method_name: str) -> Callable:
    def entry(cls) -> str:
        return render_struct(cls, language)

    entry.__name__ = method_name
    entry.__doc__ = f"Render this class's definition as {language} source."
    return entry


def struct_to_string(cls: type) -> type:
    """
    Class decorator attaching ``to_<language>_string`` class methods.

    Also attaches ``to_string`` rendering the declaring language (Python).
    If the class already defines ``to_string`` it is left alone and the alias
    is attached as ``to_definition_string`` instead.

    Example:
        @struct_to_string
        @dataclass
        class MyStruct:
            field1: Annotated[int, ScalarKind.INT32]
            field2: str

        MyStruct.to_typescript_string()
    """
    for language, method_name in ENTRY_POINTS.items():
        setattr(cls, method_name, classmethod(_make_entry(language, method_name)))

    alias = "to_definition_string" if "to_string" in vars(cls) else "to_string"
    setattr(cls, alias, classmethod(_make_entry(DECLARING_LANGUAGE, alias)))
    return cls
