"""
Profile registry for managing available target languages.

Provides lookup of language profiles by id or alias. The resolver and
renderer never branch on a language id; supporting a new language means
registering one more profile here.
"""

from typing import Any, Dict, List, Optional

from .core.profile import LanguageProfile
from .logging_config import get_logger

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class ProfileRegistry:
    """Registry for managing available language profiles."""

    def __init__(self):
        """Initialize empty registry."""
        self._profiles: Dict[str, LanguageProfile] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        profile: LanguageProfile,
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a profile for a language.

        Args:
            profile: Profile to register under its ``language_id``
            aliases: Alternative names, in addition to ``profile.aliases``
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the profile is invalid or an alias conflicts
        """
        if not isinstance(profile, LanguageProfile):
            raise RegistryError(
                f"Expected a LanguageProfile, got {type(profile).__name__}"
            )

        language_key = profile.language_id.lower()

        # Check if already registered
        if language_key in self._profiles and not replace:
            logger.debug("Profile %s already registered, skipping", language_key)
            return

        all_aliases = list(profile.aliases) + list(aliases or [])

        # Check for conflicts before touching any state
        if not replace:
            for alias in all_aliases:
                alias_key = alias.lower()
                if alias_key == language_key:
                    continue
                if alias_key in self._profiles:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != language_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

        self._profiles[language_key] = profile
        for alias in all_aliases:
            alias_key = alias.lower()
            if alias_key != language_key:
                self._aliases[alias_key] = language_key

        logger.debug("Registered profile %s (aliases: %s)", language_key, all_aliases)

    def unregister(self, language: str):
        """
        Unregister a profile and its aliases.

        Args:
            language: Language id to unregister
        """
        language_key = self.canonical_name(language) or language.lower()

        self._profiles.pop(language_key, None)

        # Remove aliases pointing to this language
        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def canonical_name(self, language: str) -> Optional[str]:
        """Resolve a language id or alias to the registered id, or None."""
        language_key = language.lower()
        if language_key in self._profiles:
            return language_key
        return self._aliases.get(language_key)

    def get_profile(self, language: str) -> LanguageProfile:
        """
        Get the profile for a language.

        Args:
            language: Language id or alias

        Returns:
            Registered profile

        Raises:
            RegistryError: If language not found
        """
        language_key = self.canonical_name(language)
        if language_key is None:
            available = self.list_languages()
            raise RegistryError(
                f"No profile registered for language: {language}. "
                f"Available: {', '.join(available)}"
            )
        return self._profiles[language_key]

    def list_languages(self) -> List[str]:
        """Get list of registered primary language ids."""
        return sorted(self._profiles.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """
        Get all aliases for a specific language.

        Args:
            language: Primary language id

        Returns:
            List of aliases for this language
        """
        language_key = language.lower()
        return sorted(
            [alias for alias, target in self._aliases.items() if target == language_key]
        )

    def is_supported(self, language: str) -> bool:
        """
        Check if language is supported.

        Args:
            language: Language id or alias

        Returns:
            True if supported
        """
        return self.canonical_name(language) is not None

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Args:
            language: Language id or alias

        Returns:
            Dict with language information

        Raises:
            RegistryError: If language not found
        """
        profile = self.get_profile(language)

        return {
            "name": profile.language_id,
            "display_name": profile.display_name,
            "file_extension": profile.file_extension,
            "aliases": self.get_aliases_for_language(profile.language_id),
            "indent": profile.indent,
            "scalar_types": {
                kind.value: fragment for kind, fragment in profile.type_table.items()
            },
        }


# Global registry instance - created once
_global_registry: Optional[ProfileRegistry] = None


def get_registry() -> ProfileRegistry:
    """Get the global profile registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        registry = ProfileRegistry()
        _auto_register_profiles(registry)
        _global_registry = registry
    return _global_registry


def _auto_register_profiles(registry: ProfileRegistry):
    """
    Register the built-in profiles.

    This is the single source of truth for profile registration.
    """
    from .languages import BUILTIN_PROFILES

    for profile in BUILTIN_PROFILES:
        registry.register(profile)


# Public API functions using the global registry


def register_profile(
    profile: LanguageProfile,
    aliases: Optional[List[str]] = None,
    replace: bool = False,
):
    """
    Register a profile in the global registry.

    Args:
        profile: Language profile
        aliases: Optional extra aliases
        replace: Replace an existing registration
    """
    get_registry().register(profile, aliases, replace)


def get_profile(language: str) -> LanguageProfile:
    """Get a profile from the global registry."""
    return get_registry().get_profile(language)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
