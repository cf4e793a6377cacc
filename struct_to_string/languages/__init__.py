"""
Built-in language profiles.

One module per target language. Each exports a single immutable
``LanguageProfile``; adding a language means adding a module and listing
its profile here.
"""

from .csharp import CSHARP_PROFILE
from .go import GO_PROFILE
from .java import JAVA_PROFILE
from .python import PYTHON_PROFILE
from .rust import RUST_PROFILE
from .typescript import TYPESCRIPT_PROFILE

BUILTIN_PROFILES = (
    RUST_PROFILE,
    GO_PROFILE,
    PYTHON_PROFILE,
    TYPESCRIPT_PROFILE,
    JAVA_PROFILE,
    CSHARP_PROFILE,
)

__all__ = [
    "BUILTIN_PROFILES",
    "RUST_PROFILE",
    "GO_PROFILE",
    "PYTHON_PROFILE",
    "TYPESCRIPT_PROFILE",
    "JAVA_PROFILE",
    "CSHARP_PROFILE",
]
