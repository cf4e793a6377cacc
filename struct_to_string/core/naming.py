"""
Naming utilities for rendered definitions.

Case conversions applied to field names by the language templates
(Go exports its fields in PascalCase, for instance). Type names are never
translated.
"""

import re


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    # Replace hyphens and spaces with underscores
    name = re.sub(r'[-\s]+', '_', str(name))

    # Insert underscore before uppercase letters
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

    # Convert to lowercase and clean up multiple underscores
    name = name.lower()
    name = re.sub(r'_+', '_', name)

    return name.strip('_')


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split('_')

    if not parts or not parts[0]:
        return str(name)

    # First part lowercase, rest title case
    return parts[0] + ''.join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    parts = to_snake_case(name).split('_')
    converted = ''.join(part.capitalize() for part in parts if part)
    return converted or str(name)

