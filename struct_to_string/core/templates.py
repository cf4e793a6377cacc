"""
Template engine wrapper for struct rendering.

Provides a simple interface for Jinja2 template rendering
with naming filters used by the language profiles.
"""

from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, Template

from .naming import to_camel_case, to_pascal_case, to_snake_case


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code rendering utilities."""

    def __init__(self):
        """Initialize template engine."""
        self._env = Environment(
            # Output is source code, never HTML
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )

        # Add custom filters for code rendering
        self._env.filters["snake_case"] = to_snake_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["comment"] = self._comment_filter

    def compile(self, template_string: str) -> Template:
        """
        Compile a template string.

        Language profiles compile their templates once, when they are built.

        Raises:
            TemplateError: If the template has a syntax error
        """
        try:
            return self._env.from_string(template_string)
        except Exception as e:
            raise TemplateError(f"Failed to compile template: {str(e)}") from e

    def render_template(self, template: Template, context: Dict[str, Any]) -> str:
        """
        Render a compiled template with the given context.

        Args:
            template: Template returned by ``compile``
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            return template.render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render template: {str(e)}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        return self.render_template(self.compile(template_string), context)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


# Default template engine instance
_default_engine: Optional[TemplateEngine] = None


def get_template_engine() -> TemplateEngine:
    """Get the shared template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
