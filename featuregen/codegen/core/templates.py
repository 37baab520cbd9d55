"""
Message templates for dependency diagnostics.

Provides a small Jinja2 wrapper holding the texts written into the output
file when the project and the generator do not fit together.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError as JinjaError


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


VERSION_CONFLICT_TEMPLATE = """\
Version conflict - {{ framework_name }} Visual Studio extension attempted to use {{ framework_name }} code-behind generator {{ generator_version.to_string(2) }}, but project '{{ project_name }}' references {{ framework_name }} {{ referenced_version.to_string(2) }}.
We recommend migrating to MSBuild code-behind generation to resolve this issue.
For more information see {{ documentation_url }}"""

NO_REFERENCE_TEMPLATE = """\
Could not find a reference to {{ framework_name }} in project '{{ project_name }}'.
Please add the '{{ framework_package }}' package to the project and use MSBuild generation instead of using {{ framework_name }}SingleFileGenerator.
For more information see {{ documentation_url }}"""

BUILTIN_TEMPLATES = {
    "version_conflict": VERSION_CONFLICT_TEMPLATE,
    "no_reference": NO_REFERENCE_TEMPLATE,
}


class TemplateEngine:
    """Wrapper for a Jinja2 environment holding in-memory templates."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Templates by name, added to the built-in ones
        """
        mapping = dict(BUILTIN_TEMPLATES)
        mapping.update(templates or {})

        # Plain text output; nothing here is HTML
        self._env = Environment(
            loader=DictLoader(mapping),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=False,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """Add or replace an in-memory template."""
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return template_name in self._env.loader.mapping


_default_engine: Optional[TemplateEngine] = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
