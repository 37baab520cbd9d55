"""
Registry of target language renderers.

Maps language identifiers and their aliases to ``LanguageRenderer``
records. Adding a language never requires touching the orchestrator.
"""

from typing import Any, Dict, Iterable, List, Optional

from .core.renderer import LanguageRenderer


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class RendererRegistry:
    """Registry of language renderers keyed by language name."""

    def __init__(self, renderers: Optional[Iterable[LanguageRenderer]] = None):
        """
        Initialize registry.

        Args:
            renderers: Renderers to register right away, with their aliases
        """
        self._renderers: Dict[str, LanguageRenderer] = {}
        self._aliases: Dict[str, str] = {}

        for renderer in renderers or ():
            self.register(renderer)

    def register(
        self,
        renderer: LanguageRenderer,
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a renderer for a language.

        Args:
            renderer: Renderer record; its name is the primary key
            aliases: Alternative names, in addition to ``renderer.aliases``
            replace: If True, replace an existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the renderer is invalid or an alias conflicts
        """
        if not isinstance(renderer, LanguageRenderer):
            raise RegistryError("Renderer must be a LanguageRenderer")
        if not renderer.name:
            raise RegistryError("Renderer must have a language name")

        language_key = renderer.name.lower()

        if language_key in self._renderers and not replace:
            return

        all_aliases = list(renderer.aliases) + list(aliases or [])

        # Validate every alias before touching the registry
        for alias in all_aliases:
            alias_key = alias.lower()
            if alias_key == language_key or replace:
                continue
            if alias_key in self._renderers:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                raise RegistryError(
                    f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                )

        self._renderers[language_key] = renderer
        for alias in all_aliases:
            alias_key = alias.lower()
            if alias_key != language_key:
                self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """
        Unregister a renderer and its aliases.

        Args:
            language: Language name to unregister
        """
        language_key = self._resolve_key(language) or language.lower()
        self._renderers.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def _resolve_key(self, language: str) -> Optional[str]:
        language_key = (language or "").strip().lower()
        if language_key in self._renderers:
            return language_key
        return self._aliases.get(language_key)

    def get_renderer(self, language: str) -> LanguageRenderer:
        """
        Get renderer for language.

        Args:
            language: Language name or alias, case-insensitive

        Returns:
            Renderer record

        Raises:
            RegistryError: If language not found
        """
        language_key = self._resolve_key(language)
        if language_key is None:
            available = self.list_languages()
            raise RegistryError(
                f"No renderer registered for language: {language}. "
                f"Available: {', '.join(available)}"
            )
        return self._renderers[language_key]

    def extension_for(self, language: str) -> str:
        """Return the generated file extension for a language."""
        return self.get_renderer(language).file_extension

    def render_error_lines(self, message: str, language: str, line_ending: str = "\n") -> str:
        """Render a diagnostic message in the syntax of a language."""
        return self.get_renderer(language).render_error_lines(message, line_ending)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._renderers.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """
        Get all aliases for a specific language.

        Args:
            language: Primary language name

        Returns:
            List of aliases for this language
        """
        language_key = language.lower()
        return sorted(
            [alias for alias, target in self._aliases.items() if target == language_key]
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """
        Get all registered names including aliases.

        Returns:
            Dict mapping primary language to list of all names (including aliases)
        """
        result = {}
        for language in self._renderers:
            names = [language]
            names.extend(self.get_aliases_for_language(language))
            result[language] = names
        return result

    def is_supported(self, language: str) -> bool:
        """Check if language or alias is registered."""
        return self._resolve_key(language) is not None

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        renderer = self.get_renderer(language)
        return {
            "name": renderer.name,
            "display_name": renderer.display_name or renderer.name,
            "file_extension": renderer.file_extension,
            "aliases": self.get_aliases_for_language(renderer.name),
            "sample": renderer.error_statement("message"),
        }


# Global registry instance - created once
_global_registry: Optional[RendererRegistry] = None


def create_default_registry() -> RendererRegistry:
    """Create a registry holding the bundled languages."""
    from .languages import builtin_renderers

    return RendererRegistry(builtin_renderers())


def get_registry() -> RendererRegistry:
    """Get the global renderer registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = create_default_registry()
    return _global_registry


# Public API functions using the global registry


def register_renderer(
    renderer: LanguageRenderer, aliases: Optional[List[str]] = None, replace: bool = False
):
    """Register a renderer in the global registry."""
    get_registry().register(renderer, aliases, replace=replace)


def get_renderer(language: str) -> LanguageRenderer:
    """Get a renderer from the global registry."""
    return get_registry().get_renderer(language)


def extension_for(language: str) -> str:
    """Generated file extension for a language, from the global registry."""
    return get_registry().extension_for(language)


def render_error_lines(message: str, language: str) -> str:
    """Render a message as error statements using the global registry."""
    return get_registry().render_error_lines(message, language)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    registry = get_registry()
    return {language: registry.get_language_info(language) for language in registry.list_languages()}
