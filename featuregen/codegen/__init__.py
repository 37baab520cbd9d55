"""
Feature file code generation for IDE single file generators.

Turns a saved feature file into its generated test file, writing
diagnostics in the target language whenever real code cannot be produced.
"""

from .core import (
    CompatibilityStatus,
    ConfigError,
    FeatureFileInput,
    GenerationError,
    GenerationSettings,
    GeneratorConfig,
    GeneratorError,
    GeneratorServices,
    LanguageRenderer,
    ProjectInfo,
    ProjectSettings,
    TestGenerator,
    TestGeneratorResult,
    Version,
    check_compatibility,
    load_config,
)
from .orchestrator import SingleFileGenerator
from .registry import (
    RegistryError,
    RendererRegistry,
    extension_for,
    get_registry,
    get_renderer,
    list_all_language_info,
    list_supported_languages,
    render_error_lines,
)

__all__ = [
    "SingleFileGenerator",
    "RendererRegistry",
    "RegistryError",
    "extension_for",
    "get_registry",
    "get_renderer",
    "list_all_language_info",
    "list_supported_languages",
    "render_error_lines",
    "CompatibilityStatus",
    "ConfigError",
    "FeatureFileInput",
    "GenerationError",
    "GenerationSettings",
    "GeneratorConfig",
    "GeneratorError",
    "GeneratorServices",
    "LanguageRenderer",
    "ProjectInfo",
    "ProjectSettings",
    "TestGenerator",
    "TestGeneratorResult",
    "Version",
    "check_compatibility",
    "load_config",
]
