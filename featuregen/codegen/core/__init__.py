"""
Core single file generation components.

Data model, collaborator interfaces and the language independent pieces
used by the orchestrator.
"""

from .compatibility import CompatibilityResult, CompatibilityStatus, check_compatibility
from .config import ConfigError, GeneratorConfig, load_config, save_config
from .events import DiagnosticsChannel
from .generator import (
    GenerationSettings,
    GeneratorError,
    GeneratorServices,
    TestGenerator,
    TestGeneratorResult,
)
from .models import (
    FeatureFileInput,
    GenerationError,
    ProjectInfo,
    ProjectSettings,
    Version,
)
from .renderer import LanguageRenderer, split_lines, strip_control_characters
from .templates import TemplateEngine, TemplateError, get_default_template_engine

__all__ = [
    # Compatibility gate
    "CompatibilityResult",
    "CompatibilityStatus",
    "check_compatibility",
    # Configuration
    "ConfigError",
    "GeneratorConfig",
    "load_config",
    "save_config",
    # Notifications
    "DiagnosticsChannel",
    # External generator contract
    "GenerationSettings",
    "GeneratorError",
    "GeneratorServices",
    "TestGenerator",
    "TestGeneratorResult",
    # Data model
    "FeatureFileInput",
    "GenerationError",
    "ProjectInfo",
    "ProjectSettings",
    "Version",
    # Rendering
    "LanguageRenderer",
    "split_lines",
    "strip_control_characters",
    "TemplateEngine",
    "TemplateError",
    "get_default_template_engine",
]
