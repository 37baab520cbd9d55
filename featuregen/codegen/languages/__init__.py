"""
Target languages the single file generator can write diagnostics for.

Each language package exposes a factory returning its ``LanguageRenderer``.
"""

from .csharp import create_csharp_renderer
from .python import create_python_renderer
from .vb import create_vb_renderer

__all__ = [
    "create_csharp_renderer",
    "create_python_renderer",
    "create_vb_renderer",
    "builtin_renderers",
]


def builtin_renderers():
    """Return a fresh list of all bundled renderers."""
    return [
        create_csharp_renderer(),
        create_vb_renderer(),
        create_python_renderer(),
    ]
