"""
C# target language support.
"""

from .renderer import create_csharp_renderer, error_statement

__all__ = ["create_csharp_renderer", "error_statement"]
