"""
Python target language support.
"""

from .renderer import create_python_renderer, error_statement

__all__ = ["create_python_renderer", "error_statement"]
