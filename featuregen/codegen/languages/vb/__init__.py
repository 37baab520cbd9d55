"""
Visual Basic target language support.
"""

from .renderer import create_vb_renderer, error_statement

__all__ = ["create_vb_renderer", "error_statement"]
