"""
C# diagnostics.

Errors are emitted as ``#error`` preprocessor directives, which the C#
compiler reports as build errors carrying the directive text.
"""

from ...core.renderer import LanguageRenderer, strip_control_characters


def error_statement(text: str) -> str:
    """Wrap one line of text in an ``#error`` directive."""
    return f"#error {strip_control_characters(text).strip()}".rstrip()


def create_csharp_renderer() -> LanguageRenderer:
    return LanguageRenderer(
        name="csharp",
        display_name="C#",
        file_extension=".cs",
        error_statement=error_statement,
        aliases=("c#", "cs"),
    )
