"""
Python diagnostics.

Python has no compile-time error directive. Each line becomes a module
level ``raise`` so importing the generated module fails with the message;
the text goes through ``repr`` and cannot break out of the string literal.
"""

from ...core.renderer import LanguageRenderer


def error_statement(text: str) -> str:
    """Wrap one line of text in a ``raise RuntimeError(...)`` statement."""
    return f"raise RuntimeError({text.strip()!r})"


def create_python_renderer() -> LanguageRenderer:
    return LanguageRenderer(
        name="python",
        display_name="Python",
        file_extension=".py",
        error_statement=error_statement,
        aliases=("py",),
    )
