"""
Visual Basic diagnostics.

VB has no error directive; an ``#Error`` line is rejected by the compiler,
which surfaces the line in the error list.
"""

from ...core.renderer import LanguageRenderer, strip_control_characters


def error_statement(text: str) -> str:
    """Wrap one line of text in an ``#Error`` line."""
    return f"#Error {strip_control_characters(text).strip()}".rstrip()


def create_vb_renderer() -> LanguageRenderer:
    return LanguageRenderer(
        name="vb",
        display_name="Visual Basic",
        file_extension=".vb",
        error_statement=error_statement,
        aliases=("vb.net", "vbnet", "visualbasic"),
    )
