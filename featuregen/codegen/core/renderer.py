"""
Rendering of diagnostics as target language source.

A ``LanguageRenderer`` is the whole per-language knowledge the orchestrator
needs: the generated file extension and how to turn one line of text into a
statement that makes the build fail with that text.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

# Line terminators recognized by the supported compilers
_LINE_BREAK_RE = re.compile("\r\n|[\r\n\u0085\u2028\u2029]")

# Other control characters are dropped from directive payloads
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def split_lines(text: str) -> List[str]:
    """Split text on any line break and drop empty lines."""
    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


def strip_control_characters(text: str) -> str:
    """Remove control characters, keeping tabs."""
    return _CONTROL_RE.sub("", text)


@dataclass(frozen=True)
class LanguageRenderer:
    """Capabilities of one target language."""

    name: str
    file_extension: str
    error_statement: Callable[[str], str]
    display_name: str = ""
    aliases: Tuple[str, ...] = field(default=())

    def render_error_lines(self, message: str, line_ending: str = "\n") -> str:
        """
        Render a message as error statements, one per non-empty line.

        Args:
            message: Diagnostic text, possibly multi-line
            line_ending: Separator between rendered statements

        Returns:
            Rendered source text
        """
        lines = split_lines(message or "")
        if not lines:
            lines = [""]
        return line_ending.join(self.error_statement(line) for line in lines)
