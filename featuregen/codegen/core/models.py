"""
Data model shared by the orchestrator and its collaborators.

Every object here is created for a single generation call and never
mutated afterwards.
"""

import re
from dataclasses import dataclass
from typing import Optional

_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.\d+)*\s*$")


@dataclass(frozen=True, order=True)
class Version:
    """A ``major.minor.patch`` version of the test framework or generator."""

    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a dotted version string.

        Accepts one to three numeric components (``"2"``, ``"2.3"``,
        ``"2.3.1"``); a fourth component such as an assembly revision is
        accepted and ignored.

        Raises:
            ValueError: If the text is not a dotted numeric version
        """
        match = _VERSION_RE.match(text or "")
        if not match:
            raise ValueError(f"Invalid version: {text!r}")

        major, minor, patch = match.groups()
        return cls(int(major), int(minor or 0), int(patch or 0))

    def to_string(self, fields: int = 3) -> str:
        """Return the first ``fields`` components joined with dots."""
        if not 1 <= fields <= 3:
            raise ValueError("fields must be between 1 and 3")
        return ".".join(str(part) for part in (self.major, self.minor, self.patch)[:fields])

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class ProjectInfo:
    """The consuming project and the framework version it references."""

    project_name: str
    # None when the project has no dependency on the framework
    referenced_version: Optional[Version] = None


@dataclass(frozen=True)
class ProjectSettings:
    """Resolved settings of the consuming project."""

    project_folder: str
    language: str


@dataclass(frozen=True)
class FeatureFileInput:
    """A feature file handed to the external generator."""

    project_relative_path: str
    content: str


@dataclass(frozen=True)
class GenerationError:
    """A single diagnostic produced while generating a test file."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenerationError":
        """Create a diagnostic for an exception raised by the generator."""
        try:
            message = str(exc)
        except Exception:
            message = ""
        return cls(message=message or type(exc).__name__)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"({self.line}): {self.message}"
        return f"({self.line},{self.column}): {self.message}"
