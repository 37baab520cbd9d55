"""
Interfaces of the external test generator.

The feature compiler itself lives outside this package. It is reached
through ``GeneratorServices``, which hands out a ``TestGenerator`` for each
generation and reports the project settings and its own version.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .models import FeatureFileInput, GenerationError, ProjectSettings, Version


class GeneratorError(Exception):
    """Base exception for errors raised by test generators."""

    pass


@dataclass(frozen=True)
class GenerationSettings:
    """Options passed to ``TestGenerator.generate_test_file``."""

    check_up_to_date: bool = False
    write_result_to_file: bool = False


class TestGeneratorResult:
    """Outcome of generating one feature file."""

    __test__ = False

    def __init__(
        self,
        generated_test_code: Optional[str] = None,
        errors: Optional[Iterable[GenerationError]] = None,
    ):
        """
        Initialize generation result.

        Args:
            generated_test_code: Generated code, for a successful result
            errors: Diagnostics, for a failed result
        """
        self.generated_test_code = generated_test_code
        self.errors: Tuple[GenerationError, ...] = tuple(errors or ())

    @property
    def success(self) -> bool:
        return not self.errors

    @classmethod
    def succeeded(cls, generated_test_code: str) -> "TestGeneratorResult":
        """Create a successful result."""
        return cls(generated_test_code=generated_test_code)

    @classmethod
    def failed(cls, errors: Iterable[GenerationError]) -> "TestGeneratorResult":
        """Create a failed result. At least one error is required."""
        result = cls(errors=errors)
        if not result.errors:
            raise GeneratorError("A failed generation result needs at least one error")
        return result

    def __repr__(self) -> str:
        if self.success:
            return f"TestGeneratorResult(success, {len(self.generated_test_code or '')} chars)"
        return f"TestGeneratorResult(failure, {len(self.errors)} errors)"


class TestGenerator(ABC):
    """A generator instance scoped to a single generation.

    Used as a context manager; ``close()`` runs on every exit path.
    """

    __test__ = False

    @abstractmethod
    def generate_test_file(
        self, feature_file_input: FeatureFileInput, settings: GenerationSettings
    ) -> TestGeneratorResult:
        """
        Generate test code for a feature file.

        Args:
            feature_file_input: Project-relative path and content
            settings: Generation options

        Returns:
            Success with the code, or failure with the diagnostics
        """
        pass

    def close(self):
        """Release resources held by the generator."""
        pass

    def __enter__(self) -> "TestGenerator":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


class GeneratorServices(ABC):
    """Entry point of the external generator for one project."""

    @abstractmethod
    def get_project_settings(self) -> ProjectSettings:
        """Return the folder and target language of the project."""
        pass

    @abstractmethod
    def get_generator_version(self) -> Version:
        """Return the version of the loaded generator."""
        pass

    @abstractmethod
    def create_test_generator(self) -> TestGenerator:
        """Create a generator instance for a single generation."""
        pass
