"""
Compatibility check between the loaded generator and the project.

Generated code calls runtime APIs of the framework version it was generated
for, so the generator and the referenced framework must agree on
major and minor version. Patch releases are treated as compatible.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import Version


class CompatibilityStatus(Enum):
    """Outcome of the generator compatibility check."""

    COMPATIBLE = "compatible"
    NO_DECLARED_DEPENDENCY = "no_declared_dependency"
    VERSION_MISMATCH = "version_mismatch"


@dataclass(frozen=True)
class CompatibilityResult:
    status: CompatibilityStatus
    actual: Optional[Version] = None
    declared: Optional[Version] = None

    @property
    def compatible(self) -> bool:
        return self.status is CompatibilityStatus.COMPATIBLE


def check_compatibility(
    declared: Optional[Version], actual: Optional[Version]
) -> CompatibilityResult:
    """
    Compare the project's declared framework version with the generator's.

    Args:
        declared: Version referenced by the project, None if not referenced
        actual: Version of the loaded generator

    Returns:
        CompatibilityResult carrying both versions
    """
    if declared is None:
        return CompatibilityResult(CompatibilityStatus.NO_DECLARED_DEPENDENCY, actual=actual)

    if actual is None:
        raise ValueError("Generator version is required when a dependency is declared")

    if actual.major != declared.major or actual.minor != declared.minor:
        return CompatibilityResult(
            CompatibilityStatus.VERSION_MISMATCH, actual=actual, declared=declared
        )

    return CompatibilityResult(CompatibilityStatus.COMPATIBLE, actual=actual, declared=declared)
