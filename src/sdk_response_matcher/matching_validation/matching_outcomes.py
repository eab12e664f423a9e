"""Matching and validation domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROOT_PATH_LABEL = "$"


class MismatchKind(str, Enum):
    """Categories of structural mismatch."""

    MISSING = "missing"
    INVALID = "invalid"
    NO_ALTERNATIVE = "no-alternative"


@dataclass(frozen=True)
class SchemaMismatch:
    """One path-qualified difference between a value and its schema."""

    path: str
    kind: MismatchKind
    expected: str
    actual: str | None = None
    detail: str | None = None

    @property
    def display_path(self) -> str:
        """Return the path, or the root label for top-level mismatches."""
        return self.path or ROOT_PATH_LABEL

    def describe(self) -> str:
        """Render a single human-readable diagnostic line."""
        if self.kind == MismatchKind.MISSING:
            return f"{self.display_path}: missing required field"
        if self.kind == MismatchKind.NO_ALTERNATIVE:
            return (
                f"{self.display_path}: expected {self.expected}, got {self.actual}; "
                f"closest alternative is {self.detail}"
            )
        return f"{self.display_path}: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one value against one schema definition."""

    mismatches: tuple[SchemaMismatch, ...] = ()

    @property
    def passed(self) -> bool:
        """Return True when no mismatches are present."""
        return not self.mismatches

    def messages(self) -> tuple[str, ...]:
        """Return rendered diagnostics in report order."""
        return tuple(mismatch.describe() for mismatch in self.mismatches)

    def paths(self) -> tuple[str, ...]:
        return tuple(mismatch.display_path for mismatch in self.mismatches)
