"""Validation result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ViolationSeverity(str, Enum):
    """Severity levels for configuration findings."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Violation(BaseModel):
    """A single configuration finding."""

    check_id: str
    message: str
    severity: ViolationSeverity = ViolationSeverity.WARNING
    symbols: list[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """Pre-run validation report for a configuration."""

    character_pool: str
    violations: list[Violation] = Field(default_factory=list)

    @property
    def is_compliant(self) -> bool:
        """True if no error-level violations exist."""
        return not any(v.severity == ViolationSeverity.ERROR for v in self.violations)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.WARNING)
