"""
Diagnostics reporting for type resolution.

Resolution emits two kinds of diagnostics: recoverable errors, for types
that can be represented but should be written differently, and fatal ones,
for types that cannot be represented at all. A Diagnostics instance is passed
explicitly through every resolution call and collects both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import NoReturn

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity of a diagnostic."""

    ERROR = "error"  # Representable, resolution continues
    FATAL = "fatal"  # Not representable, resolution aborts


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem."""

    severity: Severity
    context: str
    message: str

    def __str__(self) -> str:
        return f"{self.context}: {self.message}"


class TypeResolutionError(Exception):
    """Raised when a type cannot be represented as an OpenAPI schema."""

    def __init__(self, context: str, message: str):
        super().__init__(f"{context}: {message}")
        self.context = context
        self.message = message


@dataclass
class Diagnostics:
    """Collects diagnostics of a resolution run.

    Attributes:
        errors_are_fatal: Whether recoverable errors abort like fatal ones
        entries: All diagnostics reported so far, in order
    """

    errors_are_fatal: bool = False
    entries: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == Severity.ERROR]

    def error(self, context: str, message: str) -> None:
        """Report a recoverable problem."""
        if self.errors_are_fatal:
            self.panic(context, message)
        self.entries.append(Diagnostic(Severity.ERROR, context, message))
        logger.warning("%s: %s", context, message)

    def panic(self, context: str, message: str) -> NoReturn:
        """Report a fatal problem and abort the resolution."""
        self.entries.append(Diagnostic(Severity.FATAL, context, message))
        logger.error("%s: %s", context, message)
        raise TypeResolutionError(context, message)
