"""Diagnostics collection and error types."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List

logger = logging.getLogger(__name__)


#a single lexical problem tagged with the line it was found on
@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported error: 1-based line and message."""

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


#collects diagnostics for one compilation unit in place of a global flag
@dataclass(slots=True)
class Diagnostics:
    """Sink the scanner reports into.

    Reporting never interrupts the caller; drivers inspect ``had_error``
    once the scan has finished to decide whether to continue.
    """

    errors: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def report(self, line: int, message: str) -> None:
        diagnostic = Diagnostic(line=line, message=message)
        logger.debug("reported %s", diagnostic)
        self.errors.append(diagnostic)

    def reset(self) -> None:
        self.errors.clear()

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.errors)


#root of every exception the lox package raises on purpose
class LoxError(Exception):
    """Base class for Lox-related errors."""


#driver raises this for bad invocations; carries the process exit status
class UsageError(LoxError):
    """Raised when the command line cannot be honoured."""

    def __init__(self, message: str, status: int = 64) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
