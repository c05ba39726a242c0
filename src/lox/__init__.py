"""Lox: a scanner for a small dynamically-typed scripting language."""

#re-exports the scanner, token and diagnostics types at package level
from . import cli, errors, scanner, token
from .errors import Diagnostic, Diagnostics, LoxError
from .scanner import Scanner, scan
from .token import KEYWORDS, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "cli",
    "errors",
    "scanner",
    "token",
    "Diagnostic",
    "Diagnostics",
    "LoxError",
    "Scanner",
    "scan",
    "KEYWORDS",
    "Token",
    "TokenType",
]
