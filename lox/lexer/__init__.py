"""
Lox Lexer Package

Implements the single-pass scanner for the Lox language.

Key Features:
- Single pass over the source with at most two characters of lookahead
- Maximal-munch identifiers and numbers, exact keyword matching
- Line comments
- Error recovery: lexical errors are collected, never fatal
- Line tracking for diagnostics
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, CharClass, classify, scan, scan_file
from .errors import Diagnostic, ErrorKind, LexerError, ScanResult

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "KEYWORDS",
    "CharClass",
    "classify",
    "scan",
    "scan_file",
    "Diagnostic",
    "ErrorKind",
    "LexerError",
    "ScanResult",
]
