"""
Error handling for the Lox scanner.

Lexical errors never stop a scan. They are recorded as diagnostics
with the line they occurred on and handed back to the caller together
with the tokens, so the driver can decide what to do with them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .tokens import Token


class ErrorKind(Enum):
    """Categories of lexical error."""
    UNEXPECTED_CHARACTER = "L001"
    UNTERMINATED_STRING = "L002"

    @property
    def code(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error."""
    kind: ErrorKind
    message: str
    line: int
    where: str = ""

    @property
    def code(self) -> str:
        return self.kind.code

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class LexerError(Exception):
    """
    Raised inside the scanner when a lexeme cannot be recognized.

    The scan loop catches it, keeps the diagnostic and carries on with
    the next character; it never escapes a scan.
    """

    def __init__(self, kind: ErrorKind, message: str, line: int, where: str = ""):
        super().__init__(message)
        self.diagnostic = Diagnostic(kind=kind, message=message, line=line, where=where)

    def __str__(self) -> str:
        return str(self.diagnostic)


@dataclass
class ScanResult:
    """Tokens and diagnostics produced by one scan."""
    tokens: List[Token]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that matches no lexical rule."""
    if char.isprintable():
        message = f"Unexpected character '{char}'."
    else:
        message = f"Unexpected character U+{ord(char):04X}."
    return LexerError(ErrorKind.UNEXPECTED_CHARACTER, message, line)


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal with no closing quote."""
    return LexerError(ErrorKind.UNTERMINATED_STRING, "Unterminated string.", line)
