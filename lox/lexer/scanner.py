"""
Lox scanner - turns source text into tokens.

Single pass, left to right, never looks back at consumed characters.
Every character is classified first and the class picks the action, so
the whole dispatch is one table instead of a pile of if/elif chains.

Lexical errors are collected, not raised: the scan always runs to the
end and returns whatever it could recognize plus the diagnostics.
"""

import logging
from enum import Enum, auto
from typing import Callable, Dict, List, Optional

from .tokens import (
    Token, TokenType, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS, lookup_keyword
)
from .errors import (
    Diagnostic, LexerError, ScanResult,
    create_unexpected_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)

NUL = "\0"


class CharClass(Enum):
    """Closed set of categories a lookahead character can fall into."""
    WHITESPACE = auto()
    NEWLINE = auto()
    PUNCTUATION = auto()
    OPERATOR = auto()       # may take a trailing '='
    SLASH = auto()
    QUOTE = auto()
    DIGIT = auto()
    ALPHA = auto()
    UNKNOWN = auto()


def is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() also accepts things like '²'
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


def classify(char: str) -> CharClass:
    """Map one character to its lexical category."""
    if char in (" ", "\r", "\t"):
        return CharClass.WHITESPACE
    if char == "\n":
        return CharClass.NEWLINE
    if char in SINGLE_CHAR_TOKENS:
        return CharClass.PUNCTUATION
    if char in EQUAL_SUFFIX_TOKENS:
        return CharClass.OPERATOR
    if char == "/":
        return CharClass.SLASH
    if char == '"':
        return CharClass.QUOTE
    if is_digit(char):
        return CharClass.DIGIT
    if is_alpha(char):
        return CharClass.ALPHA
    return CharClass.UNKNOWN


class Scanner:
    """
    Lox lexical analyzer.

    Each instance owns its own cursor, so scanners can be used
    independently (and from different threads) without interfering.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Full source text to scan
        """
        self.source = source
        self.tokens: List[Token] = []
        self.errors: List[Diagnostic] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

        self._actions: Dict[CharClass, Callable[[str], None]] = {
            CharClass.WHITESPACE: self._skip_whitespace,
            CharClass.NEWLINE: self._newline,
            CharClass.PUNCTUATION: self._punctuation,
            CharClass.OPERATOR: self._operator,
            CharClass.SLASH: self._slash,
            CharClass.QUOTE: self._string,
            CharClass.DIGIT: self._number,
            CharClass.ALPHA: self._identifier,
            CharClass.UNKNOWN: self._unexpected,
        }

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.tokens = []
        self.errors = []
        self.start = self.current = 0
        self.line = self.start_line = 1

        while not self._is_at_end():
            # beginning of the next lexeme
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                logger.debug("recorded %s", e.diagnostic)
                self.errors.append(e.diagnostic)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("scanned %d tokens with %d errors", len(self.tokens), len(self.errors))
        return self.tokens

    def has_errors(self) -> bool:
        """Check if the scan recorded any lexical errors."""
        return len(self.errors) > 0

    def _scan_token(self):
        char = self._advance()
        self._actions[classify(char)](char)

    # ------------------------------------------------------------------
    # Actions, one per CharClass
    # ------------------------------------------------------------------

    def _skip_whitespace(self, char: str):
        pass

    def _newline(self, char: str):
        self.line += 1

    def _punctuation(self, char: str):
        self._add_token(SINGLE_CHAR_TOKENS[char])

    def _operator(self, char: str):
        alone, with_equal = EQUAL_SUFFIX_TOKENS[char]
        self._add_token(with_equal if self._match("=") else alone)

    def _slash(self, char: str):
        if self._match("/"):
            # a comment runs to the end of the line
            while self._peek() != "\n" and not self._is_at_end():
                self._advance()
        else:
            self._add_token(TokenType.SLASH)

    def _string(self, char: str):
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # closing quote

        # no escape sequences, the value is the raw text between the quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self, char: str):
        while is_digit(self._peek()):
            self._advance()

        # fractional part needs at least one digit after the '.'
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self, char: str):
        while is_alphanumeric(self._peek()):
            self._advance()
        self._add_token(lookup_keyword(self.source[self.start:self.current]))

    def _unexpected(self, char: str):
        raise create_unexpected_character_error(char, self.line)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _add_token(self, token_type: TokenType, literal: Optional[object] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return NUL
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return NUL
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)


def scan(source: str) -> ScanResult:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string

    Returns:
        ScanResult with the tokens and any diagnostics
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens=tokens, diagnostics=list(scanner.errors))


def scan_file(filepath: str) -> ScanResult:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file

    Returns:
        ScanResult with the tokens and any diagnostics

    Raises:
        OSError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan(source)
