"""
Lox Package

Front end for the Lox scripting language: a single-pass scanner, the
command-line driver around it, and a build-time AST node generator.

Architecture:
    lox/
    ├── lexer/           # Tokens, scanner, lexical diagnostics
    ├── tools/           # Build-time code generation (AST nodes)
    └── cli.py           # File and prompt driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "scan",

    # Version info
    "__version__",
    "__license__",
]
