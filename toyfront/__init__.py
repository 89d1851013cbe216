"""
toyfront - front end for a minimal imperative toy language

Tokenizes source text and checks it against a fixed grammar with a
recursive descent syntax checker, reporting the first error with its line
number and recording declared identifiers in a symbol table.

Example:
    >>> from toyfront import Checker
    >>> result = Checker().check("int a; a = 5;")
    >>> if result.success:
    ...     print(result.message)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "toyfront Team"

from .core import Checker, CheckResult
from .errors import CheckError, LexicalError, SyntaxCheckError, RedeclarationError
from .frontend import Lexer, SyntaxChecker, SymbolTable, Token, TokenKind
from .utils import Settings

__all__ = [
    "__version__",
    "__author__",
    "Checker",
    "CheckResult",
    "CheckError",
    "LexicalError",
    "SyntaxCheckError",
    "RedeclarationError",
    "Lexer",
    "SyntaxChecker",
    "SymbolTable",
    "Token",
    "TokenKind",
    "Settings",
]
