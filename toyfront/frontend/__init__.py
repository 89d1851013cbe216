"""
Frontend module for toyfront.

This module provides the lexer, syntax checker and symbol table for the
toy language.
"""

from .lexer import Lexer, Token, TokenKind, TYPE_KEYWORDS, tokenize_source
from .parser import SyntaxChecker, check_source
from .symbols import Symbol, SymbolTable
from ..errors import CheckError, LexicalError, SyntaxCheckError, RedeclarationError

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenKind",
    "TYPE_KEYWORDS",
    "tokenize_source",
    # Checker components
    "SyntaxChecker",
    "check_source",
    "Symbol",
    "SymbolTable",
    # Errors
    "CheckError",
    "LexicalError",
    "SyntaxCheckError",
    "RedeclarationError",
]
