"""
Lexer module for toyfront.

This module provides a single-pass character scanner for the toy language.
It converts source text into a list of tokens terminated by one EOF token,
tracking line numbers and skipping whitespace and // line comments.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List

from ..errors import LexicalError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Token kinds for the toy language."""
    # Type keywords
    INT = auto()         # int
    FLOAT = auto()       # float
    DOUBLE = auto()      # double
    STRING = auto()      # string
    BOOL = auto()        # bool
    CHAR = auto()        # char

    # Control keywords
    IF = auto()          # if
    ELSE = auto()        # else
    RETURN = auto()      # return
    FOR = auto()         # for
    WHILE = auto()       # while

    # Identifiers and literals
    ID = auto()          # Identifier
    NUM = auto()         # Integer literal

    # Operators
    ASSIGN = auto()      # =
    PLUS = auto()        # +
    MINUS = auto()       # -
    STAR = auto()        # *
    SLASH = auto()       # /
    GREATER = auto()     # >
    LESS = auto()        # <

    # Delimiters
    LPAR = auto()        # (
    RPAR = auto()        # )
    LBRACE = auto()      # {
    RBRACE = auto()      # }
    SEMI = auto()        # ;

    # Special
    EOF = auto()         # End of input


TYPE_KEYWORDS = frozenset({
    TokenKind.INT, TokenKind.FLOAT, TokenKind.DOUBLE,
    TokenKind.STRING, TokenKind.BOOL, TokenKind.CHAR,
})


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        kind: The token kind
        text: The exact lexeme
        line: Line number where the lexeme starts (1-indexed)
    """
    kind: TokenKind
    text: str
    line: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, line={self.line})"


class Lexer:
    """Lexer for tokenizing toy language source.

    Scans the source once from left to right. Tokenization either produces
    the complete token list or raises LexicalError; a partial list is never
    returned.

    Example:
        >>> lexer = Lexer()
        >>> tokens = lexer.tokenize("int a;")
        >>> [t.kind.name for t in tokens]
        ['INT', 'ID', 'SEMI', 'EOF']
    """

    _KEYWORDS: Dict[str, TokenKind] = {
        'int': TokenKind.INT,
        'float': TokenKind.FLOAT,
        'double': TokenKind.DOUBLE,
        'string': TokenKind.STRING,
        'bool': TokenKind.BOOL,
        'char': TokenKind.CHAR,
        'if': TokenKind.IF,
        'else': TokenKind.ELSE,
        'return': TokenKind.RETURN,
        'for': TokenKind.FOR,
        'while': TokenKind.WHILE,
    }

    _OP_MAP: Dict[str, TokenKind] = {
        '=': TokenKind.ASSIGN,
        '+': TokenKind.PLUS,
        '-': TokenKind.MINUS,
        '*': TokenKind.STAR,
        '/': TokenKind.SLASH,
        '(': TokenKind.LPAR,
        ')': TokenKind.RPAR,
        '{': TokenKind.LBRACE,
        '}': TokenKind.RBRACE,
        ';': TokenKind.SEMI,
        '>': TokenKind.GREATER,
        '<': TokenKind.LESS,
    }

    def __init__(self):
        """Initialize the lexer."""
        self._src: str = ""
        self._pos: int = 0
        self._line: int = 1

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize toy language source code.

        Args:
            source: Complete source text

        Returns:
            List of Token objects ending with exactly one EOF token

        Raises:
            LexicalError: If a character matches no token rule
        """
        self._src = source
        self._pos = 0
        self._line = 1

        tokens: List[Token] = []
        while self._pos < len(self._src):
            current = self._src[self._pos]

            if current == '\n':
                self._line += 1
                self._pos += 1
                continue

            if current == '/' and self._src.startswith('//', self._pos):
                self._skip_comment()
                continue

            if current.isspace():
                self._pos += 1
                continue

            if self._is_digit(current):
                tokens.append(Token(TokenKind.NUM, self._consume_number(), self._line))
                continue

            if self._is_letter(current):
                word = self._consume_word()
                kind = self._KEYWORDS.get(word, TokenKind.ID)
                tokens.append(Token(kind, word, self._line))
                continue

            kind = self._OP_MAP.get(current)
            if kind is None:
                raise LexicalError(current, self._line)
            tokens.append(Token(kind, current, self._line))
            self._pos += 1

        tokens.append(Token(TokenKind.EOF, "", self._line))
        logger.debug("tokenized %d characters into %d tokens over %d lines",
                     len(self._src), len(tokens), self._line)
        return tokens

    def _skip_comment(self) -> None:
        """Skip a // comment up to, but not including, the next newline."""
        end = self._src.find('\n', self._pos)
        self._pos = len(self._src) if end == -1 else end

    def _consume_number(self) -> str:
        start = self._pos
        while self._pos < len(self._src) and self._is_digit(self._src[self._pos]):
            self._pos += 1
        return self._src[start:self._pos]

    def _consume_word(self) -> str:
        start = self._pos
        while self._pos < len(self._src) and (
                self._is_letter(self._src[self._pos]) or self._is_digit(self._src[self._pos])):
            self._pos += 1
        return self._src[start:self._pos]

    # str.isdigit/isalpha accept non-ASCII characters; the language does not.
    @staticmethod
    def _is_digit(char: str) -> bool:
        return '0' <= char <= '9'

    @staticmethod
    def _is_letter(char: str) -> bool:
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z'

    def is_keyword(self, word: str) -> bool:
        """Check if a word is a reserved word.

        Args:
            word: Word to check

        Returns:
            True if word is reserved
        """
        return word in self._KEYWORDS

    def get_keyword_tokens(self) -> List[str]:
        """Get list of reserved words.

        Returns:
            Sorted list of keyword strings
        """
        return sorted(self._KEYWORDS)


def tokenize_source(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Toy language source string

    Returns:
        List of Token objects
    """
    lexer = Lexer()
    return lexer.tokenize(source)
