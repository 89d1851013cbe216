"""
Syntax checker module for toyfront.

This module provides a recursive descent checker that works with the lexer.
It validates a token list against the toy language grammar, recording
declared identifiers in a SymbolTable, and raises at the first violation.

Grammar:
    program     := statement* EOF
    statement   := declaration | assignment | ifStmt | returnStmt | block | forLoop
    block       := '{' statement* '}'
    declaration := TYPE ID [ '=' expression ] ';'
    assignment  := ID '=' expression ';'
    ifStmt      := 'if' '(' expression ')' statement [ 'else' statement ]
    returnStmt  := 'return' expression ';'
    forLoop     := 'for' '(' forInit expression ';' expression ')' block
    forInit     := declaration | assignment
    expression  := term (('+' | '-') term)* [ '>' expression ]
    term        := factor (('*' | '/') factor)*
    factor      := NUM | ID | '(' expression ')'
"""

import copy
import logging
from typing import List, Optional

from ..errors import SyntaxCheckError
from ..utils.settings import Settings, DEFAULT_SETTINGS
from .lexer import Lexer, Token, TokenKind, TYPE_KEYWORDS
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


class SyntaxChecker:
    """Recursive descent syntax checker.

    Each grammar rule is one method that looks at the current token to pick
    a production, consumes tokens with _expect, and calls the methods for
    its sub-rules. Tokens are never un-consumed.

    Example:
        >>> checker = SyntaxChecker()
        >>> symbols = checker.check_source("int a; a = 5;")
        >>> symbols.as_dict()
        {'a': ('int', '')}
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the checker.

        Args:
            settings: Policy settings, DEFAULT_SETTINGS when omitted. The
                      checker keeps its own copy.
        """
        self.settings = copy.deepcopy(settings if settings is not None else DEFAULT_SETTINGS)
        self._lexer = Lexer()
        self._tokens: List[Token] = []
        self._pos: int = 0
        self._stmt_starts: List[int] = []
        self._symbols = SymbolTable(self.settings.redeclaration)

    def check(self, tokens: List[Token]) -> SymbolTable:
        """Check a token list against the grammar.

        Args:
            tokens: Token list produced by Lexer.tokenize

        Returns:
            SymbolTable: Every identifier declared by the program

        Raises:
            SyntaxCheckError: At the first grammar violation, or when nesting
                              exceeds the interpreter recursion limit
            RedeclarationError: If the redeclaration policy is "error"
        """
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token list must end with an EOF token")
        if any(t.kind == TokenKind.EOF for t in tokens[:-1]):
            raise ValueError("EOF token may only appear at the end of the token list")

        self._tokens = tokens
        self._pos = 0
        self._stmt_starts = []
        self._symbols = SymbolTable(self.settings.redeclaration)

        try:
            self._parse_program()
        except RecursionError:
            raise self._error("less deeply nested input") from None
        logger.debug("checked %d tokens, %d symbols declared", len(tokens), len(self._symbols))
        return self._symbols

    def check_source(self, source: str) -> SymbolTable:
        """Tokenize and check source text.

        Raises:
            LexicalError: If tokenization fails
            SyntaxCheckError: At the first grammar violation
        """
        return self.check(self._lexer.tokenize(source))

    @property
    def symbols(self) -> SymbolTable:
        """Symbol table of the most recent check."""
        return self._symbols

    def _current(self) -> Token:
        """Get the current token."""
        return self._tokens[self._pos]

    def _match(self, *kinds: TokenKind) -> bool:
        """Check if the current token is one of kinds."""
        return self._current().kind in kinds

    def _advance(self) -> Token:
        """Advance to the next token and return the current one."""
        token = self._current()
        self._pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        """Consume the current token if it has the given kind."""
        token = self._current()
        if token.kind != kind:
            raise self._error(kind)
        self._pos += 1
        return token

    def _error(self, expected) -> SyntaxCheckError:
        token = self._current()
        return SyntaxCheckError(expected, token.text, token.kind, self._error_line(), token.line)

    def _error_line(self) -> int:
        """Line to report for a fault at the current token.

        That is the line where the innermost unfinished statement began, or,
        when that statement has consumed nothing yet, the line of the last
        consumed token. A fault is therefore never reported past the line
        the input went wrong on.
        """
        if self._stmt_starts and self._stmt_starts[-1] < self._pos:
            return self._tokens[self._stmt_starts[-1]].line
        if self._pos > 0:
            return self._tokens[self._pos - 1].line
        return self._current().line

    def _parse_program(self) -> None:
        while not self._match(TokenKind.EOF):
            self._parse_statement()
        self._expect(TokenKind.EOF)

    def _parse_statement(self) -> None:
        kind = self._current().kind
        self._stmt_starts.append(self._pos)

        if kind in TYPE_KEYWORDS:
            self._parse_declaration()
        elif kind == TokenKind.ID:
            self._parse_assignment()
        elif kind == TokenKind.IF:
            self._parse_if()
        elif kind == TokenKind.RETURN:
            self._parse_return()
        elif kind == TokenKind.LBRACE:
            self._parse_block()
        elif kind == TokenKind.FOR:
            self._parse_for()
        else:
            raise self._error("statement")

        self._stmt_starts.pop()

    def _parse_block(self) -> None:
        self._expect(TokenKind.LBRACE)
        while not self._match(TokenKind.RBRACE, TokenKind.EOF):
            self._parse_statement()
        self._expect(TokenKind.RBRACE)

    def _parse_declaration(self) -> None:
        """Parse a declaration and record it in the symbol table."""
        type_token = self._current()
        if type_token.text not in self.settings.declaration_keywords:
            raise self._error(f"type keyword ({', '.join(self.settings.declaration_keywords)})")
        self._advance()

        name_token = self._expect(TokenKind.ID)

        value = ""
        if self._match(TokenKind.ASSIGN):
            self._advance()
            start = self._pos
            self._parse_expression()
            value = " ".join(t.text for t in self._tokens[start:self._pos])

        self._expect(TokenKind.SEMI)
        self._symbols.declare(name_token.text, type_token.text, value, name_token.line)

    def _parse_assignment(self) -> None:
        self._expect(TokenKind.ID)
        self._expect(TokenKind.ASSIGN)
        self._parse_expression()
        self._expect(TokenKind.SEMI)

    def _parse_if(self) -> None:
        """Parse an if statement.

        An else branch that is itself an if continues the loop instead of
        recursing, so long else-if chains do not grow the call stack.
        """
        while True:
            self._expect(TokenKind.IF)
            self._expect(TokenKind.LPAR)
            self._parse_expression()
            self._expect(TokenKind.RPAR)
            self._parse_statement()
            if not self._match(TokenKind.ELSE):
                return
            self._advance()
            if not self._match(TokenKind.IF):
                self._parse_statement()
                return
            # The chained if is now the innermost statement
            self._stmt_starts[-1] = self._pos

    def _parse_return(self) -> None:
        self._expect(TokenKind.RETURN)
        self._parse_expression()
        self._expect(TokenKind.SEMI)

    def _parse_for(self) -> None:
        """Parse for '(' init cond ';' incr ')' block.

        The init clause is a full declaration or assignment and consumes its
        own semicolon.
        """
        self._expect(TokenKind.FOR)
        self._expect(TokenKind.LPAR)

        if self._match(*TYPE_KEYWORDS):
            self._parse_declaration()
        elif self._match(TokenKind.ID):
            self._parse_assignment()
        else:
            raise self._error("declaration or assignment")

        self._parse_expression()
        self._expect(TokenKind.SEMI)
        self._parse_expression()
        self._expect(TokenKind.RPAR)
        self._parse_block()

    def _parse_expression(self) -> None:
        # term (('+' | '-') term)* [ '>' expression ], with the right-recursive
        # comparison tail unrolled into the loop
        while True:
            self._parse_term()
            while self._match(TokenKind.PLUS, TokenKind.MINUS):
                self._advance()
                self._parse_term()
            if not self._match(TokenKind.GREATER):
                return
            self._advance()

    def _parse_term(self) -> None:
        self._parse_factor()
        while self._match(TokenKind.STAR, TokenKind.SLASH):
            self._advance()
            self._parse_factor()

    def _parse_factor(self) -> None:
        if self._match(TokenKind.NUM, TokenKind.ID):
            self._advance()
        elif self._match(TokenKind.LPAR):
            self._advance()
            self._parse_expression()
            self._expect(TokenKind.RPAR)
        else:
            raise self._error("expression")


def check_source(source: str, settings: Optional[Settings] = None) -> SymbolTable:
    """Convenience function to check source code.

    Args:
        source: Toy language source string
        settings: Optional policy settings

    Returns:
        SymbolTable of the accepted program
    """
    checker = SyntaxChecker(settings)
    return checker.check_source(source)
