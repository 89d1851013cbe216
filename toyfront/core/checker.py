"""
Main checker orchestration module for toyfront.

This module provides the high-level Checker class that runs the lexer and
the syntax checker over one source string and reports the outcome as a
CheckResult value instead of raising.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import CheckError
from ..frontend.lexer import Lexer, Token
from ..frontend.parser import SyntaxChecker
from ..frontend.symbols import SymbolTable
from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Result of a check operation.

    Attributes:
        success: Whether the source was accepted
        symbols: Declared identifiers (only on success)
        tokens: Tokens produced by the lexer (empty if lexing failed)
        error: The first diagnostic if the check failed
        message: Confirmation text on success, formatted diagnostic on failure
    """
    success: bool
    symbols: Optional[SymbolTable] = None
    tokens: List[Token] = field(default_factory=list)
    error: Optional[CheckError] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.success


class Checker:
    """Main checker class for toyfront.

    Each call to check() owns its own token list, cursor and symbol table,
    so one Checker may be reused for any number of sources.

    Example:
        >>> checker = Checker()
        >>> result = checker.check("int a; a = 5;")
        >>> result.success
        True
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the checker.

        Args:
            settings: Policy settings, DEFAULT_SETTINGS when omitted. The
                      checker keeps its own copy.
        """
        self.settings = copy.deepcopy(settings if settings is not None else DEFAULT_SETTINGS)

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source text.

        Raises:
            LexicalError: If a character matches no token rule
        """
        return Lexer().tokenize(source)

    def check(self, source: str) -> CheckResult:
        """Check source text.

        Args:
            source: Complete toy language source string

        Returns:
            CheckResult: success with the symbol table, or the first error
        """
        tokens: List[Token] = []
        try:
            tokens = self.tokenize(source)
            symbols = SyntaxChecker(self.settings).check(tokens)
        except CheckError as e:
            logger.info("check failed: %s", e)
            return CheckResult(success=False, tokens=tokens, error=e, message=str(e))

        logger.info("check succeeded: %d tokens, %d symbols", len(tokens), len(symbols))
        return CheckResult(
            success=True,
            symbols=symbols,
            tokens=tokens,
            message=self.settings.success_message,
        )
