"""
Error types for toyfront.

Every failure the front end can report is a subclass of CheckError. The
lexer and the syntax checker raise these at the first fault; the Checker
facade converts them into a failed CheckResult.
"""

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .frontend.lexer import TokenKind


class CheckError(Exception):
    """Base class for all front end diagnostics.

    Attributes:
        message: Human readable description of the fault
        line: 1-based source line of the fault (0 if unknown)
    """

    def __init__(self, message: str, line: int = 0):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line > 0:
            return f"Line {self.line}: {self.message}"
        return self.message


class LexicalError(CheckError):
    """Raised when an input character matches no token rule."""

    def __init__(self, char: str, line: int = 0):
        self.char = char
        super().__init__(f"Unexpected character: {char!r}", line)


class SyntaxCheckError(CheckError):
    """Raised when the current token does not fit the grammar.

    `line` is where the unfinished statement began (or the last consumed
    token's line); `found_line` is where the offending token sits.

    Attributes:
        expected: The TokenKind an expect() call wanted, or a rule name
                  such as "statement" or "expression"
        found_text: Lexeme of the offending token
        found_kind: TokenKind of the offending token
        found_line: Line of the offending token
    """

    def __init__(self, expected: Union[str, "TokenKind"], found_text: str,
                 found_kind: Optional["TokenKind"], line: int = 0,
                 found_line: Optional[int] = None):
        self.expected = expected
        self.found_text = found_text
        self.found_kind = found_kind
        self.found_line = line if found_line is None else found_line
        expected_name = getattr(expected, "name", expected)
        found_name = found_kind.name if found_kind is not None else "?"
        message = f"Expected {expected_name}, found {found_text!r} ({found_name})"
        if self.found_line != line:
            message += f" on line {self.found_line}"
        super().__init__(message, line)


class RedeclarationError(CheckError):
    """Raised when a name is declared twice under the 'error' policy."""

    def __init__(self, name: str, line: int = 0):
        self.name = name
        super().__init__(f"Redeclaration of {name!r}", line)
