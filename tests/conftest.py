"""
Pytest configuration and fixtures for toyfront tests.
"""

import pytest


SAMPLE_PROGRAM = """\
int a;
int b;
b = a + 10;
if (b > 10) { return b; } else { return 0; }
"""


@pytest.fixture
def sample_source():
    """Provide a program the grammar accepts."""
    return SAMPLE_PROGRAM


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from toyfront.frontend import Lexer
    return Lexer()


@pytest.fixture
def syntax_checker():
    """Provide a SyntaxChecker instance."""
    from toyfront.frontend import SyntaxChecker
    return SyntaxChecker()


@pytest.fixture
def checker():
    """Provide a Checker instance."""
    from toyfront import Checker
    return Checker()
