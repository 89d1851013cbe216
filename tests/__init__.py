"""
Test suite for toyfront.

This package contains tests for the toyfront front end including:
- Unit tests for the lexer, syntax checker and symbol table
- Tests for the Checker facade and settings
"""

__version__ = "0.1.0"
