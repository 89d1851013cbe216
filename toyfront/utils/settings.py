"""
Configuration settings for toyfront.

This module contains default configuration values and the policy decisions
used by the syntax checker.
"""

from dataclasses import dataclass
from typing import List

UPDATE = "update"
ERROR = "error"
REDECLARATION_POLICIES = (UPDATE, ERROR)


@dataclass
class Settings:
    """Checker settings and configuration.

    Attributes:
        redeclaration: What a second declaration of a name does ("update" or "error")
        declaration_keywords: Type keywords accepted at the head of a declaration
        success_message: Confirmation text reported on a successful check
    """
    redeclaration: str = UPDATE
    declaration_keywords: List[str] = None
    success_message: str = "Parsing completed successfully! No syntax error"

    def __post_init__(self):
        if self.declaration_keywords is None:
            self.declaration_keywords = ["int", "float", "double", "string", "bool", "char"]
        if self.redeclaration not in REDECLARATION_POLICIES:
            raise ValueError(
                f"Invalid redeclaration policy: {self.redeclaration!r}. "
                f"Use one of {', '.join(REDECLARATION_POLICIES)}."
            )
        unknown = [kw for kw in self.declaration_keywords if kw not in self.type_keyword_choices]
        if unknown:
            raise ValueError(f"Not a type keyword: {', '.join(unknown)}")

    @property
    def type_keyword_choices(self) -> List[str]:
        """Get the list of type keywords a declaration may start with."""
        return ["int", "float", "double", "string", "bool", "char"]

    @property
    def valid_redeclaration_policies(self) -> List[str]:
        """Get the list of valid redeclaration policies."""
        return list(REDECLARATION_POLICIES)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
