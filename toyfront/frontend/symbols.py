"""
Symbol table for toyfront.

Records every identifier declared while a program is checked. How a second
declaration of the same name is treated is an explicit policy:

- "update": insert-or-update, the latest declaration wins
- "error": a second declaration raises RedeclarationError
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import RedeclarationError
from ..utils.settings import ERROR, REDECLARATION_POLICIES, UPDATE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbol:
    """A declared identifier.

    Attributes:
        name: Identifier name
        type_name: Declared type keyword, e.g. "int"
        value: Textual initializer, empty when the declaration has none
    """
    name: str
    type_name: str
    value: str = ""


class SymbolTable:
    """Mapping from identifier name to its declaration.

    Example:
        >>> table = SymbolTable()
        >>> table.declare("a", "int")
        >>> table.as_dict()
        {'a': ('int', '')}
    """

    def __init__(self, policy: str = UPDATE):
        if policy not in REDECLARATION_POLICIES:
            raise ValueError(
                f"Invalid redeclaration policy: {policy!r}. "
                f"Use one of {', '.join(REDECLARATION_POLICIES)}."
            )
        self.policy = policy
        self._entries: Dict[str, Symbol] = {}

    def declare(self, name: str, type_name: str, value: str = "", line: int = 0) -> Symbol:
        """Record a declaration.

        Args:
            name: Identifier being declared
            type_name: Type keyword of the declaration
            value: Textual initializer
            line: Source line, used for diagnostics only

        Returns:
            Symbol: The stored entry

        Raises:
            RedeclarationError: If name exists and the policy is "error"
        """
        if name in self._entries:
            if self.policy == ERROR:
                raise RedeclarationError(name, line)
            logger.warning("line %d: redeclaration of %r overwrites previous entry", line, name)

        symbol = Symbol(name=name, type_name=type_name, value=value)
        self._entries[name] = symbol
        logger.debug("declared %s %s = %r", type_name, name, value)
        return symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the entry for name, or None if it was never declared."""
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def as_dict(self) -> Dict[str, Tuple[str, str]]:
        """Return {name: (type_name, value)} in declaration order."""
        return {name: (s.type_name, s.value) for name, s in self._entries.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"SymbolTable({self.as_dict()!r})"
