"""
Path symbol resolution.

A path symbol is a single leading character standing in for a configured
base directory, e.g. with {"$": "/srv/app/plugins"} the path
"$/acme/crm" resolves to "/srv/app/plugins/acme/crm".
"""

from types import MappingProxyType
from typing import Mapping, Optional

from filesystem.base import InvalidPathSymbolError


def validate_symbols(symbols: Mapping[str, str]) -> None:
    """Raise InvalidPathSymbolError unless every key is one character."""
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidPathSymbolError(
                f"Path symbol must be a single character, got {symbol!r}"
            )


class PathSymbolResolver:
    """
    Expands symbolic paths using a fixed symbol table.

    Resolution never touches the filesystem. The table is copied on
    construction and exposed read-only.
    """

    def __init__(self, symbols: Optional[Mapping[str, str]] = None):
        symbols = dict(symbols or {})
        validate_symbols(symbols)
        self._symbols = MappingProxyType(symbols)

    @property
    def symbols(self) -> Mapping[str, str]:
        return self._symbols

    def is_symbol(self, path: str) -> Optional[str]:
        """Return the leading symbol of path, or None if it has none."""
        first_char = path[:1]
        if first_char in self._symbols:
            return first_char
        return None

    def resolve(self, path: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Expand a symbolic path.

        The remainder after the symbol is appended verbatim, so the base path
        must carry its own trailing separator if one is wanted.

        Args:
            path: Path that may start with a symbol
            fallback: Returned as-is when path is not symbolic

        Returns:
            The expanded path, or fallback
        """
        symbol = self.is_symbol(path)
        if symbol is None:
            return fallback
        return self._symbols[symbol] + path[1:]
