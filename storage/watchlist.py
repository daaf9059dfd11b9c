"""In-memory watchlist of ticker symbols."""

from typing import Iterable, Iterator, List, Optional
from utils.logger import get_logger

logger = get_logger("watchlist")


def normalize_symbol(query: str) -> str:
    """
    Turn a search query into a ticker symbol.

    Raises:
        ValueError: If the query is blank
    """
    symbol = (query or "").strip().upper()
    if not symbol:
        raise ValueError("Symbol must not be empty")
    return symbol


class Watchlist:
    """Ordered set of symbols the user follows."""

    def __init__(self, symbols: Optional[Iterable[str]] = None):
        self._symbols: List[str] = []
        for symbol in symbols or []:
            self.add(symbol)

    @classmethod
    def from_config(cls, config) -> "Watchlist":
        """Build the default watchlist from a SymbolConfig."""
        return cls(config.get_watchlist_symbols())

    def add(self, symbol: str) -> bool:
        """Add a symbol; returns False if it was already present."""
        symbol = normalize_symbol(symbol)
        if symbol in self._symbols:
            return False
        self._symbols.append(symbol)
        logger.info("watchlist_symbol_added", symbol=symbol)
        return True

    def remove(self, symbol: str) -> bool:
        """Remove a symbol; returns False if it was not present."""
        symbol = normalize_symbol(symbol)
        if symbol not in self._symbols:
            return False
        self._symbols.remove(symbol)
        logger.info("watchlist_symbol_removed", symbol=symbol)
        return True

    @property
    def symbols(self) -> List[str]:
        return list(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip().upper() in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)
