import yaml
from pathlib import Path
from typing import List, Dict, Optional
from utils.logger import get_logger

logger = get_logger("symbol_config")

class SymbolConfig:
    """Manage the popular-stock tabs and default watchlist."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or Path(__file__).parent / "symbols.yaml"
        self._config = self._load_config()

    def _load_config(self) -> Dict:
        """Load symbols from YAML file."""
        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
        logger.info("symbol_config_loaded", path=str(self.config_path))
        return config

    def _stocks(self) -> List[Dict]:
        return self._config.get("assets", {}).get("stocks", [])

    def get_popular_stocks(self) -> List[Dict[str, str]]:
        """Get the stocks shown as quick-select tabs."""
        return [
            {"symbol": stock["symbol"], "name": stock.get("name", stock["symbol"])}
            for stock in self._stocks()
            if stock.get("popular", False)
        ]

    def get_watchlist_symbols(self) -> List[str]:
        """Get symbols on the default watchlist."""
        return [
            stock["symbol"]
            for stock in self._stocks()
            if stock.get("watchlist", False)
        ]

    def get_symbol_info(self, symbol: str) -> Dict:
        """Get configuration for a specific symbol."""
        for stock in self._stocks():
            if stock["symbol"] == symbol:
                return stock
        return {}

    def get_default_symbol(self) -> str:
        """Symbol analysed when none is given."""
        default = self._config.get("default_symbol")
        if default:
            return default
        popular = self.get_popular_stocks()
        return popular[0]["symbol"] if popular else "AAPL"

# Global instance
symbol_config = SymbolConfig()
