"""Data models for correlation results"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CorrelationMatrix:
    """Symmetric pairwise correlation matrix, rows/columns ordered by symbols"""
    symbols: tuple[str, ...]
    matrix: tuple[tuple[float, ...], ...]

    def __post_init__(self):
        object.__setattr__(self, "symbols", tuple(self.symbols))
        object.__setattr__(self, "matrix", tuple(tuple(row) for row in self.matrix))

    @property
    def size(self) -> int:
        return len(self.symbols)

    def index_of(self, symbol: str) -> Optional[int]:
        """Row index of a symbol, None if absent"""
        try:
            return self.symbols.index(symbol)
        except ValueError:
            return None

    def off_diagonal(self) -> list[float]:
        """Upper-triangle values, one per unordered pair"""
        n = self.size
        return [self.matrix[i][j] for i in range(n) for j in range(i + 1, n)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbols": list(self.symbols),
            "matrix": [list(row) for row in self.matrix],
        }


@dataclass(frozen=True)
class CorrelatedPair:
    """One unordered instrument pair with its correlation"""
    symbol1: str
    symbol2: str
    correlation: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol1": self.symbol1,
            "symbol2": self.symbol2,
            "correlation": self.correlation,
        }
