"""
Canonical input models for the analysis core.

This module defines the immutable structures the caller hands to the
pipeline: close prices for return derivation and the per-instrument
return series themselves.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Sequence

from ..errors import MalformedDataError, MissingDataError


@dataclass(frozen=True)
class PricePoint:
    """Single close price observation."""
    date: date          # Trading day
    close: float        # Closing price


@dataclass(frozen=True)
class ReturnSeries:
    """Log-return history of one instrument, oldest first."""
    symbol: str
    returns: tuple[float, ...]

    def __post_init__(self):
        """Freeze returns into a tuple so the series cannot change mid-run."""
        if not isinstance(self.returns, tuple):
            object.__setattr__(self, "returns", tuple(self.returns))

    def __len__(self) -> int:
        return len(self.returns)

    @classmethod
    def of(cls, symbol: str, returns: Sequence[float]) -> "ReturnSeries":
        """Build a series from any sequence of returns."""
        return cls(symbol=symbol, returns=tuple(float(r) for r in returns))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ReturnSeries":
        """Build a series from a ``{"symbol": ..., "returns": [...]}`` mapping."""
        symbol = raw.get("symbol")
        if not symbol:
            raise MalformedDataError("Return series missing symbol", raw_value=dict(raw))

        if raw.get("returns") is None:
            raise MissingDataError(f"Return series for {symbol} has no returns", data_type="returns")

        try:
            returns = tuple(float(r) for r in raw["returns"])
        except (TypeError, ValueError) as e:
            raise MalformedDataError(
                f"Return series for {symbol} has non-numeric values: {e}",
                symbol=symbol,
            ) from e

        return cls(symbol=str(symbol), returns=returns)

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "returns": list(self.returns)}
