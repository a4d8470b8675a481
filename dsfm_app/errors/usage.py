"""
API misuse errors.

Raised when the caller asks for something the computed structures cannot
answer, e.g. shocking an instrument that was never part of the analysis.
"""

from typing import Optional


class UsageError(Exception):
    """Base class for errors caused by invalid calls into the analysis core."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.recoverable = False


class UnknownSymbolError(UsageError, KeyError):
    """Symbol is not present in the correlation matrix."""

    def __init__(self, symbol: str, available_symbols: Optional[list] = None, **kwargs):
        super().__init__(f"Symbol {symbol} not found in correlation matrix", **kwargs)
        self.symbol = symbol
        self.available_symbols = available_symbols or []

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes
        return str(self.args[0])
