"""Log-return derivation from close prices"""

import math
from typing import Any, Iterable, Mapping, Sequence, Union

from ..errors import MalformedDataError
from ..logging.config import get_logger
from .models import PricePoint, ReturnSeries

logger = get_logger(__name__)


def calculate_returns(prices: Sequence[PricePoint]) -> list[float]:
    """
    Calculate log returns from close prices

    r_t = ln(close_t / close_{t-1})

    Args:
        prices: Close observations, any order (sorted by date here)

    Returns:
        Log returns, one fewer than the number of usable prices
    """
    ordered = sorted(prices, key=lambda p: p.date)

    returns = []
    for i in range(1, len(ordered)):
        prev_close = ordered[i - 1].close
        curr_close = ordered[i].close
        # Non-trading or bad rows come through as 0
        if prev_close > 0 and curr_close > 0:
            returns.append(math.log(curr_close / prev_close))

    return returns


def build_return_series(symbol: str, prices: Sequence[PricePoint]) -> ReturnSeries:
    """
    Derive a ReturnSeries for one instrument

    Args:
        symbol: Instrument identifier
        prices: Close observations for the analysis window

    Returns:
        ReturnSeries with log returns in chronological order

    Raises:
        MalformedDataError: If any close is NaN or infinite
    """
    for point in prices:
        if not isinstance(point.close, (int, float)) or math.isnan(point.close) or math.isinf(point.close):
            raise MalformedDataError(
                f"Invalid close price for {symbol}: {point.close}",
                symbol=symbol,
                raw_value=point.close,
            )

    return ReturnSeries.of(symbol, calculate_returns(prices))


def prepare_series(
    series_list: Iterable[Union[ReturnSeries, Mapping[str, Any]]],
    min_observations: int = 1,
) -> list[ReturnSeries]:
    """
    Normalize caller input and drop series too short to correlate

    Args:
        series_list: ReturnSeries objects or {"symbol", "returns"} mappings
        min_observations: Minimum number of returns a series needs

    Returns:
        Usable series in input order; duplicates keep the first occurrence
    """
    prepared = []
    seen = set()

    for raw in series_list:
        series = raw if isinstance(raw, ReturnSeries) else ReturnSeries.from_dict(raw)

        if series.symbol in seen:
            logger.warning("Duplicate symbol skipped", symbol=series.symbol)
            continue

        if len(series) < min_observations:
            logger.warning(
                "Skipping series with insufficient returns",
                symbol=series.symbol,
                available_count=len(series),
                required_count=min_observations,
            )
            continue

        seen.add(series.symbol)
        prepared.append(series)

    return prepared
