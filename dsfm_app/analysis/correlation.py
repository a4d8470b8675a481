"""Pearson correlation and correlation matrix construction"""

import math
from typing import Sequence

from ..data.models import ReturnSeries
from ..logging.config import get_logger
from ..models.correlation import CorrelatedPair, CorrelationMatrix

logger = get_logger(__name__)


def calculate_correlation(returns1: Sequence[float], returns2: Sequence[float]) -> float:
    """
    Calculate the Pearson correlation coefficient of two aligned series

    corr = sum(dx * dy) / sqrt(sum(dx^2) * sum(dy^2))

    Args:
        returns1: First return series
        returns2: Second return series, same length as the first

    Returns:
        Correlation in [-1, 1]; 0.0 for empty, mismatched or zero-variance input
    """
    if len(returns1) != len(returns2) or len(returns1) == 0:
        return 0.0

    n = len(returns1)
    mean1 = sum(returns1) / n
    mean2 = sum(returns2) / n

    numerator = 0.0
    sum_sq1 = 0.0
    sum_sq2 = 0.0

    for x, y in zip(returns1, returns2):
        diff1 = x - mean1
        diff2 = y - mean2
        numerator += diff1 * diff2
        sum_sq1 += diff1 * diff1
        sum_sq2 += diff2 * diff2

    denominator = math.sqrt(sum_sq1 * sum_sq2)
    if denominator == 0:
        return 0.0

    # Rounding can push perfectly collinear series a hair past +-1
    return max(-1.0, min(1.0, numerator / denominator))


def align_series(returns1: Sequence[float], returns2: Sequence[float]) -> tuple[list[float], list[float]]:
    """
    Truncate two series to their shared length, keeping the most recent values

    Args:
        returns1: First return series (oldest first)
        returns2: Second return series (oldest first)

    Returns:
        Tail-aligned copies of both series
    """
    min_length = min(len(returns1), len(returns2))
    if min_length == 0:
        return [], []

    return list(returns1[-min_length:]), list(returns2[-min_length:])


def build_correlation_matrix(series_list: Sequence[ReturnSeries]) -> CorrelationMatrix:
    """
    Build the symmetric correlation matrix for a set of instruments

    Args:
        series_list: One ReturnSeries per instrument; order defines rows

    Returns:
        CorrelationMatrix with unit diagonal
    """
    symbols = [series.symbol for series in series_list]
    n = len(symbols)
    matrix = [[0.0] * n for _ in range(n)]

    for i in range(n):
        matrix[i][i] = 1.0
        for j in range(i + 1, n):
            returns1, returns2 = align_series(series_list[i].returns, series_list[j].returns)
            correlation = calculate_correlation(returns1, returns2)
            matrix[i][j] = correlation
            matrix[j][i] = correlation

    logger.debug("Correlation matrix built", size=n)

    return CorrelationMatrix(symbols=symbols, matrix=matrix)


def get_correlation(matrix: CorrelationMatrix, symbol1: str, symbol2: str) -> float:
    """
    Look up the correlation between two symbols

    Returns:
        Matrix entry, or 0.0 if either symbol is absent
    """
    idx1 = matrix.index_of(symbol1)
    idx2 = matrix.index_of(symbol2)

    if idx1 is None or idx2 is None:
        return 0.0
    return matrix.matrix[idx1][idx2]


def get_top_correlated_pairs(matrix: CorrelationMatrix, top_n: int = 10) -> list[CorrelatedPair]:
    """
    Rank unordered pairs by absolute correlation

    Args:
        matrix: Correlation matrix
        top_n: Number of pairs to return

    Returns:
        Strongest pairs first; ties keep matrix order
    """
    pairs = []
    n = matrix.size

    for i in range(n):
        for j in range(i + 1, n):
            pairs.append(CorrelatedPair(
                symbol1=matrix.symbols[i],
                symbol2=matrix.symbols[j],
                correlation=matrix.matrix[i][j],
            ))

    pairs.sort(key=lambda pair: abs(pair.correlation), reverse=True)
    return pairs[:max(top_n, 0)]
