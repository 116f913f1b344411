"""
Technical Indicator Calculations

Pure NumPy implementations of the indicators behind the analysis verdict.
Every function returns a full-length array aligned to the input, with NaN
wherever the indicator window is not yet satisfied.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: np.ndarray, period: int) -> np.ndarray:
    """Simple Moving Average."""
    if period <= 0:
        raise ValueError(f"SMA period must be positive, got {period}")

    result = np.full(len(data), np.nan)
    if len(data) < period:
        return result

    # Each window is summed on its own, so there is no running-sum drift
    result[period - 1 :] = sliding_window_view(data, period).mean(axis=1)
    return result


def ema(data: np.ndarray, period: int, alpha: Optional[float] = None) -> np.ndarray:
    """
    Exponential Moving Average.

    Smoothing factor defaults to 2 / (period + 1). The first value is the
    simple mean of the first `period` valid points; leading NaNs are skipped
    so the average can be taken over another indicator's output.
    """
    if period <= 0:
        raise ValueError(f"EMA period must be positive, got {period}")

    result = np.full(len(data), np.nan)
    valid = np.flatnonzero(~np.isnan(data))
    if len(valid) == 0:
        return result

    start = valid[0]
    if len(data) - start < period:
        return result

    multiplier = 2 / (period + 1) if alpha is None else alpha

    # Seed with SMA
    seed = start + period - 1
    result[seed] = np.mean(data[start : seed + 1])

    for i in range(seed + 1, len(data)):
        result[i] = data[i] * multiplier + result[i - 1] * (1 - multiplier)

    return result


def wilder_smoothing(data: np.ndarray, period: int) -> np.ndarray:
    """Wilder's smoothed average (EMA with alpha = 1 / period)."""
    return ema(data, period, alpha=1 / period)


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """Relative Strength Index."""
    result = np.full(len(closes), np.nan)
    if len(closes) < period + 1:
        return result

    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    avg_gain = wilder_smoothing(gains, period)
    avg_loss = wilder_smoothing(losses, period)

    # deltas[i] is the move into closes[i + 1]
    with np.errstate(divide="ignore", invalid="ignore"):
        rs = avg_gain / avg_loss
        values = np.where(avg_loss == 0, 100.0, 100 - (100 / (1 + rs)))

    values[np.isnan(avg_gain)] = np.nan
    result[1:] = values
    return result


def macd(
    closes: np.ndarray,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD (Moving Average Convergence Divergence).

    Returns: (macd_line, signal_line, histogram)
    """
    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)

    macd_line = fast_ema - slow_ema

    # Signal line is EMA of the defined part of the MACD line
    signal_line = ema(macd_line, signal_period)

    histogram = macd_line - signal_line

    return macd_line, signal_line, histogram


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_last(arr: np.ndarray) -> Optional[float]:
    """Get the value at the most recent index, or None if it is NaN."""
    if len(arr) == 0 or np.isnan(arr[-1]):
        return None
    return float(arr[-1])


def round_half_up(value: float, digits: int = 2) -> float:
    """
    Round exact halves away from zero.

    Works on the exact binary value of the float, so 100.125 becomes 100.13
    while 1.005 (stored just below the half) becomes 1.0.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_or_none(value: Optional[float], digits: int = 2) -> Optional[float]:
    """Round at the output boundary, passing None through."""
    return round_half_up(value, digits) if value is not None else None


def percent_change(closes: np.ndarray, window: int) -> Optional[float]:
    """
    Percent change across the last `window` points.

    Compares closes[-window] with closes[-1]. Returns None when the series is
    shorter than the window.
    """
    if len(closes) < window:
        return None

    first = float(closes[-window])
    last = float(closes[-1])
    return (last - first) / first * 100
