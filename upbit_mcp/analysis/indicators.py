"""Technical indicators over candle sequences.

Every function is pure: candles are read, never modified, and the result is a
plain list of floats. Candles must be ordered oldest first. The output starts
at the first candle for which the indicator is defined, so it is shorter than
the input by the warm-up period. When there are too few candles the result is
empty rather than an error; callers check the length before indexing.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..models.upbit import Candle


def _prices(candles: Sequence[Candle]) -> pd.Series:
    return pd.Series([c.trade_price for c in candles], dtype="float64")


def _volumes(candles: Sequence[Candle]) -> pd.Series:
    return pd.Series([c.candle_acc_trade_volume for c in candles], dtype="float64")


def _seeded_average(values: pd.Series, period: int, alpha: float) -> pd.Series:
    """Exponential average seeded with the simple mean of the first `period` values.

    Each later value is prev + alpha * (x - prev). ewm(adjust=False) evaluates
    it as ((1 - alpha) * prev + alpha * x) / ((1 - alpha) + alpha), so results
    match the step-by-step recurrence to rounding error, not bit for bit.
    """
    seed = pd.Series([values.iloc[:period].mean()])
    seeded = pd.concat([seed, values.iloc[period:]], ignore_index=True)
    return seeded.ewm(alpha=alpha, adjust=False).mean()


def sma_values(values: Sequence[float], period: int) -> List[float]:
    """Simple moving average of a plain numeric sequence."""
    series = pd.Series(values, dtype="float64")
    if period < 1 or len(series) < period:
        return []
    return series.rolling(window=period).mean().iloc[period - 1 :].tolist()


def ema_values(values: Sequence[float], period: int) -> List[float]:
    """Exponential moving average of a plain numeric sequence.

    Seeded with the SMA of the first `period` values, multiplier 2 / (period + 1).
    """
    series = pd.Series(values, dtype="float64")
    if period < 1 or len(series) < period:
        return []
    return _seeded_average(series, period, 2.0 / (period + 1)).tolist()


def calculate_sma(candles: Sequence[Candle], period: int) -> List[float]:
    """Simple Moving Average of trade prices. Length max(0, n - period + 1)."""
    return sma_values(_prices(candles), period)


def calculate_ema(candles: Sequence[Candle], period: int) -> List[float]:
    """Exponential Moving Average of trade prices. Length max(0, n - period + 1)."""
    return ema_values(_prices(candles), period)


def calculate_macd(
    candles: Sequence[Candle], short_period: int, long_period: int, signal_period: int
) -> Tuple[List[float], List[float], List[float]]:
    """Moving Average Convergence Divergence.

    The short EMA is trimmed so both EMAs start at the same candle. The signal
    line is the EMA of the MACD line, and the MACD line is trimmed again so
    all three series end on the last candle with equal length.

    Returns:
        (macd_line, signal_line, histogram)

    Raises:
        ValueError: If short_period is greater than long_period
    """
    if short_period > long_period:
        raise ValueError(
            f"short_period ({short_period}) must not exceed long_period ({long_period})"
        )
    if len(candles) < long_period:
        return [], [], []

    ema_short = np.asarray(calculate_ema(candles, short_period))
    ema_long = np.asarray(calculate_ema(candles, long_period))
    if len(ema_short) == 0 or len(ema_long) == 0:
        return [], [], []

    macd_line = ema_short[long_period - short_period :] - ema_long
    signal_line = np.asarray(ema_values(macd_line, signal_period))
    macd_line = macd_line[len(macd_line) - len(signal_line) :]
    histogram = macd_line - signal_line

    return macd_line.tolist(), signal_line.tolist(), histogram.tolist()


def calculate_bollinger_bands(
    candles: Sequence[Candle], period: int, std_dev: float
) -> Tuple[List[float], List[float], List[float]]:
    """Bollinger Bands around the SMA using the population standard deviation.

    Returns:
        (sma, upper_band, lower_band)
    """
    prices = _prices(candles)
    if period < 1 or len(prices) < period:
        return [], [], []

    window = prices.rolling(window=period)
    mid = window.mean().iloc[period - 1 :]
    width = window.std(ddof=0).iloc[period - 1 :] * std_dev
    upper = mid + width
    lower = mid - width
    return mid.tolist(), upper.tolist(), lower.tolist()


def calculate_rsi(candles: Sequence[Candle], period: int) -> List[float]:
    """Relative Strength Index with Wilder smoothing.

    The first value uses the simple average gain/loss over `period` deltas,
    later ones avg = (avg * (period - 1) + new) / period. Any step whose
    average loss is zero, the first included, is 100.

    Returns:
        RSI values, length max(0, n - period)
    """
    prices = _prices(candles)
    if period < 1 or len(prices) < period + 1:
        return []

    delta = prices.diff().iloc[1:].reset_index(drop=True)
    gains = delta.clip(lower=0.0)
    losses = (-delta).clip(lower=0.0)

    avg_gain = _seeded_average(gains, period, 1.0 / period)
    avg_loss = _seeded_average(losses, period, 1.0 / period)

    rs = avg_gain / avg_loss
    rsi = 100.0 - 100.0 / (1.0 + rs)
    rsi[avg_loss == 0] = 100.0
    return rsi.tolist()


def calculate_obv(candles: Sequence[Candle]) -> List[float]:
    """On-Balance Volume.

    Starts at the first candle's volume, then adds the volume on up moves,
    subtracts it on down moves and carries the total on flat moves.
    """
    if len(candles) == 0:
        return []

    direction = np.sign(_prices(candles).diff().fillna(1.0))
    return (direction * _volumes(candles)).cumsum().tolist()
