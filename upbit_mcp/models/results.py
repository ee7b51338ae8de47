"""Result models returned by the tool services."""

from dataclasses import dataclass, field
from typing import List

from .upbit import Account, Order


@dataclass
class AccountsResult:
    """All balances held in the account."""

    accounts: List[Account] = field(default_factory=list)


@dataclass
class OrdersResult:
    """List of orders from an order history lookup."""

    orders: List[Order] = field(default_factory=list)


@dataclass
class CancelOrderResult:
    canceled: bool


@dataclass
class MovingAverageResult:
    """Simple and exponential moving averages over the same period."""

    sma: List[float]
    ema: List[float]


@dataclass
class MACDResult:
    """MACD line, signal line and histogram, aligned to the same final candle."""

    macd_line: List[float]
    signal_line: List[float]
    histogram: List[float]


@dataclass
class BollingerBandsResult:
    sma: List[float]
    upper_band: List[float]
    lower_band: List[float]


@dataclass
class RSIResult:
    rsi: List[float]


@dataclass
class OBVResult:
    obv: List[float]
