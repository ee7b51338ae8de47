"""Indicator tools: fetch day candles, then compute."""

import logging
from typing import List

from ..analysis import indicators
from ..models.params import RequestParams
from ..models.results import (
    BollingerBandsResult,
    MACDResult,
    MovingAverageResult,
    OBVResult,
    RSIResult,
)
from ..models.upbit import Candle
from ..sources.base import CandleUnit, ExchangeAdapter

logger = logging.getLogger(__name__)

MAX_CANDLE_COUNT = 200


class IndicatorService:
    """Computes indicators over freshly fetched day candles.

    Each call fetches candles once; a failed fetch propagates and nothing is
    computed.
    """

    def __init__(self, exchange_adapter: ExchangeAdapter):
        """Initialize indicator service.

        Args:
            exchange_adapter: Exchange adapter for fetching candles
        """
        self.exchange = exchange_adapter

    def fetch_candles(self, market: str, count: int = MAX_CANDLE_COUNT) -> List[Candle]:
        """Fetch day candles ordered oldest first.

        Args:
            market: Market code, e.g. KRW-BTC
            count: Number of candles to request

        Returns:
            Candles sorted by candle start time, oldest first
        """
        candles = self.exchange.get_candles(
            CandleUnit.DAYS, RequestParams(market=market, count=count)
        )
        candles = sorted(candles, key=lambda c: c.candle_date_time_utc)
        logger.debug(f"Fetched {len(candles)} day candles for {market}")
        return candles

    def get_moving_average(
        self, market: str, period: int, count: int = MAX_CANDLE_COUNT
    ) -> MovingAverageResult:
        candles = self.fetch_candles(market, count)
        return MovingAverageResult(
            sma=indicators.calculate_sma(candles, period),
            ema=indicators.calculate_ema(candles, period),
        )

    def get_macd(
        self,
        market: str,
        short_period: int,
        long_period: int,
        signal_period: int,
        count: int = MAX_CANDLE_COUNT,
    ) -> MACDResult:
        candles = self.fetch_candles(market, count)
        macd_line, signal_line, histogram = indicators.calculate_macd(
            candles, short_period, long_period, signal_period
        )
        return MACDResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)

    def get_bollinger_bands(
        self, market: str, period: int, std_dev: float, count: int = MAX_CANDLE_COUNT
    ) -> BollingerBandsResult:
        candles = self.fetch_candles(market, count)
        sma, upper, lower = indicators.calculate_bollinger_bands(candles, period, std_dev)
        return BollingerBandsResult(sma=sma, upper_band=upper, lower_band=lower)

    def get_rsi(self, market: str, period: int, count: int = MAX_CANDLE_COUNT) -> RSIResult:
        candles = self.fetch_candles(market, count)
        return RSIResult(rsi=indicators.calculate_rsi(candles, period))

    def get_obv(self, market: str, count: int = MAX_CANDLE_COUNT) -> OBVResult:
        candles = self.fetch_candles(market, count)
        return OBVResult(obv=indicators.calculate_obv(candles))
