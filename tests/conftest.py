"""Shared test fixtures and utilities."""

import json
from datetime import datetime, timedelta
from typing import Optional
from unittest.mock import MagicMock

import pytest

from upbit_mcp.models.upbit import Candle
from upbit_mcp.sources.signer import RequestSigner
from upbit_mcp.sources.transport import HttpTransport
from upbit_mcp.sources.upbit import BASE_URL, UpbitExchangeAdapter

ACCESS_KEY = "test-access-key-0123456789"
SECRET_KEY = "test-secret-key-0123456789abcdefghijklmnop"


class MockResponse:
    """Mock response object that mimics requests.Response."""

    def __init__(self, status_code: int = 200, text: str = ""):
        """Initialize mock response.

        Args:
            status_code: HTTP status code
            text: Raw response body
        """
        self.status_code = status_code
        self.text = text


def json_response(payload, status_code: int = 200) -> MockResponse:
    """Helper to create a mock response with a JSON body."""
    return MockResponse(status_code=status_code, text=json.dumps(payload))


def create_candle(
    trade_price: float,
    volume: float = 1.0,
    day: int = 0,
    market: str = "KRW-BTC",
) -> Candle:
    """Helper to create a day candle.

    Args:
        trade_price: Closing price
        volume: Accumulated trade volume
        day: Days after 2025-01-01, used for the candle timestamps
        market: Market code

    Returns:
        Candle object
    """
    start = datetime(2025, 1, 1) + timedelta(days=day)
    return Candle(
        market=market,
        candle_date_time_utc=start.strftime("%Y-%m-%dT%H:%M:%S"),
        candle_date_time_kst=(start + timedelta(hours=9)).strftime("%Y-%m-%dT%H:%M:%S"),
        opening_price=trade_price,
        high_price=trade_price,
        low_price=trade_price,
        trade_price=trade_price,
        timestamp=int(start.timestamp() * 1000),
        candle_acc_trade_price=trade_price * volume,
        candle_acc_trade_volume=volume,
    )


def create_candles(prices: list, volumes: Optional[list] = None) -> list:
    """Helper to create oldest-first candles from prices (and volumes)."""
    if volumes is None:
        volumes = [1.0] * len(prices)
    return [
        create_candle(price, volume, day=i) for i, (price, volume) in enumerate(zip(prices, volumes))
    ]


def candle_payload(candle: Candle) -> dict:
    """Serialize a candle the way the quotation API returns it."""
    return candle.model_dump()


@pytest.fixture
def mock_session():
    """Create a mock requests.Session."""
    return MagicMock()


@pytest.fixture
def signer():
    return RequestSigner(ACCESS_KEY, SECRET_KEY)


@pytest.fixture
def transport(mock_session, signer):
    """Create an HttpTransport bound to the mock session."""
    return HttpTransport(base_url=BASE_URL, signer=signer, session=mock_session)


@pytest.fixture
def adapter(mock_session):
    """Create an UpbitExchangeAdapter bound to the mock session."""
    return UpbitExchangeAdapter(
        access_key=ACCESS_KEY,
        secret_key=SECRET_KEY,
        session=mock_session,
    )


@pytest.fixture
def sample_candles():
    """Twenty oldest-first candles with a mixed price path."""
    prices = [
        100.0, 102.0, 101.0, 103.0, 106.0, 105.0, 104.0, 107.0, 110.0, 108.0,
        109.0, 111.0, 115.0, 113.0, 112.0, 114.0, 118.0, 117.0, 119.0, 121.0,
    ]
    volumes = [10.0 + i for i in range(len(prices))]
    return create_candles(prices, volumes)
