"""Tests for the trading and indicator services."""

from unittest.mock import MagicMock

import pytest

from upbit_mcp.models.params import RequestParams
from upbit_mcp.models.results import CancelOrderResult, OrdersResult
from upbit_mcp.models.upbit import Account, Chance, Order
from upbit_mcp.services.indicator_service import IndicatorService
from upbit_mcp.services.trading_service import TradingService
from upbit_mcp.sources.base import CandleUnit, ExchangeAdapter, TransportError
from tests.conftest import create_candles


@pytest.fixture
def mock_adapter():
    """Create a mock exchange adapter."""
    return MagicMock(spec=ExchangeAdapter)


class TestTradingService:
    """Tests for TradingService."""

    def test_get_accounts(self, mock_adapter):
        mock_adapter.get_accounts.return_value = [Account(currency="KRW", balance="1000")]

        result = TradingService(mock_adapter).get_accounts()

        assert result.accounts[0].currency == "KRW"

    def test_limit_buy(self, mock_adapter):
        mock_adapter.place_order.return_value = Order(uuid="o-1")

        order = TradingService(mock_adapter).place_buy_order_by_limit("KRW-BTC", "100000000", "0.1")

        assert order.uuid == "o-1"
        mock_adapter.place_order.assert_called_once_with(
            RequestParams(
                market="KRW-BTC",
                side="bid",
                ord_type="limit",
                price="100000000",
                volume="0.1",
                smp_type="cancel_maker",
            )
        )

    def test_market_buy_sends_total_price(self, mock_adapter):
        mock_adapter.place_order.return_value = Order(uuid="o-2")

        TradingService(mock_adapter).place_buy_order_by_market("KRW-BTC", "5000")

        params = mock_adapter.place_order.call_args.args[0]
        assert (params.side, params.ord_type, params.price, params.volume) == ("bid", "price", "5000", "")

    def test_limit_sell(self, mock_adapter):
        mock_adapter.place_order.return_value = Order(uuid="o-3")

        TradingService(mock_adapter).place_sell_order_by_limit("KRW-ETH", "4000000", "1.5")

        params = mock_adapter.place_order.call_args.args[0]
        assert (params.side, params.ord_type, params.price, params.volume) == (
            "ask",
            "limit",
            "4000000",
            "1.5",
        )
        assert params.smp_type == "cancel_maker"

    def test_market_sell_sends_volume_only(self, mock_adapter):
        mock_adapter.place_order.return_value = Order(uuid="o-4")

        TradingService(mock_adapter).place_sell_order_by_market("KRW-ETH", "1.5")

        params = mock_adapter.place_order.call_args.args[0]
        assert (params.side, params.ord_type, params.price, params.volume) == ("ask", "market", "", "1.5")

    def test_cancel_order(self, mock_adapter):
        mock_adapter.cancel_order.return_value = True

        result = TradingService(mock_adapter).cancel_order("o-1")

        assert result == CancelOrderResult(canceled=True)
        mock_adapter.cancel_order.assert_called_once_with("o-1")

    def test_available_order_info(self, mock_adapter):
        chance = Chance(bid_fee="0.0005")
        mock_adapter.get_chance.return_value = chance

        assert TradingService(mock_adapter).get_available_order_info("KRW-BTC") is chance

    def test_closed_order_history(self, mock_adapter):
        mock_adapter.get_order_history.return_value = [Order(uuid="a", state="done")]

        result = TradingService(mock_adapter).get_closed_order_history("KRW-BTC", state="done", limit=10)

        assert result == OrdersResult(orders=[Order(uuid="a", state="done")])
        mock_adapter.get_order_history.assert_called_once_with(
            RequestParams(market="KRW-BTC", state="done", limit=10)
        )

    def test_open_orders(self, mock_adapter):
        mock_adapter.get_open_orders.return_value = []

        result = TradingService(mock_adapter).get_open_orders("KRW-BTC", page=2, order_by="asc")

        assert result.orders == []
        mock_adapter.get_open_orders.assert_called_once_with(
            RequestParams(market="KRW-BTC", page=2, order_by="asc")
        )

    def test_errors_propagate(self, mock_adapter):
        mock_adapter.place_order.side_effect = TransportError(
            "API error status: 400, body: insufficient funds", status_code=400, body="insufficient funds"
        )

        with pytest.raises(TransportError):
            TradingService(mock_adapter).place_buy_order_by_market("KRW-BTC", "5000")


class TestIndicatorService:
    """Tests for IndicatorService."""

    def test_fetches_day_candles(self, mock_adapter):
        mock_adapter.get_candles.return_value = []

        IndicatorService(mock_adapter).fetch_candles("KRW-BTC", 50)

        mock_adapter.get_candles.assert_called_once_with(
            CandleUnit.DAYS, RequestParams(market="KRW-BTC", count=50)
        )

    def test_default_count(self, mock_adapter):
        mock_adapter.get_candles.return_value = []

        IndicatorService(mock_adapter).get_rsi("KRW-BTC", 14)

        _, params = mock_adapter.get_candles.call_args.args
        assert params.count == 200

    def test_newest_first_candles_are_reordered(self, mock_adapter):
        """Upbit returns newest first; indicators see oldest first."""
        candles = create_candles([10.0, 11.0, 10.0, 10.0, 9.0], [5.0] * 5)
        mock_adapter.get_candles.return_value = list(reversed(candles))

        result = IndicatorService(mock_adapter).get_obv("KRW-BTC", 5)

        assert result.obv == pytest.approx([5.0, 10.0, 5.0, 5.0, 0.0])

    def test_moving_average(self, mock_adapter):
        mock_adapter.get_candles.return_value = create_candles([1.0, 2.0, 3.0, 4.0, 5.0])

        result = IndicatorService(mock_adapter).get_moving_average("KRW-BTC", 3, 5)

        assert result.sma == pytest.approx([2.0, 3.0, 4.0])
        assert result.ema == pytest.approx([2.0, 3.0, 4.0])

    def test_macd_lengths(self, mock_adapter):
        mock_adapter.get_candles.return_value = create_candles([100.0 + (i % 7) for i in range(60)])

        result = IndicatorService(mock_adapter).get_macd("KRW-BTC", 12, 26, 9, 60)

        assert len(result.macd_line) == len(result.signal_line) == len(result.histogram) == 60 - 26 - 9 + 2

    def test_bollinger_bands(self, mock_adapter):
        mock_adapter.get_candles.return_value = create_candles([1.0, 2.0, 3.0])

        result = IndicatorService(mock_adapter).get_bollinger_bands("KRW-BTC", 3, 2.0, 3)

        assert result.sma == pytest.approx([2.0])
        assert len(result.upper_band) == len(result.lower_band) == 1

    def test_short_history_gives_empty_series(self, mock_adapter):
        mock_adapter.get_candles.return_value = create_candles([1.0, 2.0])

        result = IndicatorService(mock_adapter).get_rsi("KRW-NEW", 14, 2)

        assert result.rsi == []

    def test_fetch_failure_propagates(self, mock_adapter):
        mock_adapter.get_candles.side_effect = TransportError("timed out")

        with pytest.raises(TransportError):
            IndicatorService(mock_adapter).get_bollinger_bands("KRW-BTC", 20, 2.0)
