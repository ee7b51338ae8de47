"""Account and order operations exposed as tools."""

import logging

from ..models.params import RequestParams
from ..models.results import AccountsResult, CancelOrderResult, OrdersResult
from ..models.upbit import Chance, Order
from ..sources.base import ExchangeAdapter

logger = logging.getLogger(__name__)

# Self-match prevention: cancel the resting (maker) order
SMP_TYPE = "cancel_maker"


class TradingService:
    """Account, order placement and order history operations."""

    def __init__(self, exchange_adapter: ExchangeAdapter):
        """Initialize trading service.

        Args:
            exchange_adapter: Exchange adapter for signed calls
        """
        self.exchange = exchange_adapter

    def get_accounts(self) -> AccountsResult:
        return AccountsResult(accounts=self.exchange.get_accounts())

    def place_buy_order_by_limit(self, market: str, price: str, volume: str) -> Order:
        """Buy `volume` at unit `price`."""
        return self._place(market, side="bid", ord_type="limit", price=price, volume=volume)

    def place_buy_order_by_market(self, market: str, price: str) -> Order:
        """Buy at market for a total of `price` in the quote currency."""
        return self._place(market, side="bid", ord_type="price", price=price)

    def place_sell_order_by_limit(self, market: str, price: str, volume: str) -> Order:
        return self._place(market, side="ask", ord_type="limit", price=price, volume=volume)

    def place_sell_order_by_market(self, market: str, volume: str) -> Order:
        return self._place(market, side="ask", ord_type="market", volume=volume)

    def cancel_order(self, uuid: str) -> CancelOrderResult:
        return CancelOrderResult(canceled=self.exchange.cancel_order(uuid))

    def get_available_order_info(self, market: str) -> Chance:
        return self.exchange.get_chance(market)

    def get_closed_order_history(
        self, market: str, state: str = "", limit: int = 0, order_by: str = ""
    ) -> OrdersResult:
        """Closed orders for a market.

        Args:
            market: Market code, e.g. KRW-BTC
            state: "done" or "cancel"; empty for both
            limit: Number of orders (exchange default 100, max 1000)
            order_by: "asc" or "desc"
        """
        params = RequestParams(market=market, state=state, limit=limit, order_by=order_by)
        return OrdersResult(orders=self.exchange.get_order_history(params))

    def get_open_orders(
        self, market: str, page: int = 0, limit: int = 0, order_by: str = ""
    ) -> OrdersResult:
        params = RequestParams(market=market, page=page, limit=limit, order_by=order_by)
        return OrdersResult(orders=self.exchange.get_open_orders(params))

    def _place(self, market: str, side: str, ord_type: str, price: str = "", volume: str = "") -> Order:
        params = RequestParams(
            market=market,
            side=side,
            ord_type=ord_type,
            price=price,
            volume=volume,
            smp_type=SMP_TYPE,
        )
        order = self.exchange.place_order(params)
        logger.info(f"✅ Order {order.uuid} placed: {side} {ord_type} {market}")
        return order
