"""MCP server exposing Upbit trading and indicator tools."""

import logging
import time
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.middleware import Middleware, MiddlewareContext
from pydantic import Field

from .models.results import (
    AccountsResult,
    BollingerBandsResult,
    CancelOrderResult,
    MACDResult,
    MovingAverageResult,
    OBVResult,
    OrdersResult,
    RSIResult,
)
from .models.upbit import Chance, Order
from .services.indicator_service import MAX_CANDLE_COUNT, IndicatorService
from .services.trading_service import TradingService
from .sources.base import ExchangeAdapter

logger = logging.getLogger(__name__)

SERVER_NAME = "upbit-mcp-server"

Market = Annotated[
    str,
    Field(description="Trading pair code representing the market (e.g. KRW-BTC, KRW-ETH ...)"),
]
Count = Annotated[
    int,
    Field(ge=1, le=MAX_CANDLE_COUNT, description="Number of candles to retrieve. Max 200."),
]
OrderBy = Annotated[
    str,
    Field(
        description="Sort by order creation time: 'desc' (latest first, default) or 'asc'."
    ),
]


class ToolCallLoggingMiddleware(Middleware):
    """Logs each tool call with its duration."""

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        started = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(f"Tool {name} failed after {elapsed_ms:.0f}ms: {e}")
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"Tool {name} completed in {elapsed_ms:.0f}ms")
        return result


def register_trading_tools(mcp: FastMCP, service: TradingService) -> None:
    @mcp.tool(name="GetAccounts", description="Retrieves every balance held in the account.")
    def get_accounts() -> AccountsResult:
        return service.get_accounts()

    @mcp.tool(name="PlaceBuyOrderByLimit", description="Places a limit buy order.")
    def place_buy_order_by_limit(
        market: Market,
        price: Annotated[
            str,
            Field(
                description="Order price in the quote currency. e.g. to buy at 100,000,000 KRW "
                "per BTC in KRW-BTC, enter 100000000."
            ),
        ],
        volume: Annotated[
            str, Field(description="Order quantity. e.g. to buy 0.1 BTC in KRW-BTC, enter 0.1")
        ],
    ) -> Order:
        return service.place_buy_order_by_limit(market, price, volume)

    @mcp.tool(name="PlaceBuyOrderByMarket", description="Places a market buy order.")
    def place_buy_order_by_market(
        market: Market,
        price: Annotated[
            str,
            Field(
                description="Total order amount in the quote currency. e.g. 100000000 in "
                "KRW-BTC buys BTC worth 100,000,000 KRW at market price."
            ),
        ],
    ) -> Order:
        return service.place_buy_order_by_market(market, price)

    @mcp.tool(name="PlaceSellOrderByLimit", description="Places a limit sell order.")
    def place_sell_order_by_limit(
        market: Market,
        price: Annotated[
            str,
            Field(
                description="Order price in the quote currency. e.g. to sell at 100,000,000 KRW "
                "per BTC in KRW-BTC, enter 100000000."
            ),
        ],
        volume: Annotated[
            str, Field(description="Order quantity. e.g. to sell 0.1 BTC in KRW-BTC, enter 0.1")
        ],
    ) -> Order:
        return service.place_sell_order_by_limit(market, price, volume)

    @mcp.tool(name="PlaceSellOrderByMarket", description="Places a market sell order.")
    def place_sell_order_by_market(
        market: Market,
        volume: Annotated[
            str,
            Field(description="Sell quantity. e.g. 0.1 in KRW-BTC sells 0.1 BTC at market price"),
        ],
    ) -> Order:
        return service.place_sell_order_by_market(market, volume)

    @mcp.tool(name="CancelOrder", description="Cancels an open order.")
    def cancel_order(
        uuid: Annotated[str, Field(description="Unique identifier (UUID) of the order to cancel.")],
    ) -> CancelOrderResult:
        return service.cancel_order(uuid)

    @mcp.tool(
        name="GetAvailableOrderInfo",
        description="Retrieves order availability (fees, limits, balances) for a pair. "
        "The response does not include the current price; check it before deciding to "
        "buy or sell.",
    )
    def get_available_order_info(market: Market) -> Chance:
        return service.get_available_order_info(market)

    @mcp.tool(
        name="GetClosedOrderHistory",
        description="Retrieves done or canceled orders for a pair (recent 7 days).",
    )
    def get_closed_order_history(
        market: Market,
        state: Annotated[
            str, Field(description="Order status: 'done' or 'cancel'. Empty for both.")
        ] = "",
        limit: Annotated[
            int, Field(ge=0, le=1000, description="Number of orders (default 100, max 1000).")
        ] = 0,
        order_by: OrderBy = "",
    ) -> OrdersResult:
        return service.get_closed_order_history(market, state, limit, order_by)

    @mcp.tool(name="GetOpenOrders", description="Retrieves orders still waiting to be filled.")
    def get_open_orders(
        market: Market,
        page: Annotated[int, Field(ge=0, description="Page number (default 1).")] = 0,
        limit: Annotated[
            int, Field(ge=0, le=100, description="Orders per page (default 100, max 100).")
        ] = 0,
        order_by: OrderBy = "",
    ) -> OrdersResult:
        return service.get_open_orders(market, page, limit, order_by)


def register_indicator_tools(mcp: FastMCP, service: IndicatorService) -> None:
    @mcp.tool(
        name="GetMovingAverage",
        description="Calculates SMA and EMA of daily closing prices.",
    )
    def get_moving_average(
        market: Market,
        period: Annotated[int, Field(ge=1, description="Moving average period.")],
        count: Count = MAX_CANDLE_COUNT,
    ) -> MovingAverageResult:
        return service.get_moving_average(market, period, count)

    @mcp.tool(name="GetMACD", description="Calculates MACD line, signal line and histogram.")
    def get_macd(
        market: Market,
        short_period: Annotated[int, Field(ge=1, description="Short EMA period, e.g. 12.")] = 12,
        long_period: Annotated[int, Field(ge=1, description="Long EMA period, e.g. 26.")] = 26,
        signal_period: Annotated[int, Field(ge=1, description="Signal EMA period, e.g. 9.")] = 9,
        count: Count = MAX_CANDLE_COUNT,
    ) -> MACDResult:
        return service.get_macd(market, short_period, long_period, signal_period, count)

    @mcp.tool(name="GetBollingerBands", description="Calculates Bollinger Bands.")
    def get_bollinger_bands(
        market: Market,
        period: Annotated[int, Field(ge=1, description="Band period, e.g. 20.")] = 20,
        std_dev: Annotated[
            float, Field(gt=0, description="Standard deviation multiplier, e.g. 2.")
        ] = 2.0,
        count: Count = MAX_CANDLE_COUNT,
    ) -> BollingerBandsResult:
        return service.get_bollinger_bands(market, period, std_dev, count)

    @mcp.tool(name="GetRSI", description="Calculates the Relative Strength Index.")
    def get_rsi(
        market: Market,
        period: Annotated[int, Field(ge=1, description="RSI period, e.g. 14.")] = 14,
        count: Count = MAX_CANDLE_COUNT,
    ) -> RSIResult:
        return service.get_rsi(market, period, count)

    @mcp.tool(name="GetOBV", description="Calculates On-Balance Volume.")
    def get_obv(market: Market, count: Count = MAX_CANDLE_COUNT) -> OBVResult:
        return service.get_obv(market, count)


def create_server(exchange_adapter: ExchangeAdapter) -> FastMCP:
    """Build the MCP server with every tool bound to one adapter."""
    mcp = FastMCP(SERVER_NAME)
    mcp.add_middleware(ToolCallLoggingMiddleware())
    register_trading_tools(mcp, TradingService(exchange_adapter))
    register_indicator_tools(mcp, IndicatorService(exchange_adapter))
    return mcp
