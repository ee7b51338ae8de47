"""Upbit REST exchange adapter."""

import logging
from typing import List, Optional

import requests

from ..models.params import RequestParams
from ..models.upbit import (
    Account,
    ApiKey,
    Candle,
    Chance,
    CoinAddress,
    Deposit,
    GenerateCoinAddressResponse,
    MarketTradingPair,
    Order,
    OrderBook,
    Tick,
    Ticker,
    WalletStatus,
)
from .base import MINUTE_UNITS, CandleUnit, ExchangeAdapter
from .signer import RequestSigner
from .transport import DEFAULT_TIMEOUT, HttpTransport

logger = logging.getLogger(__name__)

BASE_URL = "https://api.upbit.com/v1/"


class UpbitExchangeAdapter(ExchangeAdapter):
    """Upbit exchange and quotation API adapter."""

    def __init__(
        self,
        access_key: str = "",
        secret_key: str = "",
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Upbit adapter.

        Args:
            access_key: Upbit access key
            secret_key: Upbit secret key
            base_url: API root URL
            timeout: Per-call HTTP timeout in seconds
            session: Optional requests session for testing
        """
        if not access_key or not secret_key:
            raise ValueError("Access key and secret key are required for the Upbit API")

        self.signer = RequestSigner(access_key, secret_key)
        self.transport = HttpTransport(
            base_url=base_url, signer=self.signer, timeout=timeout, session=session
        )
        logger.info(f"Upbit adapter created for {self.transport.base_url}")

    # --- Exchange API (signed) ---

    def get_accounts(self) -> List[Account]:
        return self.transport.request("GET", "accounts", None, List[Account])

    def get_order_history(self, params: RequestParams) -> List[Order]:
        """Get closed (done or canceled) orders."""
        return self.transport.request("GET", "orders/closed", params, List[Order])

    def get_order(self, uuid: str) -> Order:
        return self.transport.request("GET", "order", RequestParams(uuid=uuid), Order)

    def get_orders(self, params: RequestParams) -> List[Order]:
        return self.transport.request("GET", "orders", params, List[Order])

    def get_open_orders(self, params: RequestParams) -> List[Order]:
        return self.transport.request("GET", "orders/open", params, List[Order])

    def cancel_order(self, uuid: str) -> bool:
        """Cancel an order.

        Returns:
            True if the exchange returned the canceled order's uuid
        """
        order = self.transport.request("DELETE", "order", RequestParams(uuid=uuid), Order)
        canceled = bool(order.uuid)
        logger.info(f"Cancel order {uuid}: canceled={canceled}")
        return canceled

    def place_order(self, params: RequestParams) -> Order:
        logger.info(
            f"Placing {params.side} {params.ord_type} order on {params.market} "
            f"(price={params.price or '-'}, volume={params.volume or '-'})"
        )
        return self.transport.request("POST", "orders", params, Order)

    def get_chance(self, market: str) -> Chance:
        return self.transport.request("GET", "orders/chance", RequestParams(market=market), Chance)

    def get_coin_addresses(self) -> List[CoinAddress]:
        return self.transport.request("GET", "deposits/coin_addresses", None, List[CoinAddress])

    def get_coin_address(self, currency: str) -> CoinAddress:
        return self.transport.request(
            "GET", "deposits/coin_address", RequestParams(currency=currency), CoinAddress
        )

    def generate_coin_address(self, currency: str) -> GenerateCoinAddressResponse:
        return self.transport.request(
            "POST",
            "deposits/generate_coin_address",
            RequestParams(currency=currency),
            GenerateCoinAddressResponse,
        )

    def get_withdraws(self, params: RequestParams) -> List[Deposit]:
        return self.transport.request("GET", "withdraws", params, List[Deposit])

    def get_withdraw(self, uuid: str) -> Deposit:
        return self.transport.request("GET", "withdraw", RequestParams(uuid=uuid), Deposit)

    def deposit_krw(self, amount: str) -> Deposit:
        return self.transport.request("POST", "deposits/krw", RequestParams(amount=amount), Deposit)

    def get_wallet_status(self) -> List[WalletStatus]:
        return self.transport.request("GET", "status/wallet", None, List[WalletStatus])

    def get_api_keys(self) -> List[ApiKey]:
        return self.transport.request("GET", "api_keys", None, List[ApiKey])

    # --- Quotation API (public) ---

    def get_market_codes(self) -> List[MarketTradingPair]:
        return self.transport.public_request(
            "market/all", {"isDetails": True}, List[MarketTradingPair]
        )

    def get_ticks(self, params: RequestParams) -> List[Tick]:
        return self.transport.public_request("trades/ticks", params, List[Tick])

    def get_ticker(self, markets: str) -> List[Ticker]:
        """Current price for one or more comma-separated markets."""
        return self.transport.public_request("ticker", {"markets": markets}, List[Ticker])

    def get_orderbooks(self, markets: str) -> List[OrderBook]:
        return self.transport.public_request("orderbook", {"markets": markets}, List[OrderBook])

    def get_candles(self, unit: CandleUnit, params: RequestParams) -> List[Candle]:
        """Get day, week or month candles, newest first as Upbit returns them."""
        unit = CandleUnit(unit)
        return self.transport.public_request(f"candles/{unit.value}", params, List[Candle])

    def get_minute_candles(self, unit: int, params: RequestParams) -> List[Candle]:
        """Get minute candles.

        Args:
            unit: Minutes per candle, one of MINUTE_UNITS
            params: Request parameters

        Raises:
            ValueError: If unit is not a supported minute interval
        """
        if unit not in MINUTE_UNITS:
            raise ValueError(f"Unsupported minute unit {unit}; expected one of {MINUTE_UNITS}")
        return self.transport.public_request(f"candles/minutes/{unit}", params, List[Candle])
