"""Decoded Upbit API objects."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """Balance of one currency held in the account."""

    currency: str = Field("", description="Currency code to be queried")
    balance: str = Field(
        "",
        description="Available amount or volume for orders. For digital assets this is the "
        "available quantity, for fiat currency the available amount",
    )
    locked: str = Field("", description="Amount or quantity locked by pending orders or withdrawals")
    avg_buy_price: str = Field("", description="Average buy price of the asset")
    avg_buy_price_modified: bool = Field(
        False, description="Whether the average buy price has been modified"
    )
    unit_currency: str = Field(
        "", description="Currency unit used as the basis for avg_buy_price (KRW, BTC, USDT)"
    )


class Trade(BaseModel):
    market: str = ""
    uuid: str = ""
    price: str = ""
    volume: str = ""
    funds: str = ""
    side: str = ""


class Order(BaseModel):
    """Order as returned by the order endpoints."""

    uuid: str = Field("", description="Unique identifier (UUID) for the order")
    side: str = Field("", description="Order side: ask (sell), bid (buy)")
    ord_type: str = Field(
        "",
        description="Order type (limit: limit buy/sell, price: market buy, market: market sell)",
    )
    price: str = Field(
        "",
        description="Unit price for limit orders, total amount for market buy orders",
    )
    state: str = Field("", description="Order status")
    market: str = Field("", description="Trading pair code representing the market")
    created_at: str = Field("", description="Order creation time in KST")
    volume: str = Field("", description="Order request amount or quantity")
    remaining_volume: str = Field("", description="Remaining order quantity after execution")
    executed_volume: str = Field("", description="Executed order quantity")
    reserved_fee: str = Field("", description="Fee amount reserved for the order")
    remaining_fee: str = Field("", description="Fee amount still reserved for the order")
    paid_fee: str = Field("", description="Fee amount paid at the time of execution")
    locked: str = Field("", description="Amount or quantity locked by the order")
    trades_count: int = Field(0, description="Number of trades executed for the order")
    trades: List[Trade] = Field(default_factory=list, description="Trades, only on detail lookups")


class ChanceLimit(BaseModel):
    currency: str = Field("", description="Currency used for this side of the market")
    min_total: str = Field("", description="Minimum order amount in the quote currency")


class ChanceMarket(BaseModel):
    id: str = Field("", description="Trading pair code, e.g. KRW-BTC")
    name: str = Field("", description="Trading pair in the format base/quote")
    order_sides: List[str] = Field(default_factory=list, description="Supported order sides")
    bid_types: List[str] = Field(default_factory=list, description="Supported buy order types")
    ask_types: List[str] = Field(default_factory=list, description="Supported sell order types")
    bid: ChanceLimit = Field(default_factory=ChanceLimit)
    ask: ChanceLimit = Field(default_factory=ChanceLimit)
    max_total: str = Field("", description="Maximum available order amount")
    state: str = Field("", description="Trading pair operation status")


class Chance(BaseModel):
    """Order availability for a market."""

    bid_fee: str = Field("", description="Fee rate applied to buy orders")
    ask_fee: str = Field("", description="Fee rate applied to sell orders")
    maker_bid_fee: str = Field("", description="Fee rate for buy maker orders")
    maker_ask_fee: str = Field("", description="Fee rate for sell maker orders")
    market: ChanceMarket = Field(default_factory=ChanceMarket)
    bid_account: Account = Field(default_factory=Account)
    ask_account: Account = Field(default_factory=Account)


class WalletStatus(BaseModel):
    currency: str = ""
    wallet_state: str = ""
    block_state: Optional[str] = None
    block_height: Optional[int] = None
    block_updated_at: Optional[str] = None


class Deposit(BaseModel):
    """Deposit or withdrawal record."""

    type: str = ""
    uuid: str = ""
    currency: str = ""
    txid: Optional[str] = None
    state: str = ""
    created_at: str = ""
    done_at: Optional[str] = None
    amount: str = ""
    fee: str = ""
    transaction_type: str = ""


class CoinAddress(BaseModel):
    currency: str = ""
    deposit_address: Optional[str] = None
    secondary_address: Optional[str] = None


class GenerateCoinAddressResponse(BaseModel):
    success: bool = False
    message: str = ""


class ApiKey(BaseModel):
    access_key: str = ""
    expire_at: str = ""


class Ticker(BaseModel):
    market: str = ""
    trade_date: str = ""
    trade_time: str = ""
    trade_date_kst: str = ""
    trade_time_kst: str = ""
    trade_timestamp: int = 0
    opening_price: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0
    trade_price: float = 0.0
    prev_closing_price: float = 0.0
    change: str = ""
    change_price: float = 0.0
    change_rate: float = 0.0
    signed_change_price: float = 0.0
    signed_change_rate: float = 0.0
    trade_volume: float = 0.0
    acc_trade_price: float = 0.0
    acc_trade_price_24h: float = 0.0
    acc_trade_volume: float = 0.0
    acc_trade_volume_24h: float = 0.0
    highest_52_week_price: float = 0.0
    highest_52_week_date: str = ""
    lowest_52_week_price: float = 0.0
    lowest_52_week_date: str = ""
    timestamp: int = 0


class Candle(BaseModel):
    """One OHLCV sample. Immutable once decoded."""

    model_config = ConfigDict(frozen=True)

    market: str = ""
    candle_date_time_utc: str = ""
    candle_date_time_kst: str = ""
    opening_price: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0
    trade_price: float = 0.0
    timestamp: int = 0
    candle_acc_trade_price: float = 0.0
    candle_acc_trade_volume: float = 0.0
    prev_closing_price: float = 0.0
    change_price: float = 0.0
    change_rate: float = 0.0
    unit: int = 0


class MarketCaution(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price_fluctuations: bool = Field(
        False, alias="PRICE_FLUCTUATIONS", description="Price surge/drop alert"
    )
    trading_volume_soaring: bool = Field(
        False, alias="TRADING_VOLUME_SOARING", description="Trading volume surge alert"
    )
    deposit_amount_soaring: bool = Field(
        False, alias="DEPOSIT_AMOUNT_SOARING", description="Deposit volume surge alert"
    )
    global_price_differences: bool = Field(
        False,
        alias="GLOBAL_PRICE_DIFFERENCES",
        description="Domestic and international price difference alert",
    )
    concentration_of_small_accounts: bool = Field(
        False,
        alias="CONCENTRATION_OF_SMALL_ACCOUNTS",
        description="Concentrated trading by a small number of accounts alert",
    )


class MarketEvent(BaseModel):
    warning: bool = Field(False, description="Whether the pair is flagged as an investment caution item")
    caution: MarketCaution = Field(default_factory=MarketCaution)


class MarketTradingPair(BaseModel):
    market: str = ""
    korean_name: str = ""
    english_name: str = ""
    market_warning: str = ""
    market_event: Optional[MarketEvent] = None


class OrderBookUnit(BaseModel):
    ask_price: float = 0.0
    bid_price: float = 0.0
    ask_size: float = 0.0
    bid_size: float = 0.0


class OrderBook(BaseModel):
    market: str = ""
    timestamp: int = 0
    total_ask_size: float = 0.0
    total_bid_size: float = 0.0
    orderbook_units: List[OrderBookUnit] = Field(default_factory=list)


class Tick(BaseModel):
    market: str = ""
    trade_date_utc: str = ""
    trade_time_utc: str = ""
    timestamp: int = 0
    trade_price: float = 0.0
    trade_volume: float = 0.0
    prev_closing_price: float = 0.0
    change_price: float = 0.0
    ask_bid: str = ""
    sequential_id: Optional[Any] = None
