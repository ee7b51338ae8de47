"""Base classes and errors for exchange adapters."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from ..models.params import RequestParams
from ..models.upbit import Account, Candle, Chance, Order


class ExchangeError(Exception):
    """Base exception for exchange-related errors."""

    pass


class SigningError(ExchangeError):
    """Raised when a request credential cannot be signed."""

    pass


class TransportError(ExchangeError):
    """Network failure, timeout, or non-2xx response.

    Attributes:
        status_code: HTTP status, or None when no response was received
        body: Raw response body, unparsed
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(ExchangeError):
    """Response body does not match the expected shape.

    Attributes:
        cause: Description of the decode failure
        body: Raw response body
    """

    def __init__(self, cause: str, body: str):
        super().__init__(f"json decode error: {cause}, body: {body}")
        self.cause = cause
        self.body = body


class CandleUnit(str, Enum):
    """Candle intervals served under a fixed path."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


# Minute intervals accepted by candles/minutes/{unit}
MINUTE_UNITS = (1, 3, 5, 10, 15, 30, 60, 240)


class ExchangeAdapter(ABC):
    """Base class for exchange adapters."""

    @abstractmethod
    def get_accounts(self) -> List[Account]:
        """Get every balance held in the account."""
        pass

    @abstractmethod
    def place_order(self, params: RequestParams) -> Order:
        """Place an order.

        Raises:
            ExchangeError: If the order could not be placed
        """
        pass

    @abstractmethod
    def cancel_order(self, uuid: str) -> bool:
        """Cancel an order, returning whether the exchange acknowledged it."""
        pass

    @abstractmethod
    def get_chance(self, market: str) -> Chance:
        """Get order availability for a market."""
        pass

    @abstractmethod
    def get_order_history(self, params: RequestParams) -> List[Order]:
        """Get closed orders."""
        pass

    @abstractmethod
    def get_open_orders(self, params: RequestParams) -> List[Order]:
        """Get orders that are still waiting to be filled."""
        pass

    @abstractmethod
    def get_candles(self, unit: CandleUnit, params: RequestParams) -> List[Candle]:
        """Get historical candle data for a market.

        Args:
            unit: Candle interval
            params: Request parameters; market and count are the usual ones

        Returns:
            List of Candle objects in the order the exchange returned them

        Raises:
            ExchangeError: If unable to fetch candle data
        """
        pass
