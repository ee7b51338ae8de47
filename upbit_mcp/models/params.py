"""Request parameter record for Upbit REST calls."""

from pydantic import BaseModel, ConfigDict, Field


class RequestParams(BaseModel):
    """Flat set of query/body parameters accepted by the Upbit endpoints.

    Every field defaults to its zero value. Zero-valued fields are left out of
    the wire form entirely, so a field is only sent when it is set to something
    non-empty.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    market: str = ""
    state: str = ""
    page: int = 0
    limit: int = 0
    order_by: str = ""
    uuid: str = ""
    identifier: str = ""
    side: str = ""
    volume: str = ""
    price: str = ""
    ord_type: str = ""
    currency: str = ""
    txid: str = ""
    amount: str = ""
    to: str = ""
    count: int = 0
    cursor: str = ""
    days_ago: int = Field(0, alias="daysAgo")
    unit: int = 0
    converting_price_unit: str = Field("", alias="convertingPriceUnit")
    smp_type: str = ""
