"""Order placement, cancellation, lookup and private trade history."""

from datetime import datetime
from typing import Any

from pydantic import Field

from wallex.types.base import BaseResponse, NumericOrEmpty, WallexModel


class SymbolParams(WallexModel):
    symbol: str


class CreateOrderParams(WallexModel):
    """Body of a new order.

    ``price`` is required for LIMIT orders and omitted for MARKET orders.
    """

    symbol: str
    order_type: str = Field(alias="type")
    side: str
    quantity: str
    price: str | None = None
    client_order_id: str | None = Field(None, alias="clientOrderId")


class CancelOrderParams(WallexModel):
    client_order_id: str = Field(alias="clientOrderId")


class OpenOrdersParams(WallexModel):
    symbol: str | None = None


class UserTradesParams(WallexModel):
    symbol: str | None = None
    side: str | None = None


class BaseOrder(WallexModel):
    """Order as reported by the exchange."""

    symbol: str = ""
    order_type: str = Field("", alias="type")
    side: str = ""
    price: str = ""
    orig_qty: str = Field("", alias="origQty")
    orig_sum: str = Field("", alias="origSum")
    executed_price: str = Field("", alias="executedPrice")
    executed_qty: str = Field("", alias="executedQty")
    executed_sum: str = Field("", alias="executedSum")
    executed_percent: NumericOrEmpty = Field(0.0, alias="executedPercent")
    status: str = ""
    active: bool = False
    client_order_id: str = Field("", alias="clientOrderId")
    created_at: datetime | None = None


class BaseOrderResponse(BaseResponse):
    result: BaseOrder = Field(default_factory=BaseOrder)


class CancelOrder(BaseOrder):
    """Order state returned after cancellation, including fills and fees."""

    sum: str = ""
    fee: str = ""
    fills: list[Any] = []
    transact_time: int = Field(0, alias="transactTime")
    updated_at: datetime | None = None


class CancelOrderResponse(BaseResponse):
    result: CancelOrder = Field(default_factory=CancelOrder)


class OpenOrders(WallexModel):
    orders: list[BaseOrder] = []


class OpenOrdersResponse(BaseResponse):
    result: OpenOrders = Field(default_factory=OpenOrders)


class UserTrade(WallexModel):
    symbol: str = ""
    quantity: str = ""
    price: str = ""
    sum: str = ""
    fee: str = ""
    fee_coefficient: str = Field("", alias="feeCoefficient")
    fee_asset: str = Field("", alias="feeAsset")
    is_buyer: bool = Field(False, alias="isBuyer")
    timestamp: datetime | None = None


class UserTrades(WallexModel):
    account_latest_trades: list[UserTrade] = Field([], alias="accountLatestTrades")


class UserTradesResponse(BaseResponse):
    result: UserTrades = Field(default_factory=UserTrades)
