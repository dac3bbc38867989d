"""Public market data: symbol metadata, order books and recent trades."""

from datetime import datetime

from pydantic import Field

from wallex.types.base import BaseResponse, NumericOrEmpty, WallexModel


class Direction(WallexModel):
    sell: int = Field(0, alias="SELL")
    buy: int = Field(0, alias="BUY")


class Stats(WallexModel):
    """Rolling 24h / 7d statistics of a market."""

    bid_price: str = Field("", alias="bidPrice")
    ask_price: str = Field("", alias="askPrice")
    day_change: NumericOrEmpty = Field(0.0, alias="24h_ch")
    week_change: NumericOrEmpty = Field(0.0, alias="7d_ch")
    day_volume: str = Field("", alias="24h_volume")
    week_volume: str = Field("", alias="7d_volume")
    day_quote_volume: str = Field("", alias="24h_quoteVolume")
    day_high_price: str = Field("", alias="24h_highPrice")
    day_low_price: str = Field("", alias="24h_lowPrice")
    last_price: str = Field("", alias="lastPrice")
    last_qty: str = Field("", alias="lastQty")
    last_trade_side: str = Field("", alias="lastTradeSide")
    bid_volume: str = Field("", alias="bidVolume")
    ask_volume: str = Field("", alias="askVolume")
    bid_count: int = Field(0, alias="bidCount")
    ask_count: int = Field(0, alias="askCount")
    direction: Direction = Field(default_factory=Direction)


class SymbolInfo(WallexModel):
    """Trading rules and statistics of a single market."""

    symbol: str = ""
    base_asset: str = Field("", alias="baseAsset")
    base_asset_precision: int = Field(0, alias="baseAssetPrecision")
    quote_asset: str = Field("", alias="quoteAsset")
    quote_precision: int = Field(0, alias="quotePrecision")
    fa_name: str = Field("", alias="faName")
    fa_base_asset: str = Field("", alias="faBaseAsset")
    fa_quote_asset: str = Field("", alias="faQuoteAsset")
    step_size: int = Field(0, alias="stepSize")
    tick_size: int = Field(0, alias="tickSize")
    min_qty: NumericOrEmpty = Field(0.0, alias="minQty")
    min_notional: NumericOrEmpty = Field(0.0, alias="minNotional")
    stats: Stats = Field(default_factory=Stats)
    created_at: datetime | None = Field(None, alias="createdAt")


class Symbols(WallexModel):
    symbols: dict[str, SymbolInfo] = {}


class MarketInformation(BaseResponse):
    result: Symbols = Field(default_factory=Symbols)


class OrderBookEntry(WallexModel):
    """One aggregated price level."""

    price: NumericOrEmpty = 0.0
    quantity: NumericOrEmpty = 0.0
    sum: str = ""


class OrderBook(WallexModel):
    ask: list[OrderBookEntry] = []
    bid: list[OrderBookEntry] = []


class Depth(BaseResponse):
    result: OrderBook = Field(default_factory=OrderBook)


class AllDepths(BaseResponse):
    """Order books of every market keyed by symbol."""

    result: dict[str, OrderBook] = {}


class Trade(WallexModel):
    symbol: str = ""
    quantity: str = ""
    price: str = ""
    sum: str = ""
    is_buy_order: bool = Field(False, alias="isBuyOrder")
    timestamp: datetime | None = None


class LatestTrades(WallexModel):
    latest_trades: list[Trade] = Field([], alias="latestTrades")


class Trades(BaseResponse):
    result: LatestTrades = Field(default_factory=LatestTrades)
