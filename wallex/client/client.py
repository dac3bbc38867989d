"""Typed wrappers over the Wallex REST endpoints."""

from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from wallex.client.exceptions import InvalidParameterError
from wallex.client.executor import Payload, RequestExecutor
from wallex.config.settings import DEFAULT_BASE_URL
from wallex.types.account import Wallets
from wallex.types.market import AllDepths, Depth, MarketInformation, Trades
from wallex.types.order import (
    BaseOrderResponse,
    CancelOrderParams,
    CancelOrderResponse,
    CreateOrderParams,
    OpenOrdersParams,
    OpenOrdersResponse,
    SymbolParams,
    UserTradesParams,
    UserTradesResponse,
)

BASE_URL = DEFAULT_BASE_URL


class WallexClient:
    """Client for the Wallex market API.

    Wallex authenticates with a single static key sent as ``X-API-Key``; there
    is no login or token refresh. Every method performs one request and either
    returns the decoded envelope or raises a WallexError subclass.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        timeout_seconds: float = 30.0,
        base_url: str = BASE_URL,
        api_version: str | None = None,
        api_key: str = "",
    ) -> None:
        self._owns_http_client = http_client is None
        self._http_client = (
            http_client if http_client is not None else httpx.Client(timeout=timeout_seconds)
        )
        self._base_url = (base_url or BASE_URL).rstrip("/")
        self._api_version = api_version or None
        self._executor = RequestExecutor(http_client=self._http_client, api_key=api_key)

    def __enter__(self) -> "WallexClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def create_api_uri(self, endpoint: str, version: str) -> str:
        """Join base url, version and endpoint, e.g. ``https://api.wallex.ir/v1/depth``.

        A version configured on the client takes precedence over ``version``.
        """
        return f"{self._base_url}/{self._api_version or version}{endpoint}"

    def request(
        self,
        method: str,
        url: str,
        *,
        auth: bool = False,
        payload: Payload | None = None,
        result_type: Any = None,
    ) -> Any:
        return self._executor.execute(
            method, url, auth=auth, payload=payload, result_type=result_type
        )

    def api_request(
        self,
        method: str,
        endpoint: str,
        version: str,
        *,
        auth: bool = False,
        payload: Payload | None = None,
        result_type: Any = None,
    ) -> Any:
        url = self.create_api_uri(endpoint, version)
        return self.request(method, url, auth=auth, payload=payload, result_type=result_type)

    def get_markets_info(self) -> MarketInformation:
        """GET /v1/markets: specifications and statistics of every market."""
        return self.api_request("GET", "/markets", "v1", result_type=MarketInformation)

    def get_order_book(self, symbol: str) -> Depth:
        """GET /v1/depth: aggregated bid/ask levels of one market."""
        return self.api_request(
            "GET", "/depth", "v1", payload=SymbolParams(symbol=symbol), result_type=Depth
        )

    def get_all_order_books(self) -> AllDepths:
        """GET /v2/depth/all: order books of every market in one call."""
        return self.api_request("GET", "/depth/all", "v2", result_type=AllDepths)

    def get_recent_trades(self, symbol: str) -> Trades:
        """GET /v1/trades: latest public trades of one market."""
        return self.api_request(
            "GET", "/trades", "v1", payload=SymbolParams(symbol=symbol), result_type=Trades
        )

    def get_wallets(self) -> Wallets:
        """GET /v1/account/balances: balances of every asset. Requires the API key."""
        return self.api_request("GET", "/account/balances", "v1", auth=True, result_type=Wallets)

    def create_order(self, params: CreateOrderParams) -> BaseOrderResponse:
        """POST /v1/account/orders: place a LIMIT or MARKET order."""
        return self.api_request(
            "POST",
            "/account/orders",
            "v1",
            auth=True,
            payload=params,
            result_type=BaseOrderResponse,
        )

    def cancel_order(self, client_order_id: str) -> CancelOrderResponse:
        """DELETE /v1/account/orders: cancel an active order by client order id."""
        return self.api_request(
            "DELETE",
            "/account/orders",
            "v1",
            auth=True,
            payload=CancelOrderParams(client_order_id=client_order_id),
            result_type=CancelOrderResponse,
        )

    def get_open_orders(self, symbol: str | None = None) -> OpenOrdersResponse:
        """GET /v1/account/openOrders, optionally filtered by symbol."""
        return self.api_request(
            "GET",
            "/account/openOrders",
            "v1",
            auth=True,
            payload=OpenOrdersParams(symbol=symbol or None),
            result_type=OpenOrdersResponse,
        )

    def get_order_status(self, client_order_id: str) -> BaseOrderResponse:
        """GET /v1/account/orders/{clientOrderId}: full state of one order.

        Raises:
            InvalidParameterError: if ``client_order_id`` is empty.
        """
        if not client_order_id:
            raise InvalidParameterError("client order id is required for getting order status")
        return self.api_request(
            "GET",
            f"/account/orders/{quote(client_order_id, safe='')}",
            "v1",
            auth=True,
            result_type=BaseOrderResponse,
        )

    def get_user_trades(self, params: UserTradesParams | None = None) -> UserTradesResponse:
        """GET /v1/account/trades: private trade history, filterable by symbol and side."""
        return self.api_request(
            "GET",
            "/account/trades",
            "v1",
            auth=True,
            payload=params,
            result_type=UserTradesResponse,
        )
