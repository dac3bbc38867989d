import json
from decimal import Decimal

import pytest

from wallex.client.query import to_json_body, to_query_params
from wallex.types.order import CreateOrderParams, UserTradesParams


class TestToQueryParams:
    def test_uses_wire_field_names(self) -> None:
        params = to_query_params(UserTradesParams(symbol="BTCUSDT", side="SELL"))
        assert params == {"symbol": "BTCUSDT", "side": "SELL"}

    def test_drops_unset_fields(self) -> None:
        assert to_query_params(UserTradesParams(symbol="BTCUSDT")) == {"symbol": "BTCUSDT"}
        assert to_query_params(UserTradesParams()) == {}

    def test_renders_scalars(self) -> None:
        params = to_query_params(
            {"limit": 10, "ratio": 0.5, "price": Decimal("1.10"), "active": True, "skip": None}
        )
        assert params == {"limit": "10", "ratio": "0.5", "price": "1.10", "active": "true"}

    def test_lists_become_repeated_values(self) -> None:
        assert to_query_params({"symbols": ["A", "B"]}) == {"symbols": ["A", "B"]}

    def test_nested_mapping_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unsupported query parameter"):
            to_query_params({"filter": {"a": 1}})

    def test_unsupported_payload_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unsupported payload"):
            to_query_params(["symbol"])  # type: ignore[arg-type]


class TestToJsonBody:
    def test_model_is_encoded_by_alias_without_none(self) -> None:
        params = CreateOrderParams(
            symbol="BTCUSDT",
            order_type="MARKET",
            side="SELL",
            quantity="1",
            client_order_id="my-order",
        )
        assert json.loads(to_json_body(params)) == {
            "symbol": "BTCUSDT",
            "type": "MARKET",
            "side": "SELL",
            "quantity": "1",
            "clientOrderId": "my-order",
        }

    def test_mapping_is_encoded(self) -> None:
        assert json.loads(to_json_body({"a": 1})) == {"a": 1}

    def test_unserializable_value_raises(self) -> None:
        with pytest.raises(TypeError):
            to_json_body({"a": object()})
