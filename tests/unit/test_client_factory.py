from unittest.mock import patch

import pytest

from wallex.client.client import WallexClient
from wallex.client.factory import ClientFactory
from wallex.config.settings import Settings


class TestClientFactory:
    def test_creates_client(self) -> None:
        with patch("wallex.client.factory.Log"):
            client = ClientFactory.create(Settings(api_key="k"))
        assert isinstance(client, WallexClient)
        client.close()

    def test_applies_base_url_and_version(self) -> None:
        settings = Settings(base_url="https://sandbox.test", api_version="v2")
        with patch("wallex.client.factory.Log"):
            client = ClientFactory.create(settings)
        assert client.create_api_uri("/markets", "v1") == "https://sandbox.test/v2/markets"
        client.close()

    def test_configures_logging(self) -> None:
        with patch("wallex.client.factory.Log") as mock_log:
            client = ClientFactory.create(Settings(log_level="DEBUG"))
        mock_log.configure.assert_called_once_with("DEBUG")
        client.close()

    def test_never_logs_api_key(self) -> None:
        with patch("wallex.client.factory.Log") as mock_log:
            client = ClientFactory.create(Settings(api_key="very-secret"))
        logged = " ".join(c.args[0] for c in mock_log.info.call_args_list)
        assert "very-secret" not in logged
        client.close()

    def test_loads_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WALLEX_BASE_URL", "https://env.test")
        with patch("wallex.client.factory.Log"):
            client = ClientFactory.create()
        assert client.create_api_uri("/trades", "v1") == "https://env.test/v1/trades"
        client.close()
