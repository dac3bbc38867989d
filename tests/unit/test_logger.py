import logging
from collections.abc import Iterator

import pytest

from wallex.logging.logger import Log


@pytest.fixture()
def wallex_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("wallex")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestConfigure:
    def test_sets_level(self, wallex_logger: logging.Logger) -> None:
        Log.configure("debug")
        assert wallex_logger.level == logging.DEBUG

    def test_attaches_handler_once(self, wallex_logger: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("WARNING")
        assert len(wallex_logger.handlers) == 1
        assert wallex_logger.level == logging.WARNING


class TestMessages:
    def test_routes_to_wallex_logger(
        self, wallex_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="wallex"):
            Log.debug("request sent")
            Log.warning("api error")
        assert [r.name for r in caplog.records] == ["wallex", "wallex"]
        assert [r.getMessage() for r in caplog.records] == ["request sent", "api error"]
