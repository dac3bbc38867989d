from wallex.client.client import WallexClient
from wallex.config.settings import Settings
from wallex.logging.logger import Log


class ClientFactory:
    """Creates a configured WallexClient."""

    @classmethod
    def create(cls, settings: Settings | None = None) -> WallexClient:
        """Create a client from settings, loading them from the environment if omitted."""
        settings = settings if settings is not None else Settings()
        Log.configure(settings.log_level)
        client = WallexClient(
            timeout_seconds=settings.timeout_seconds,
            base_url=settings.base_url,
            api_version=settings.api_version or None,
            api_key=settings.api_key,
        )
        Log.info(
            f"Wallex client ready: {settings.base_url} "
            f"(authenticated={'yes' if settings.api_key else 'no'})"
        )
        return client
