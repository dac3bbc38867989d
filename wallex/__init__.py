from wallex.client import (
    BASE_URL,
    ApiError,
    ClientFactory,
    ConfigurationError,
    InvalidParameterError,
    NormalizedError,
    RequestError,
    RequestStage,
    WallexClient,
    WallexError,
)

__all__ = [
    "BASE_URL",
    "ApiError",
    "ClientFactory",
    "ConfigurationError",
    "InvalidParameterError",
    "NormalizedError",
    "RequestError",
    "RequestStage",
    "WallexClient",
    "WallexError",
]
