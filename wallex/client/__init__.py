from wallex.client.client import BASE_URL, WallexClient
from wallex.client.error_normalizer import normalize_error
from wallex.client.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidParameterError,
    RequestError,
    RequestStage,
    WallexError,
)
from wallex.client.executor import RequestExecutor
from wallex.client.factory import ClientFactory
from wallex.client.models import NormalizedError

__all__ = [
    "BASE_URL",
    "ApiError",
    "ClientFactory",
    "ConfigurationError",
    "InvalidParameterError",
    "NormalizedError",
    "RequestError",
    "RequestExecutor",
    "RequestStage",
    "WallexClient",
    "WallexError",
    "normalize_error",
]
