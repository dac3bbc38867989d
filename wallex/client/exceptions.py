from collections.abc import Mapping
from enum import StrEnum

from wallex.client.models import NormalizedError


class WallexError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class ConfigurationError(WallexError):
    """Raised when a call needs a credential the client was not given."""


class InvalidParameterError(WallexError):
    """Raised when an endpoint argument is rejected before any request is built."""


class RequestStage(StrEnum):
    PREPARING_PARAMETERS = "preparing parameters"
    PREPARING_BODY = "preparing body"
    CREATING_REQUEST = "creating request"
    SENDING_REQUEST = "sending request"
    READING_RESPONSE = "reading response"
    PARSING_RESPONSE = "parsing response"


class RequestError(WallexError):
    """Raised when a call fails before a classified server response is available.

    The server state is unknown: the request may never have left the process,
    or the exchange answered with a success status and a payload that does not
    match the expected shape.
    """

    def __init__(
        self,
        message: str,
        *,
        stage: RequestStage,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.stage = stage


class ApiError(WallexError):
    """Raised when the exchange answers with a non-2xx status.

    Wraps the NormalizedError built from the response body.
    """

    def __init__(self, error: NormalizedError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def success(self) -> bool:
        return self.error.success

    @property
    def code(self) -> int | None:
        return self.error.code

    @property
    def result(self) -> bytes | None:
        return self.error.result

    @property
    def fields(self) -> Mapping[str, tuple[str, ...]]:
        return self.error.fields
