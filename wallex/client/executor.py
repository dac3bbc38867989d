"""Single request/response cycle against the Wallex REST API."""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, ClassVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from wallex.client.error_normalizer import normalize_error
from wallex.client.exceptions import (
    ApiError,
    ConfigurationError,
    RequestError,
    RequestStage,
)
from wallex.client.query import QueryParams, to_json_body, to_query_params
from wallex.logging.logger import Log

Payload = BaseModel | Mapping[str, Any]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class RequestExecutor:
    """Sends exactly one request and classifies the outcome.

    Outcomes:
        - success: the decoded body (or None when no result type is given)
        - ApiError: the exchange answered with a non-2xx status
        - RequestError: no classified response could be obtained
        - ConfigurationError: a credential is required but not configured
    """

    QUERY_METHODS: ClassVar[frozenset[str]] = frozenset({"GET", "DELETE"})
    API_KEY_HEADER: ClassVar[str] = "X-API-Key"

    def __init__(self, *, http_client: httpx.Client, api_key: str = "") -> None:
        self._http = http_client
        self._api_key = api_key

    def execute(
        self,
        method: str,
        url: str,
        *,
        auth: bool = False,
        payload: Payload | None = None,
        result_type: Any = None,
    ) -> Any:
        """Perform the request and return the decoded success payload.

        GET and DELETE payloads become query parameters; any other method
        sends the payload as a JSON body.

        Raises:
            ConfigurationError: ``auth`` is set and the API key is empty.
            RequestError: on encoding, transport, read or decode failure.
            ApiError: on a non-2xx response.
        """
        method = method.upper()
        if auth:
            self._assert_auth()

        params: QueryParams | None = None
        content: bytes | None = None
        if payload is not None:
            if method in self.QUERY_METHODS:
                params = self._encode_params(payload)
            else:
                content = self._encode_body(payload)

        request = self._build_request(method, url, params=params, content=content, auth=auth)
        Log.debug(f"Wallex request: {method} {request.url}")

        status_code, body = self._send(request)
        if not 200 <= status_code < 300:
            error = normalize_error(status_code, body)
            Log.warning(f"Wallex API error on {method} {url}: {error.message} (status {status_code})")
            raise ApiError(error)

        if result_type is None:
            return None
        return self._decode(body, result_type)

    def _assert_auth(self) -> None:
        if not self._api_key:
            raise ConfigurationError("API key is empty")

    def _encode_params(self, payload: Payload) -> QueryParams:
        try:
            return to_query_params(payload)
        except (TypeError, ValueError) as exc:
            raise self._failure(
                "failed to convert payload to URL params", RequestStage.PREPARING_PARAMETERS, exc
            ) from exc

    def _encode_body(self, payload: Payload) -> bytes:
        try:
            return to_json_body(payload)
        except (TypeError, ValueError) as exc:
            raise self._failure(
                "failed to marshal request body", RequestStage.PREPARING_BODY, exc
            ) from exc

    def _build_request(
        self,
        method: str,
        url: str,
        *,
        params: QueryParams | None,
        content: bytes | None,
        auth: bool,
    ) -> httpx.Request:
        headers = {"Content-Type": "application/json"}
        if auth:
            headers[self.API_KEY_HEADER] = self._api_key
        try:
            return self._http.build_request(
                method, url, params=params, content=content, headers=headers
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise self._failure(
                "failed to create request", RequestStage.CREATING_REQUEST, exc
            ) from exc

    def _send(self, request: httpx.Request) -> tuple[int, bytes]:
        try:
            response = self._http.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise self._failure(
                "failed to send request", RequestStage.SENDING_REQUEST, exc
            ) from exc

        try:
            body = response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise self._failure(
                "failed to read response body", RequestStage.READING_RESPONSE, exc
            ) from exc
        finally:
            response.close()
        return response.status_code, body

    def _decode(self, body: bytes, result_type: Any) -> Any:
        try:
            return _adapter(result_type).validate_json(body)
        except ValidationError as exc:
            raise self._failure(
                "failed to unmarshal response", RequestStage.PARSING_RESPONSE, exc
            ) from exc

    @staticmethod
    def _failure(message: str, stage: RequestStage, exc: BaseException) -> RequestError:
        Log.error(f"Wallex request failed while {stage}: {exc}")
        return RequestError(message, stage=stage, cause=exc)
