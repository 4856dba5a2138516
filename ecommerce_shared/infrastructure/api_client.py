"""API Client — typed async CRUD client over the backend REST API.

Invariants:
    - get/post/put/delete NEVER raise (asyncio.CancelledError aside): every outcome is
      a Result envelope: Success(data) or Failure(error: ApiError)
    - Target URL is base_url + path verbatim (no slash normalization)
    - Default Content-Type: application/json; caller headers win on key collision
      (case-insensitive); caller header keys outside ALLOWED_HEADERS are rejected
    - body=None sends no body; any other body is sent as JSON
    - Non-2xx, transport failures, and unparseable 2xx bodies are all Failures
    - 2xx with an empty body (e.g. 204) is Success(data=None)
    - Bodies are strict JSON both ways: NaN and Infinity are rejected
    - No status code, headers, or raw response leak to the caller

Design Decisions:
    - One httpx.AsyncClient per call: no pool, session, or handle outlives a request,
      so concurrent calls on one ApiClient share no mutable state
    - No retries, no explicit timeout (httpx defaults apply): a thin normalization
      boundary, not a resilience layer
    - Typed ClientError subclasses raised internally, converted once at the boundary
    - Non-2xx JSON bodies are mined for {message, code, field}; otherwise the message
      is synthesized from the status code
"""

import json
import logging
import time
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, TypeVar, get_origin

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ecommerce_shared.config import Settings
from ecommerce_shared.core.domain_types import HttpMethod
from ecommerce_shared.core.errors import (
    ClientError,
    DeserializationFailure,
    ErrorContext,
    ErrorSeverity,
    HttpStatusFailure,
    InternalClientError,
    InvalidRequestError,
    TransportFailure,
)
from ecommerce_shared.core.result import Failure, Success

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

# Lower-cased header names a caller may set per request.
ALLOWED_HEADERS = frozenset({
    "accept",
    "accept-language",
    "authorization",
    "content-type",
    "if-match",
    "if-none-match",
    "x-api-key",
    "x-request-id",
})


class ApiClient:
    """Bound client: four verb-scoped operations against one base URL."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        # Test seam: httpx.MockTransport in tests, None (real network) otherwise.
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiClient":
        return cls(settings.api_base_url, transport=transport)

    async def get(
        self,
        path: str,
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Success[T] | Failure:
        return await self.request(
            HttpMethod.GET, path, response_type=response_type, headers=headers,
        )

    async def post(
        self,
        path: str,
        body: object | None = None,
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Success[T] | Failure:
        return await self.request(
            HttpMethod.POST, path, body=body,
            response_type=response_type, headers=headers,
        )

    async def put(
        self,
        path: str,
        body: object | None = None,
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Success[T] | Failure:
        return await self.request(
            HttpMethod.PUT, path, body=body,
            response_type=response_type, headers=headers,
        )

    async def delete(
        self,
        path: str,
        response_type: type[T] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> Success[T] | Failure:
        return await self.request(
            HttpMethod.DELETE, path, response_type=response_type, headers=headers,
        )

    async def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: object | None = None,
        response_type: type[T] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Success[T] | Failure:
        """Perform one round-trip and normalize the outcome into a Result."""
        context = ErrorContext(method=method.value, url=f"{self.base_url}{path}")
        started = time.perf_counter()
        try:
            data = await self._send(method, context, body, response_type, headers)
        except ClientError as e:
            return self._failure(e, started)
        except Exception as e:
            logger.error(
                f"Unexpected error during {method.value} {context.url}: {e}",
                exc_info=True,
                extra=context.to_log_extra(),
            )
            return self._failure(
                InternalClientError(str(e) or type(e).__name__, context), started,
            )
        logger.info(
            "API request succeeded",
            extra={**context.to_log_extra(), "duration_ms": _elapsed_ms(started)},
        )
        return Success(data=data)

    async def _send(
        self,
        method: HttpMethod,
        context: ErrorContext,
        body: object | None,
        response_type: type[T] | None,
        headers: Mapping[str, str] | None,
    ) -> Any:
        request_headers = _merge_headers(headers, context)
        content = _encode_body(body, context)
        logger.debug(
            f"Dispatching {method.value} {context.url}",
            extra=context.to_log_extra(),
        )
        try:
            async with httpx.AsyncClient(
                transport=self._transport, follow_redirects=True,
            ) as client:
                response = await client.request(
                    method.value, context.url,
                    headers=request_headers, content=content,
                )
        except httpx.TimeoutException as e:
            raise TransportFailure(
                f"Request timed out: {str(e) or type(e).__name__}",
                timed_out=True, context=context,
            ) from e
        except (httpx.TransportError, httpx.InvalidURL) as e:
            raise TransportFailure(
                f"Connection failed: {str(e) or type(e).__name__}", context=context,
            ) from e

        context.status_code = response.status_code
        if not response.is_success:
            raise _status_failure(response, context)
        return _decode_body(response, response_type, context)

    def _failure(self, e: ClientError, started: float) -> Failure:
        log = logger.error if e.severity == ErrorSeverity.ERROR else logger.warning
        log(
            f"API request failed: {e.message}",
            extra={
                **e.context.to_log_extra(),
                "error_code": e.code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return Failure(error=e.to_api_error())


def create_api_client(
    base_url: str, *, transport: httpx.AsyncBaseTransport | None = None,
) -> ApiClient:
    """Bind a client to *base_url*. No I/O and no URL validation happen here."""
    return ApiClient(base_url, transport=transport)


# ─── Request helpers ─────────────────────────────────────────────

def _merge_headers(
    headers: Mapping[str, str] | None, context: ErrorContext,
) -> dict[str, str]:
    """Defaults overlaid with caller headers; unknown keys or unsendable values rejected."""
    merged = dict(DEFAULT_HEADERS)
    if headers is None:
        return merged
    if not isinstance(headers, Mapping):
        raise InvalidRequestError(
            "Headers must be a mapping of header name to value", "headers", context,
        )
    for name, value in headers.items():
        if not isinstance(name, str) or name.lower() not in ALLOWED_HEADERS:
            raise InvalidRequestError(
                f"Header not allowed: {name!r}", "headers", context,
            )
        if not isinstance(value, str):
            raise InvalidRequestError(
                f"Header {name!r} must be a string, got {type(value).__name__}",
                "headers", context,
            )
        if not value.isascii() or "\r" in value or "\n" in value:
            raise InvalidRequestError(
                f"Header {name!r} must be ASCII on a single line", "headers", context,
            )
        for existing in [k for k in merged if k.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def _encode_body(body: object | None, context: ErrorContext) -> bytes | None:
    if body is None:
        return None
    try:
        payload = to_jsonable_python(body, by_alias=True)
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise InvalidRequestError(
            f"Request body is not JSON-serializable: {e}", "body", context,
        ) from e


# ─── Response helpers ────────────────────────────────────────────

def _status_failure(response: httpx.Response, context: ErrorContext) -> HttpStatusFailure:
    detail = _extract_error_detail(response)
    return HttpStatusFailure(
        response.status_code,
        message=detail.get("message"),
        code=detail.get("code"),
        field=detail.get("field"),
        context=context,
    )


def _extract_error_detail(response: httpx.Response) -> dict[str, str]:
    """Pull message/code/field from {..}, {"error": {..}} or {"error": "text"} bodies.

    Top-level fields are read first; a nested "error" object or string overrides them.
    """
    try:
        payload = response.json(parse_constant=_reject_constant)
    except ValueError:
        return {}
    if not isinstance(payload, dict):
        return {}
    detail = _string_fields(payload)
    nested = payload.get("error")
    if isinstance(nested, dict):
        detail.update(_string_fields(nested))
    elif isinstance(nested, str) and nested:
        detail["message"] = nested
    return detail


def _string_fields(payload: dict) -> dict[str, str]:
    return {
        key: payload[key]
        for key in ("message", "code", "field")
        if isinstance(payload.get(key), str) and payload[key]
    }


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


def _decode_body(
    response: httpx.Response, response_type: type[T] | None, context: ErrorContext,
) -> Any:
    if not response.content:
        return None
    try:
        payload = response.json(parse_constant=_reject_constant)
    except ValueError as e:
        raise DeserializationFailure(
            f"Failed to parse response body as JSON: {e}", context,
        ) from e
    if response_type is None:
        return payload
    try:
        return _adapter(response_type).validate_python(payload)
    except ValidationError as e:
        raise DeserializationFailure(
            f"Response body does not match {_type_name(response_type)}: "
            f"{e.error_count()} validation error(s)",
            context,
        ) from e


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _type_name(tp: Any) -> str:
    if get_origin(tp) is not None:
        return repr(tp)
    return getattr(tp, "__name__", repr(tp))


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
