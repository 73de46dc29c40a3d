"""
Response helpers: turn a raw HTTP response into a decoded payload
or a classified error.

Every operation of the client goes through ``decode_response``; the
``interpret_*`` helpers add the create/update/delete conventions of the
API on top of it:

    POST   -> {"id": N}
    PUT    -> {"updateCount": N}
    DELETE -> {"deleteCount": N}
    any non-200 -> {"errorMessage": "..."} or arbitrary text
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from .errors import APIError, DecodeError, NoRowsAffected
from .schema import CreateResult, DeleteResult, ErrorResponse, UpdateResult


T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def error_response(response: requests.Response) -> APIError:
    """
    Build the error for a non-200 response.
    Prefers the body's errorMessage, falls back to the status line.
    """
    try:
        message = ErrorResponse.model_validate_json(response.content).error_message
    except ValidationError:
        message = ""

    if not message:
        message = f"{response.status_code} {response.reason or ''}".strip()

    return APIError(message, status_code=response.status_code)


def decode_response(response: requests.Response, shape: Type[T]) -> T:
    """
    Decode a 200 response body into ``shape``.

    ``shape`` is anything pydantic can validate: a model class,
    ``SearchResponse[Product]``, ``List[ProductType]``...

    Raises:
        APIError: status code is not 200
        DecodeError: body does not match ``shape``
    """
    if response.status_code != 200:
        raise error_response(response)

    try:
        return _adapter(shape).validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"Unexpected response body for {getattr(shape, '__name__', shape)}: {e}"
        ) from e


def interpret_create(response: requests.Response) -> int:
    """Return the id of the created entity. Zero is returned as-is."""
    return decode_response(response, CreateResult).id


def interpret_update_count(response: requests.Response) -> int:
    return decode_response(response, UpdateResult).update_count


def interpret_update(response: requests.Response) -> None:
    """Succeeds only when exactly one entity was updated."""
    count = interpret_update_count(response)
    if count != 1:
        raise NoRowsAffected(f"Update affected {count} rows, expected 1", count=count)


def interpret_delete_count(response: requests.Response) -> int:
    """Return the number of deleted entities, which must be at least one."""
    count = decode_response(response, DeleteResult).delete_count
    if count == 0:
        raise NoRowsAffected("Nothing was deleted", count=0)
    return count


def interpret_delete(response: requests.Response) -> None:
    """Same check as interpret_delete_count, for call sites that drop the count."""
    interpret_delete_count(response)
