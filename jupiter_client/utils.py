import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from .constants import ERROR_SNIPPET_LENGTH
from .models import DecodeError, EncodingError, JupiterOperation

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


def is_empty(value: Any) -> bool:
    """True for None and for the zero value of scalars and sequences."""
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float, list, tuple, dict)):
        return not value
    return False


def _to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_to_query_value(item) for item in value)
    return str(value)


def _dump(params: BaseModel, operation: JupiterOperation | None) -> dict[str, Any]:
    if not isinstance(params, BaseModel):
        raise EncodingError(
            f"Unsupported parameter type: {type(params).__name__}",
            operation=operation,
        )
    try:
        return params.model_dump(by_alias=True, mode="json")
    except PydanticSerializationError as e:
        raise EncodingError(
            f"Failed to serialize {type(params).__name__}: {e}",
            operation=operation,
        ) from e


def _iter_fields(params: BaseModel, data: dict[str, Any]):
    """Yield (key, value, required) in field declaration order.

    `data` is the by-alias dump of `params`. Excluded fields are skipped.
    """
    for name, field in type(params).model_fields.items():
        key = field.alias or name
        if key not in data:
            continue
        yield key, data[key], field.is_required()


def to_query_params(
    params: BaseModel,
    operation: JupiterOperation | None = None,
) -> list[tuple[str, str]]:
    """Encode a request model as ordered query parameters.

    Required fields are always emitted. Optional fields are skipped while
    they hold their zero value. Sequences are joined with commas.

    Raises:
        EncodingError: If the value is not a model or cannot be serialized
    """
    data = _dump(params, operation)

    query = []
    for key, value, required in _iter_fields(params, data):
        if not required and is_empty(value):
            continue
        if isinstance(value, dict):
            raise EncodingError(
                f"Field {key} cannot be encoded as a query parameter",
                operation=operation,
            )
        query.append((key, _to_query_value(value)))
    return query


def to_json_body(
    params: BaseModel,
    operation: JupiterOperation | None = None,
) -> dict[str, Any]:
    """Encode a request model as a JSON object.

    Optional top-level fields are dropped when None or an empty string.
    Explicit False and 0 are kept. Nested values are sent untouched.

    Raises:
        EncodingError: If the value is not a model or cannot be serialized
    """
    data = _dump(params, operation)

    body = {}
    for key, value, required in _iter_fields(params, data):
        if not required and (value is None or value == ""):
            continue
        body[key] = value
    return body


def snippet(text: str, length: int = ERROR_SNIPPET_LENGTH) -> str:
    if len(text) <= length:
        return text
    return text[:length] + "..."


def decode_response(
    response: httpx.Response,
    model: type[ResponseModel],
    operation: JupiterOperation | None = None,
) -> ResponseModel:
    """Read the response body and validate it against `model`.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the model
    """
    content = response.read()
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        body_snippet = snippet(content.decode("utf-8", errors="replace"))
        logger.warning(
            f"Failed to decode {model.__name__} from {response.url}: {body_snippet}"
        )
        raise DecodeError(
            f"Failed to decode {model.__name__}: {e.error_count()} validation error(s)",
            snippet=body_snippet,
            operation=operation,
        ) from e
