from __future__ import annotations

from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from tebex_headless.errors import HeadlessResponseError

M = TypeVar("M", bound=BaseModel)


def unwrap_data(raw: Any) -> Any:
    """Return the ``data`` field of a ``{"data": ...}`` envelope."""
    if not isinstance(raw, dict) or "data" not in raw:
        raise HeadlessResponseError("Response is missing the 'data' envelope.", payload=raw)
    return raw["data"]


def parse_model(model: Type[M], raw: Any) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise HeadlessResponseError(f"Unexpected {model.__name__} shape: {e}", payload=raw) from e


def parse_model_list(model: Type[M], raw: Any) -> List[M]:
    if not isinstance(raw, list):
        raise HeadlessResponseError(f"Expected a list of {model.__name__}.", payload=raw)
    return [parse_model(model, item) for item in raw]
