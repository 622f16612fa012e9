"""JSON codec backed by pydantic ``TypeAdapter``.

Any shape pydantic can validate is accepted as a decode target: models,
dataclasses, ``list[...]``/``dict[...]`` containers and primitives.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from pixsearch.adapters.api_errors import CodecError

T = TypeVar("T")


class PydanticJsonCodec:
    """Encode values to JSON bytes and decode JSON bytes into typed shapes."""

    def __init__(self, *, by_alias: bool = True) -> None:
        self.by_alias = by_alias

    def decode(self, data: bytes, target_shape: Type[T]) -> T:
        try:
            adapter = TypeAdapter(target_shape)
        except PydanticSchemaGenerationError as exc:
            raise CodecError(f"Unsupported response shape {target_shape!r}: {exc}") from exc
        try:
            return adapter.validate_json(data or b"")
        except ValidationError as exc:
            raise CodecError(_describe_validation_error(exc)) from exc

    def encode(self, value: Any) -> bytes:
        try:
            adapter = TypeAdapter(type(value))
            return adapter.dump_json(value, by_alias=self.by_alias)
        except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
            raise CodecError(f"Cannot encode {type(value).__name__}: {exc}") from exc


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:3]:
        loc = ".".join(str(item) for item in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    suffix = "" if exc.error_count() <= 3 else f" (+{exc.error_count() - 3} more)"
    return f"Failed to decode {exc.title}: " + "; ".join(parts) + suffix


__all__ = ["PydanticJsonCodec"]
