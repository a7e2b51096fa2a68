"""Decodes raw MVG API response bodies into domain records."""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from mvg_api.domain.exceptions import DecodeError

T = TypeVar("T")

ROOT_PATH = "<root>"
FRAGMENT_LENGTH = 200


def _format_path(loc: tuple[int | str, ...]) -> str:
    """Format a pydantic error location such as ``(0, 'latitude')`` as ``0.latitude``."""
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def _fragment(body: bytes) -> str:
    return body[:FRAGMENT_LENGTH].decode("utf-8", errors="replace")


def decode(body: bytes, schema: TypeAdapter[T], url: str | None = None) -> T:
    """Decode a JSON body against ``schema``.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the schema.
            The error names the first offending path.
    """
    try:
        return schema.validate_json(body)
    except ValidationError as e:
        first: dict[str, Any] = e.errors()[0]
        if first["type"] == "json_invalid":
            path = ROOT_PATH
            message = f"Malformed JSON: {first['msg']}"
        else:
            path = _format_path(first["loc"])
            message = f"Unexpected payload at {path}: {first['msg']}"
        if url:
            message = f"{message} ({url})"
        raise DecodeError(message, url=url, path=path, fragment=_fragment(body)) from e
