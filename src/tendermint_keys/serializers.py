"""Pydantic models for the JSON wire documents and their shared parsing rules."""
from __future__ import annotations

import json
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError

from .exceptions import MalformedCount, MalformedDocument

U64_MAX = 2**64 - 1

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class TaggedDocument(BaseModel):
    """``{"type": <scheme tag>, "value": <encoded payload>}``"""

    type: StrictStr
    value: StrictStr

    model_config = ConfigDict(extra="forbid", frozen=True)


class PrivateKeyDocument(TaggedDocument):
    def __repr__(self) -> str:
        return f"PrivateKeyDocument(type={self.type!r}, value=<redacted>)"

    __str__ = __repr__


class PublicKeyDocument(TaggedDocument):
    pass


class PartsHeaderDocument(BaseModel):
    total: StrictStr
    hash: StrictStr

    model_config = ConfigDict(extra="forbid", frozen=True)


class PrivValidatorKeyDocument(BaseModel):
    address: StrictStr
    pub_key: PublicKeyDocument
    priv_key: PrivateKeyDocument

    model_config = ConfigDict(extra="forbid", frozen=True)


def parse_document(
    model: type[DocumentT], payload: Mapping[str, Any] | str | bytes
) -> DocumentT:
    """Validate ``payload`` (a mapping or JSON text) against ``model``."""
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedDocument(f"{model.__name__} JSON is invalid") from exc
    if isinstance(payload, model):
        return payload
    if not isinstance(payload, Mapping):
        raise MalformedDocument(
            f"{model.__name__} must be a JSON object, got {type(payload).__name__}"
        )
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        # ValidationError renders input values, which may hold key material
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise MalformedDocument(
            f"{model.__name__} validation failed for: {', '.join(fields)}"
        ) from None


def dump_document(document: BaseModel) -> str:
    return json.dumps(document.model_dump(mode="json"), separators=(",", ":"))


def u64_to_str(value: int) -> str:
    return str(check_u64(value))


def u64_from_str(value: str) -> int:
    """Parse a decimal string into an unsigned 64-bit integer."""
    if not value or not value.isascii() or not value.isdigit():
        raise MalformedCount(f"Count is not a decimal integer: {value!r}")
    return check_u64(int(value))


def check_u64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedCount(f"Count must be an integer, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise MalformedCount(f"Count {value} does not fit in an unsigned 64-bit integer")
    return value


__all__ = [
    "PartsHeaderDocument",
    "PrivValidatorKeyDocument",
    "PrivateKeyDocument",
    "PublicKeyDocument",
    "TaggedDocument",
    "U64_MAX",
    "check_u64",
    "dump_document",
    "parse_document",
    "u64_from_str",
    "u64_to_str",
]
