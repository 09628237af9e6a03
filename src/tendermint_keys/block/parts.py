"""Block parts"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..hash import Hash
from ..serializers import (
    PartsHeaderDocument,
    check_u64,
    dump_document,
    parse_document,
    u64_from_str,
    u64_to_str,
)


@dataclass(frozen=True, order=True, slots=True)
class PartsHeader:
    """Number of parts in a block and the hash of its part set.

    Ordered by ``(total, hash)``. ``total`` travels as a decimal string so that
    JSON consumers with 53-bit integers read it exactly.
    """

    total: int
    hash: Hash

    def __post_init__(self) -> None:
        check_u64(self.total)
        if not isinstance(self.hash, Hash):
            raise TypeError(f"hash must be a Hash, got {type(self.hash).__name__}")

    @classmethod
    def new(cls, total: int, hash: Hash) -> PartsHeader:
        return cls(total=total, hash=hash)

    def to_document(self) -> PartsHeaderDocument:
        return PartsHeaderDocument(total=u64_to_str(self.total), hash=self.hash.to_hex())

    def to_dict(self) -> dict[str, Any]:
        return self.to_document().model_dump()

    def to_json(self) -> str:
        return dump_document(self.to_document())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any] | PartsHeaderDocument) -> PartsHeader:
        document = parse_document(PartsHeaderDocument, payload)
        return cls(total=u64_from_str(document.total), hash=Hash.from_hex(document.hash))

    @classmethod
    def from_json(cls, payload: str | bytes) -> PartsHeader:
        return cls.from_dict(parse_document(PartsHeaderDocument, payload))


__all__ = ["PartsHeader"]
