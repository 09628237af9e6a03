# Content hashes used to identify block parts.
from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .encoding import from_hex, hex_upper
from .exceptions import InvalidLength

SHA256_HASH_SIZE = 32


@dataclass(frozen=True, order=True, slots=True)
class Hash:
    """SHA-256 digest, or the empty hash when no content exists.

    Serialized as upper-case hex; the empty hash is the empty string.
    """

    digest: bytes = b""

    def __post_init__(self) -> None:
        if isinstance(self.digest, (bytearray, memoryview)):
            object.__setattr__(self, "digest", bytes(self.digest))
        elif not isinstance(self.digest, bytes):
            raise TypeError(f"Hash digest must be bytes, got {type(self.digest).__name__}")
        if len(self.digest) not in (0, SHA256_HASH_SIZE):
            raise InvalidLength(
                f"SHA-256 hash must be {SHA256_HASH_SIZE} bytes, got {len(self.digest)}"
            )

    @classmethod
    def sha256(cls, data: bytes) -> Hash:
        return cls(hashlib.sha256(data).digest())

    @classmethod
    def from_hex(cls, value: str) -> Hash:
        return cls(from_hex(value))

    @property
    def is_empty(self) -> bool:
        return not self.digest

    def to_hex(self) -> str:
        return hex_upper(self.digest)

    def __str__(self) -> str:
        return self.to_hex()


__all__ = ["Hash", "SHA256_HASH_SIZE"]
