"""Public keys, as derived from private keys and carried in key documents."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Mapping

from .encoding import b64d, b64e, hex_upper
from .exceptions import InvalidKeyLength, UnknownScheme
from .serializers import PublicKeyDocument, dump_document, parse_document

ED25519_PUBLIC_KEY_SIZE = 32
PUBLIC_KEY_TYPE_ED25519 = "tendermint/PubKeyEd25519"

ADDRESS_SIZE = 20


@dataclass(frozen=True, order=True, slots=True)
class PublicKey:
    """Ed25519 verification key (32 raw bytes)."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != ED25519_PUBLIC_KEY_SIZE:
            raise InvalidKeyLength(
                f"Ed25519 public key must be {ED25519_PUBLIC_KEY_SIZE} bytes, got {len(self.data)}"
            )

    @classmethod
    def from_raw_ed25519(cls, data: bytes | bytearray | memoryview) -> PublicKey:
        return cls(bytes(data))

    def to_bytes(self) -> bytes:
        return self.data

    def to_hex(self) -> str:
        return hex_upper(self.data)

    def address(self) -> str:
        """Validator address: truncated SHA-256 of the key, upper-case hex."""
        return hex_upper(hashlib.sha256(self.data).digest()[:ADDRESS_SIZE])

    def to_document(self) -> PublicKeyDocument:
        return PublicKeyDocument(type=PUBLIC_KEY_TYPE_ED25519, value=b64e(self.data))

    def to_dict(self) -> dict[str, Any]:
        return self.to_document().model_dump()

    def to_json(self) -> str:
        return dump_document(self.to_document())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any] | PublicKeyDocument) -> PublicKey:
        document = parse_document(PublicKeyDocument, payload)
        if document.type != PUBLIC_KEY_TYPE_ED25519:
            raise UnknownScheme(f"Unsupported public key type: {document.type!r}")
        return cls.from_raw_ed25519(b64d(document.value))

    @classmethod
    def from_json(cls, payload: str | bytes) -> PublicKey:
        return cls.from_dict(parse_document(PublicKeyDocument, payload))

    def __str__(self) -> str:
        return self.to_hex()


__all__ = [
    "ADDRESS_SIZE",
    "ED25519_PUBLIC_KEY_SIZE",
    "PUBLIC_KEY_TYPE_ED25519",
    "PublicKey",
]
