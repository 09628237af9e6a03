from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from ..exceptions import SignatureError
from ..public_key import PublicKey
from .ed25519 import Seed


class Ed25519Signer:
    """Thin wrapper around Ed25519 that normalizes error handling"""

    def __init__(self, *, private_key: Ed25519PrivateKey | None = None, public_key: Ed25519PublicKey | None = None) -> None:
        if not private_key and not public_key:
            raise SignatureError("At least one of private_key or public_key is required")
        self._private_key = private_key
        self._public_key = public_key or private_key.public_key()  #* type: ignore[union-attr]

    @classmethod
    def from_seed(cls, seed: Seed) -> Ed25519Signer:
        return cls(private_key=seed.signing_key())

    @classmethod
    def from_public_key(cls, public_key: PublicKey) -> Ed25519Signer:
        return cls(public_key=Ed25519PublicKey.from_public_bytes(public_key.to_bytes()))

    @property
    def can_sign(self) -> bool:
        return self._private_key is not None

    def sign(self, *, message: bytes) -> bytes:
        if not self._private_key:
            raise SignatureError("Signing requested without private key material")
        return self._private_key.sign(message)

    def verify(self, *, message: bytes, signature: bytes) -> None:
        try:
            self._public_key.verify(signature, message)
        except InvalidSignature as exc:
            raise SignatureError("Signature verification failed") from exc


__all__ = ["Ed25519Signer"]
