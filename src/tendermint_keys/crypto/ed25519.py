"""Ed25519 keypair material.

A keypair is 64 bytes in the expanded layout used by Tendermint key files: the
32-byte seed followed by the 32-byte public key. The only way to build an
:class:`Ed25519Keypair` is through a constructor that checks that length, so
every instance in existence holds exactly 64 bytes until it is zeroized.
"""
from __future__ import annotations

from typing import Any

import structlog
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..encoding import b64d_secret, b64e_secret
from ..exceptions import InvalidKeyLength
from ..public_key import ED25519_PUBLIC_KEY_SIZE, PublicKey
from ..zeroize import Zeroizing, scrub_bytes

ED25519_KEYPAIR_SIZE = 64
ED25519_SEED_SIZE = 32

log = structlog.get_logger(__name__)


class _SecretHolder:
    """Shared disposal behaviour for types wrapping a :class:`Zeroizing` buffer."""

    __slots__ = ("_secret",)

    _secret: Zeroizing

    @property
    def erased(self) -> bool:
        return self._secret.erased

    def zeroize(self) -> None:
        self._secret.zeroize()

    def __enter__(self) -> Any:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._secret == other._secret  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __repr__(self) -> str:
        state = "erased" if self.erased else "redacted"
        return f"{type(self).__name__}(<{state}>)"


class Seed(_SecretHolder):
    """The 32-byte Ed25519 private seed consumed by signers."""

    __slots__ = ()

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if len(data) != ED25519_SEED_SIZE:
            raise InvalidKeyLength(
                f"Ed25519 seed must be {ED25519_SEED_SIZE} bytes, got {len(data)}"
            )
        self._secret = Zeroizing(data)

    def signing_key(self) -> Ed25519PrivateKey:
        raw = bytes(self._secret.view())
        try:
            return Ed25519PrivateKey.from_private_bytes(raw)
        finally:
            scrub_bytes(raw)

    def public_key(self) -> PublicKey:
        public = self.signing_key().public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return PublicKey.from_raw_ed25519(public)


class Ed25519Keypair(_SecretHolder):
    """Validated holder of a 64-byte Ed25519 keypair."""

    __slots__ = ()

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if len(data) != ED25519_KEYPAIR_SIZE:
            raise InvalidKeyLength(
                f"Ed25519 keypair must be {ED25519_KEYPAIR_SIZE} bytes, got {len(data)}"
            )
        self._secret = Zeroizing(data)

    @classmethod
    def from_base64(cls, value: str) -> Ed25519Keypair:
        with b64d_secret(value) as decoded:
            if len(decoded) != ED25519_KEYPAIR_SIZE:
                log.warning(
                    "ed25519 keypair rejected",
                    reason="length",
                    expected=ED25519_KEYPAIR_SIZE,
                    actual=len(decoded),
                )
                raise InvalidKeyLength(
                    f"Ed25519 keypair must decode to {ED25519_KEYPAIR_SIZE} bytes, got {len(decoded)}"
                )
            return cls(decoded.view())

    def to_base64(self) -> str:
        return b64e_secret(self._secret.view())

    def public_key(self) -> PublicKey:
        """Public half of the keypair (the last 32 bytes)."""
        view = self._secret.view()
        # Length is fixed by __init__; a mismatch here is a bug in this module
        assert len(view) == ED25519_KEYPAIR_SIZE
        return PublicKey.from_raw_ed25519(view[ED25519_KEYPAIR_SIZE - ED25519_PUBLIC_KEY_SIZE:])

    def to_seed(self) -> Seed:
        """Seed half of the keypair (the first 32 bytes) in its own zeroizing buffer."""
        return Seed(self._secret.view()[:ED25519_SEED_SIZE])

    def is_consistent(self) -> bool:
        """Whether the stored public half is the one the seed actually produces."""
        with self.to_seed() as seed:
            return seed.public_key() == self.public_key()

    @classmethod
    def from_seed(cls, seed: Seed) -> Ed25519Keypair:
        # Preallocated so that filling it never reallocates and strands a copy
        buf = bytearray(ED25519_KEYPAIR_SIZE)
        buf[:ED25519_SEED_SIZE] = seed._secret.view()
        buf[ED25519_SEED_SIZE:] = seed.public_key().to_bytes()
        with Zeroizing.take(buf) as joined:
            return cls(joined.view())


__all__ = ["ED25519_KEYPAIR_SIZE", "ED25519_SEED_SIZE", "Ed25519Keypair", "Seed"]
