"""Private keys as parsed from node configuration.

The wire form is a tagged object::

    {"type": "tendermint/PrivKeyEd25519", "value": "<base64 of 64 bytes>"}

:class:`KeyScheme` is the closed set of supported tags. Every dispatch over it
is a ``match`` ending in ``assert_never`` so a new scheme cannot be added
without handling it everywhere.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, assert_never

import structlog

from .crypto.ed25519 import Ed25519Keypair
from .crypto.signing import Ed25519Signer
from .exceptions import KeyErased, TendermintKeysError, UnknownScheme
from .public_key import PublicKey
from .serializers import PrivateKeyDocument, dump_document, parse_document

log = structlog.get_logger(__name__)


class KeyScheme(str, Enum):
    ED25519 = "tendermint/PrivKeyEd25519"


class PrivateKey:
    """Exactly one keypair of exactly one scheme, exclusively owned."""

    __slots__ = ("_scheme", "_keypair")

    def __init__(self, scheme: KeyScheme, keypair: Ed25519Keypair) -> None:
        try:
            scheme = KeyScheme(scheme)
        except ValueError:
            raise UnknownScheme(f"Unsupported private key type: {scheme!r}") from None
        match scheme:
            case KeyScheme.ED25519:
                if not isinstance(keypair, Ed25519Keypair):
                    raise TypeError(f"{scheme.value} requires an Ed25519Keypair")
            case _:
                assert_never(scheme)
        self._scheme = scheme
        self._keypair = keypair

    @classmethod
    def ed25519(cls, keypair: Ed25519Keypair) -> PrivateKey:
        return cls(KeyScheme.ED25519, keypair)

    @property
    def scheme(self) -> KeyScheme:
        return self._scheme

    def public_key(self) -> PublicKey:
        self._check_live()
        match self._scheme:
            case KeyScheme.ED25519:
                return self._keypair.public_key()
            case _:
                assert_never(self._scheme)

    def keypair(self, scheme: KeyScheme) -> Ed25519Keypair | None:
        """Borrow the keypair if it belongs to ``scheme``; never a copy."""
        self._check_live()
        try:
            scheme = KeyScheme(scheme)
        except ValueError:
            return None
        return self._keypair if scheme is self._scheme else None

    def ed25519_keypair(self) -> Ed25519Keypair | None:
        return self.keypair(KeyScheme.ED25519)

    def signer(self) -> Ed25519Signer:
        self._check_live()
        match self._scheme:
            case KeyScheme.ED25519:
                with self._keypair.to_seed() as seed:
                    return Ed25519Signer.from_seed(seed)
            case _:
                assert_never(self._scheme)

    # Serialization
    def to_document(self) -> PrivateKeyDocument:
        self._check_live()
        match self._scheme:
            case KeyScheme.ED25519:
                value = self._keypair.to_base64()
            case _:
                assert_never(self._scheme)
        return PrivateKeyDocument(type=self._scheme.value, value=value)

    def to_dict(self) -> dict[str, Any]:
        return self.to_document().model_dump()

    def to_json(self) -> str:
        return dump_document(self.to_document())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any] | PrivateKeyDocument) -> PrivateKey:
        document = parse_document(PrivateKeyDocument, payload)
        try:
            scheme = KeyScheme(document.type)
        except ValueError:
            log.warning("private key rejected", reason="unknown_scheme", key_type=document.type)
            raise UnknownScheme(f"Unsupported private key type: {document.type!r}") from None
        try:
            match scheme:
                case KeyScheme.ED25519:
                    key = cls(scheme, Ed25519Keypair.from_base64(document.value))
                case _:
                    assert_never(scheme)
        except TendermintKeysError as exc:
            log.warning("private key rejected", reason=type(exc).__name__, key_type=scheme.value)
            raise
        log.debug("private key decoded", key_type=scheme.value, public_key=key.public_key().to_hex())
        return key

    @classmethod
    def from_json(cls, payload: str | bytes) -> PrivateKey:
        return cls.from_dict(parse_document(PrivateKeyDocument, payload))

    # Disposal
    @property
    def erased(self) -> bool:
        return self._keypair.erased

    def zeroize(self) -> None:
        self._keypair.zeroize()

    def _check_live(self) -> None:
        if self._keypair.erased:
            raise KeyErased(f"{self._scheme.value} key has been zeroized")

    def __enter__(self) -> PrivateKey:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self._scheme is other._scheme and self._keypair == other._keypair

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> PrivateKey:
        raise TypeError("PrivateKey cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> PrivateKey:
        raise TypeError("PrivateKey cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("PrivateKey cannot be pickled")

    def __repr__(self) -> str:
        return f"PrivateKey(scheme={self._scheme.value!r}, keypair={self._keypair!r})"


__all__ = ["KeyScheme", "PrivateKey"]
