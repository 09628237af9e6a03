"""Validator key documents (``priv_validator_key.json`` contents)."""
from __future__ import annotations

from typing import Any, Mapping

import structlog

from .exceptions import KeyMismatch
from .private_key import PrivateKey
from .public_key import PublicKey
from .serializers import PrivValidatorKeyDocument, dump_document, parse_document

log = structlog.get_logger(__name__)


class PrivValidatorKey:
    """A node's signing key together with its derived public key and address.

    Reading and writing the file itself is left to the caller; this type only
    converts between the JSON document and a checked in-memory form.
    """

    __slots__ = ("priv_key",)

    def __init__(self, priv_key: PrivateKey) -> None:
        self.priv_key = priv_key

    @property
    def pub_key(self) -> PublicKey:
        return self.priv_key.public_key()

    @property
    def address(self) -> str:
        return self.pub_key.address()

    def to_document(self) -> PrivValidatorKeyDocument:
        pub_key = self.pub_key
        return PrivValidatorKeyDocument(
            address=pub_key.address(),
            pub_key=pub_key.to_document(),
            priv_key=self.priv_key.to_document(),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.to_document().model_dump()

    def to_json(self) -> str:
        return dump_document(self.to_document())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any] | PrivValidatorKeyDocument) -> PrivValidatorKey:
        document = parse_document(PrivValidatorKeyDocument, payload)
        priv_key = PrivateKey.from_dict(document.priv_key)
        try:
            declared = PublicKey.from_dict(document.pub_key)
            derived = priv_key.public_key()
            if declared != derived:
                raise KeyMismatch("pub_key does not match the key derived from priv_key")
            if document.address.upper() != derived.address():
                raise KeyMismatch(
                    f"address {document.address!r} does not match derived {derived.address()!r}"
                )
        except Exception:
            priv_key.zeroize()
            raise
        if not priv_key.ed25519_keypair().is_consistent():
            log.warning("validator key public half does not match seed", address=derived.address())
        return cls(priv_key)

    @classmethod
    def from_json(cls, payload: str | bytes) -> PrivValidatorKey:
        return cls.from_dict(parse_document(PrivValidatorKeyDocument, payload))

    def zeroize(self) -> None:
        self.priv_key.zeroize()

    def __enter__(self) -> PrivValidatorKey:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.zeroize()

    def __repr__(self) -> str:
        if self.priv_key.erased:
            return "PrivValidatorKey(<erased>)"
        return f"PrivValidatorKey(address={self.address!r})"


__all__ = ["PrivValidatorKey"]
