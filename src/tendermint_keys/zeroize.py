"""Scrubbing of secret byte buffers.

Python offers no destructor guarantee in general, so secret material is held
in a :class:`Zeroizing` container that wipes itself on every exit path:

* explicitly through :meth:`Zeroizing.zeroize`,
* on ``with`` block exit, including exits caused by an exception,
* from ``__del__`` once the last reference is dropped (immediate on CPython).

Immutable ``bytes`` temporaries produced by codecs cannot be overwritten
through the public API. :func:`scrub_bytes` wipes them in place on CPython and
is a no-op elsewhere.
"""
from __future__ import annotations

import ctypes
import secrets
import sys
from typing import Any

from .exceptions import KeyErased

_CPYTHON = sys.implementation.name == "cpython"


def zeroize(buffer: bytearray | memoryview) -> None:
    """Overwrite a writable buffer with zero bytes without resizing it."""
    view = memoryview(buffer).cast("B")
    try:
        view[:] = bytes(view.nbytes)
    finally:
        view.release()


def scrub_bytes(data: bytes) -> None:
    """Best-effort in-place wipe of an immutable ``bytes`` object.

    Only call this on objects the caller created and exclusively owns. Objects of
    length 0 or 1 are shared interpreter singletons and are left untouched.
    """
    if not _CPYTHON or type(data) is not bytes or len(data) <= 1:
        return
    # ob_sval sits at the end of the object header, followed by a NUL terminator
    offset = sys.getsizeof(data) - len(data) - 1
    ctypes.memset(id(data) + offset, 0, len(data))


class Zeroizing:
    """Exclusive owner of a secret byte buffer that is wiped on disposal."""

    __slots__ = ("_buf", "_erased")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if isinstance(data, int):
            raise TypeError("Zeroizing expects a bytes-like object, not a size")
        self._erased = False
        self._buf = bytearray(data)

    @classmethod
    def take(cls, data: bytearray) -> Zeroizing:
        """Copy ``data`` into a new container and wipe the source buffer."""
        try:
            return cls(data)
        finally:
            zeroize(data)

    def __len__(self) -> int:
        return len(self._buf)

    @property
    def erased(self) -> bool:
        return self._erased

    def view(self) -> memoryview:
        """Read-only view over the secret; never outlives a ``zeroize()``."""
        if self._erased:
            raise KeyErased("Secret buffer has already been zeroized")
        return memoryview(self._buf).toreadonly()

    def zeroize(self) -> None:
        buf = getattr(self, "_buf", None)
        if buf is not None:
            zeroize(buf)
        self._erased = True

    def __enter__(self) -> Zeroizing:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.zeroize()

    def __del__(self) -> None:
        self.zeroize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Zeroizing):
            return NotImplemented
        return secrets.compare_digest(self._buf, other._buf)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "erased" if self._erased else f"{len(self._buf)} bytes"
        return f"Zeroizing(<redacted, {state}>)"

    def __copy__(self) -> Zeroizing:
        raise TypeError("Secret buffers cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Zeroizing:
        raise TypeError("Secret buffers cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("Secret buffers cannot be pickled")


__all__ = ["Zeroizing", "scrub_bytes", "zeroize"]
