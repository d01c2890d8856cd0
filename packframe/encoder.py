"""Framing primitives: marker handling, byte escaping and checksummed frame objects."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field

__all__ = [
    "EncodeError",
    "EncodeObj",
    "crc32_checksum",
    "escaper",
    "escaper_reverse",
    "get_marker",
    "new_encode_obj",
    "update_marker",
]

HEADER_SIZE = 10
MAX_DATA_LENGTH = 0xFFFFFFFF

_marker = "@"


class EncodeError(ValueError):
    """Raised when a marker, header, version or frame is invalid."""


def crc32_checksum(data: bytes) -> int:
    """Return the IEEE CRC-32 of ``data`` as an unsigned 32-bit integer."""
    return zlib.crc32(data) & 0xFFFFFFFF


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def update_marker(new_marker: str) -> None:
    """Set the frame marker; it must be one printable ASCII character."""
    global _marker
    raw = _as_bytes(new_marker)
    if len(raw) != 1:
        raise EncodeError("marker must be exactly 1 character")
    if not 32 <= raw[0] <= 126:
        raise EncodeError("marker must be a valid ASCII character (32-126)")
    _marker = raw.decode("ascii")


def get_marker() -> str:
    """Return the current frame marker."""
    return _marker


def escaper(data: bytes, search: str | bytes, replace: str | bytes) -> bytes:
    """Replace every non-overlapping ``search`` in ``data`` with ``replace``.

    If either ``search`` or ``replace`` is empty, ``data`` is returned unchanged.
    """
    needle = _as_bytes(search)
    substitute = _as_bytes(replace)
    if not needle or not substitute:
        return bytes(data)
    return bytes(data).replace(needle, substitute)


def escaper_reverse(data: bytes, search: str | bytes, replace: str | bytes) -> bytes:
    """Undo :func:`escaper`: replace every ``replace`` in ``data`` with ``search``."""
    needle = _as_bytes(search)
    substitute = _as_bytes(replace)
    if not needle or not substitute:
        return bytes(data)
    return bytes(data).replace(substitute, needle)


@dataclass
class EncodeObj:
    """A frame: marker, 10-byte header, version, CRC-32, length and payload.

    Wire layout: MARK(1) HEADER(10) VERSION(1) CRC32(4) LENGTH(8) DATA HEADER(10) MARK(1).
    """

    mark: str
    header: str
    version: int
    crc32: int = 0
    length: int = 0
    data: bytes = field(default=b"")

    def validate(self) -> None:
        """Check the frame's fields against each other; raise EncodeError if not consistent."""
        if self.mark != _marker:
            raise EncodeError(f"mark must be {_marker!r}")
        if len(_as_bytes(self.header)) != HEADER_SIZE:
            raise EncodeError("header must be exactly 10 characters")
        if not 1 <= self.version <= 255:
            raise EncodeError("version must be between 1 and 255")
        if crc32_checksum(self.data) != self.crc32:
            raise EncodeError("CRC32 checksum does not match")
        if len(self.data) != self.length:
            raise EncodeError("data length does not match specified length")


def new_encode_obj(header: str, version: int, data: bytes) -> EncodeObj:
    """Build a frame for ``data`` using the current marker and its checksum."""
    if len(_as_bytes(header)) != HEADER_SIZE:
        raise EncodeError("header must be exactly 10 characters")
    if not 0 <= version <= 255:
        raise EncodeError("version must fit in one byte (0-255)")
    payload = bytes(data)
    if len(payload) > MAX_DATA_LENGTH:
        raise EncodeError("data length must be between 0 and 4294967295")
    return EncodeObj(
        mark=_marker,
        header=header,
        version=version,
        crc32=crc32_checksum(payload),
        length=len(payload),
        data=payload,
    )