"""Fixed-width binary encoding for amounts.

Magnitudes are written as exactly BUFFER_SIZE bytes, big-endian and
unsigned, so that bytewise (lexicographic) order of two buffers equals the
numeric order of the magnitudes they encode. This makes the encoding usable
as a sortable database key; the layout must stay stable across versions.
"""

from __future__ import annotations

import structlog

from cryptounit.constants import BUFFER_MAX, BUFFER_SIZE
from cryptounit.errors import RangeError

__all__ = ["encode", "decode", "fits_buffer"]

logger = structlog.get_logger()


def fits_buffer(magnitude: int) -> bool:
    """Check if a magnitude can be encoded without raising."""
    return 0 <= magnitude <= BUFFER_MAX


def encode(magnitude: int) -> bytes:
    """Encode a magnitude as BUFFER_SIZE big-endian unsigned bytes.

    Raises:
        RangeError: If magnitude is negative or exceeds 2^64-1
    """
    if magnitude < 0:
        logger.debug("buffer_encode_rejected", reason="negative")
        raise RangeError("Negative magnitude cannot be encoded")
    if magnitude > BUFFER_MAX:
        logger.debug("buffer_encode_rejected", bits=magnitude.bit_length(), reason="overflow")
        raise RangeError(
            f"Magnitude exceeds {BUFFER_SIZE}-byte buffer ({magnitude.bit_length()} bits)"
        )
    return magnitude.to_bytes(BUFFER_SIZE, byteorder="big", signed=False)


def decode(buffer: bytes | bytearray | memoryview) -> int:
    """Decode BUFFER_SIZE big-endian unsigned bytes into a magnitude.

    Raises:
        TypeError: If buffer is not a bytes-like object
        RangeError: If buffer is not exactly BUFFER_SIZE bytes long
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise TypeError(f"Buffer must be bytes-like, got {type(buffer).__name__}")
    data = bytes(buffer)
    if len(data) != BUFFER_SIZE:
        logger.debug("buffer_decode_rejected", length=len(data))
        raise RangeError(f"Buffer must be exactly {BUFFER_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, byteorder="big", signed=False)
