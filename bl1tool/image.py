"""BL1 boot image layout: a 16-byte header followed by the payload.

The boot ROM copies at most 16 KiB from the boot medium into internal RAM
and checks the header before running it. The header holds four
little-endian 32-bit words:

    0x0  image size (header included, rounded up to whole 512-byte blocks)
    0x4  reserved, zero
    0x8  checksum: sum of the payload bytes, modulo 2**32
    0xC  reserved, zero
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

IMAGE_SIZE = 16 * 1024
HEADER_SIZE = 16
BLOCK_SIZE = 512
MAX_PAYLOAD = IMAGE_SIZE - HEADER_SIZE

_HEADER = struct.Struct("<IIII")


class ImageError(ValueError):
    """Raised when data is not a well-formed BL1 image."""


@dataclass(frozen=True)
class Bl1Header:
    """The size and checksum words of a BL1 header."""

    size: int
    checksum: int

    def pack(self) -> bytes:
        """Return the 16 header bytes."""
        return _HEADER.pack(self.size, 0, self.checksum, 0)

    @classmethod
    def unpack(cls, data: bytes) -> "Bl1Header":
        """Read a header from the first 16 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ImageError(
                f"header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        size, reserved1, value, reserved2 = _HEADER.unpack_from(data)
        if reserved1 or reserved2:
            raise ImageError("reserved header words must be zero")
        return cls(size=size, checksum=value)


def checksum(payload: bytes) -> int:
    """Sum of all bytes of ``payload``, wrapped to 32 bits."""
    return sum(payload) & 0xFFFFFFFF


def block_aligned_size(length: int) -> int:
    """Round ``length`` up to a whole number of 512-byte blocks."""
    if length < 0:
        raise ValueError("length must not be negative")
    return -(-length // BLOCK_SIZE) * BLOCK_SIZE


def build_image(source: bytes) -> bytes:
    """Build a BL1 image from a raw binary.

    Only the first ``MAX_PAYLOAD`` bytes of ``source`` are used; the rest is
    dropped. The image is padded with zeros to a block boundary.
    """
    payload = bytes(source[:MAX_PAYLOAD])
    size = block_aligned_size(len(payload) + HEADER_SIZE)
    header = Bl1Header(size=size, checksum=checksum(payload))
    body = header.pack() + payload
    return body.ljust(size, b"\x00")


def verify_image(image: bytes) -> Bl1Header:
    """Check a BL1 image the way the boot ROM does and return its header."""
    header = Bl1Header.unpack(image)
    if header.size < HEADER_SIZE or header.size > IMAGE_SIZE:
        raise ImageError(f"image size {header.size} out of range")
    if header.size % BLOCK_SIZE:
        raise ImageError(f"image size {header.size} is not block aligned")
    if len(image) < header.size:
        raise ImageError(
            f"image declares {header.size} bytes but holds {len(image)}"
        )
    actual = checksum(image[HEADER_SIZE:header.size])
    if actual != header.checksum:
        raise ImageError(
            f"checksum mismatch: header {header.checksum:#010x}, "
            f"payload {actual:#010x}"
        )
    return header