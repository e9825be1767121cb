"""Command line tool that turns a raw binary into a bootable BL1 image."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .image import MAX_PAYLOAD, Bl1Header, build_image

_PROG = "bl1tool"


def _read_source(source: str | os.PathLike) -> bytes:
    with open(source, "rb") as handle:
        return handle.read(MAX_PAYLOAD)


def _write_image(destination: str | os.PathLike, image: bytes) -> None:
    with open(destination, "wb") as handle:
        handle.write(image)


def convert_file(source: str | os.PathLike, destination: str | os.PathLike) -> Bl1Header:
    """Read ``source``, write its BL1 image to ``destination``, return the header."""
    image = build_image(_read_source(source))
    _write_image(destination, image)
    return Bl1Header.unpack(image)


def _report(message: str, exc: OSError) -> None:
    detail = exc.strerror or str(exc)
    print(f"{message}: {detail}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the tool; ``argv`` holds the arguments after the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(f"Usage: {_PROG} <source file> <destination file>")
        return 1
    source, destination = args

    try:
        data = _read_source(source)
    except OSError as exc:
        _report("source file open error", exc)
        return 1

    image = build_image(data)
    try:
        _write_image(destination, image)
    except OSError as exc:
        _report("destination file open error", exc)
        return 1

    print(f"BL1 image generated successfully: {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())