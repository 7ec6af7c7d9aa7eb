"""Reading and writing PPM (P3 and P6) images."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, NamedTuple

_WHITESPACE = (b" ", b"\t", b"\r", b"\n")


class PpmError(RuntimeError):
    """Raised when a PPM file cannot be opened or parsed."""


class PackedPixel(NamedTuple):
    """Red, green and blue bytes of one pixel."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class PpmImage:
    """A decoded image; ``pixels`` lists rows from the bottom row upwards."""

    width: int
    height: int
    pixels: list[PackedPixel]


def _read_byte(stream: BinaryIO) -> bytes:
    ch = stream.read(1)
    if not ch:
        raise PpmError("ppmRead: unexpected end of file")
    return ch


def _read_integer(stream: BinaryIO) -> int:
    """Read one non-negative decimal integer, skipping whitespace and ``#`` comments."""
    value = 0
    got = False
    in_comment = False
    while True:
        ch = _read_byte(stream)
        if in_comment:
            if ch == b"\n":
                in_comment = False
            continue
        if ch.isdigit():
            value = value * 10 + ch[0] - ord("0")
            got = True
        elif ch == b"#":
            in_comment = True
        elif ch not in _WHITESPACE:
            raise PpmError("ppmRead: invalid character")
        elif got:
            return value


def read_ppm_stream(stream: BinaryIO) -> PpmImage:
    """Decode a PPM image from a binary stream."""
    magic = stream.read(2)
    if magic == b"P3":
        binary = False
    elif magic == b"P6":
        binary = True
    elif len(magic) < 2:
        raise PpmError("ppmRead: unexpected end of file")
    else:
        raise PpmError("ppmRead: bad file format")

    width = _read_integer(stream)
    height = _read_integer(stream)
    if _read_integer(stream) != 255:
        warnings.warn("maxcolor not 255 : won't work well", stacklevel=2)

    rows: list[list[PackedPixel]] = []
    for _ in range(height):
        if binary:
            raw = stream.read(3 * width)
            if len(raw) != 3 * width:
                raise PpmError("ppmRead: unexpected end of file")
            row = [PackedPixel(*raw[k : k + 3]) for k in range(0, len(raw), 3)]
        else:
            row = [
                PackedPixel(*(_read_integer(stream) & 0xFF for _ in range(3)))
                for _ in range(width)
            ]
        rows.append(row)
    # The file lists rows top to bottom; store them bottom row first.
    pixels = [pixel for row in reversed(rows) for pixel in row]
    return PpmImage(width, height, pixels)


def read_ppm(path: str | PathLike) -> PpmImage:
    """Read a PPM image file."""
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise PpmError(f"ppmRead: Cannot open file {path} for read") from exc
    with stream:
        return read_ppm_stream(stream)


def write_ppm(path: str | PathLike, width: int, height: int, data: bytes) -> None:
    """Write RGB bytes, listed bottom row first, as a binary P6 file."""
    stride = 3 * width
    if len(data) != stride * height:
        raise ValueError(f"expected {stride * height} bytes of RGB data, got {len(data)}")
    with open(path, "wb") as f:
        f.write(f"P6 {width} {height} 255\n".encode("ascii"))
        for row in reversed(range(height)):
            f.write(data[row * stride : (row + 1) * stride])