"""Reading pixel colours from BMP images."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from os import PathLike
from typing import ClassVar

from .colors import ColorCount, Color, count_colors, sort_color_counts

BMP_SIGNATURE = 0x4D42


class BmpFormatError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < layout.size:
        raise BmpFormatError(f"{what} truncated: {len(data)} of {layout.size} bytes")
    return layout.unpack_from(data)


@dataclass(frozen=True)
class BmpHeader:
    """The file header at the start of a BMP image."""

    type: int
    file_size: int
    reserved1: int
    reserved2: int
    offset: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")

    @classmethod
    def unpack(cls, data: bytes) -> BmpHeader:
        return cls(*_unpack(cls.LAYOUT, data, "BMP header"))

    def pack(self) -> bytes:
        return self.LAYOUT.pack(*astuple(self))


@dataclass(frozen=True)
class BmpInfoHeader:
    """The information header describing the image dimensions and format."""

    info_header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<IIIHHIIIIII")

    @classmethod
    def unpack(cls, data: bytes) -> BmpInfoHeader:
        return cls(*_unpack(cls.LAYOUT, data, "BMP info header"))

    def pack(self) -> bytes:
        return self.LAYOUT.pack(*astuple(self))


def read_pixels(path: str | PathLike[str]) -> list[Color]:
    """Read every pixel colour of a 24-bit or 32-bit BMP image.

    The pixel area is read as a flat run of ``image_size`` bytes; missing
    bytes at the end of a short file read as zero.
    """
    with open(path, "rb") as stream:
        header = BmpHeader.unpack(stream.read(BmpHeader.LAYOUT.size))
        if header.type != BMP_SIGNATURE:
            raise BmpFormatError(f"not a BMP image: signature {header.type:#06x}")
        info = BmpInfoHeader.unpack(stream.read(BmpInfoHeader.LAYOUT.size))
        if info.bit_count not in (24, 32):
            raise BmpFormatError(f"unsupported bit count: {info.bit_count}")
        stream.seek(header.offset)
        raw = stream.read(info.image_size).ljust(info.image_size, b"\0")

    if info.bit_count == 32:
        return [Color(r, g, b, a) for b, g, r, a in struct.iter_unpack(
            "4B", raw[: len(raw) // 4 * 4])]
    return [Color(r, g, b) for b, g, r in struct.iter_unpack(
        "3B", raw[: len(raw) // 3 * 3])]


def analyse_bmp_image(path: str | PathLike[str]) -> list[ColorCount]:
    """Count the distinct colours of a BMP image, least frequent first."""
    return sort_color_counts(count_colors(read_pixels(path)))