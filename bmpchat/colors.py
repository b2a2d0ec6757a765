"""Colour values and counting of distinct colours."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class BitDepth(enum.Enum):
    """Number of bits used to store one pixel colour."""

    BITS24 = 24
    BITS32 = 32


@dataclass(frozen=True)
class Color:
    """An RGB colour, with an alpha channel for 32-bit pixels."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def __post_init__(self) -> None:
        channels = [self.red, self.green, self.blue]
        if self.alpha is not None:
            channels.append(self.alpha)
        if any(not 0 <= value <= 0xFF for value in channels):
            raise ValueError(f"colour channel out of range: {channels}")

    @property
    def bit_depth(self) -> BitDepth:
        return BitDepth.BITS24 if self.alpha is None else BitDepth.BITS32

    @property
    def hex(self) -> str:
        """The colour as an HTML hex string, alpha left out."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass
class ColorCount:
    """A distinct colour together with how many times it occurs."""

    color: Color
    count: int = 1


def count_colors(colors: Iterable[Color]) -> list[ColorCount]:
    """Count distinct colours, in the order they are first seen.

    All colours must share one bit depth.
    """
    counts: dict[Color, ColorCount] = {}
    depth: BitDepth | None = None
    for color in colors:
        if depth is None:
            depth = color.bit_depth
        elif color.bit_depth is not depth:
            raise ValueError("colours of different bit depths cannot be counted together")
        entry = counts.get(color)
        if entry is None:
            counts[color] = ColorCount(color)
        else:
            entry.count += 1
    return list(counts.values())


def sort_color_counts(counts: Iterable[ColorCount]) -> list[ColorCount]:
    """Return the counts sorted from the least to the most frequent colour."""
    return sorted(counts, key=lambda entry: entry.count)


def _channels(color: Color) -> list[int]:
    channels = [color.red, color.green, color.blue]
    if color.alpha is not None:
        channels.append(color.alpha)
    return channels


def format_color(color: Color) -> str:
    """Format a colour as hex channels, each right-aligned in five columns."""
    return " ".join(f"{value:5x}" for value in _channels(color))


def format_color_count(count: ColorCount) -> str:
    """Format a colour and its count on one line."""
    return f"{format_color(count.color)}: {count.count:10d}"