"""Packed 24-bit colours in RGB and BGR channel order."""

from __future__ import annotations

from dataclasses import dataclass

_BYTE = 0xFF


def unite_rgb(r: int, g: int, b: int) -> int:
    """Pack three channels into ``0xRRGGBB``."""
    return (r << 16) | (g << 8) | b


def split_rgb(rgb: int) -> tuple[int, int, int]:
    """Unpack ``0xRRGGBB`` into ``(r, g, b)``; bits above 24 are ignored."""
    return (rgb >> 16) & _BYTE, (rgb >> 8) & _BYTE, rgb & _BYTE


def unite_bgr(b: int, g: int, r: int) -> int:
    """Pack three channels into ``0xBBGGRR``."""
    return (b << 16) | (g << 8) | r


def split_bgr(bgr: int) -> tuple[int, int, int]:
    """Unpack ``0xBBGGRR`` into ``(b, g, r)``; bits above 24 are ignored."""
    return (bgr >> 16) & _BYTE, (bgr >> 8) & _BYTE, bgr & _BYTE


def _check_channels(*channels: int) -> None:
    for value in channels:
        if not isinstance(value, int) or not 0 <= value <= _BYTE:
            raise ValueError(f"colour channel must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class ColorRGB:
    """A colour with 8-bit red, green and blue channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channels(self.r, self.g, self.b)

    @classmethod
    def from_int(cls, rgb: int) -> "ColorRGB":
        return cls(*split_rgb(rgb))

    def __int__(self) -> int:
        return unite_rgb(self.r, self.g, self.b)

    def to_bgr(self) -> "ColorBGR":
        return ColorBGR(self.b, self.g, self.r)

    def unit(self) -> tuple[float, float, float]:
        """Channels scaled to the range 0..1."""
        return self.r / 255.0, self.g / 255.0, self.b / 255.0


@dataclass(frozen=True)
class ColorBGR:
    """A colour with 8-bit channels stored blue first."""

    b: int = 0
    g: int = 0
    r: int = 0

    def __post_init__(self) -> None:
        _check_channels(self.b, self.g, self.r)

    @classmethod
    def from_int(cls, bgr: int) -> "ColorBGR":
        return cls(*split_bgr(bgr))

    def __int__(self) -> int:
        return unite_bgr(self.b, self.g, self.r)

    def to_rgb(self) -> ColorRGB:
        return ColorRGB(self.r, self.g, self.b)


def as_rgb(color: "ColorRGB | ColorBGR | int") -> ColorRGB:
    """Accept a colour object or a packed ``0xRRGGBB`` integer."""
    if isinstance(color, ColorRGB):
        return color
    if isinstance(color, ColorBGR):
        return color.to_rgb()
    if isinstance(color, int):
        return ColorRGB.from_int(color)
    raise TypeError(f"not a colour: {color!r}")