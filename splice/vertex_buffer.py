"""Per-vertex position, colour and texture data for a textured quad."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple

from .color import ColorRGB, as_rgb
from .vector import Vec2

_STRIDE = 9
_POS, _COLOR, _ALPHA, _UV = 0, 3, 6, 7


class Corner(IntEnum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


class Vertex(NamedTuple):
    x: float
    y: float
    z: float
    r: float
    g: float
    b: float
    a: float
    u: float
    v: float


@dataclass
class ColorAlpha:
    """A current drawing colour and opacity."""

    color: ColorRGB = field(default_factory=lambda: ColorRGB(255, 255, 255))
    alpha: float = 1.0

    def __post_init__(self) -> None:
        self.color = as_rgb(self.color)


_DEFAULT_UV = ((0.0, 1.0), (1.0, 1.0), (0.0, 0.0), (1.0, 0.0))


class TextureVertexBuffer:
    """Four vertices (top left, top right, bottom left, bottom right), nine floats each."""

    def __init__(self) -> None:
        self._data = [0.0] * (4 * _STRIDE)
        for corner, (u, v) in zip(Corner, _DEFAULT_UV):
            base = corner * _STRIDE
            self._data[base + _COLOR : base + _ALPHA + 1] = [1.0, 1.0, 1.0, 1.0]
            self._data[base + _UV : base + _UV + 2] = [u, v]

    @classmethod
    def from_rect(cls, top_left: Vec2, bottom_right: Vec2, color=0xFFFFFF, alpha: float = 1.0) -> "TextureVertexBuffer":
        buf = cls()
        buf.set_rect(top_left, bottom_right)
        buf.set_blends(color, alpha)
        return buf

    @classmethod
    def from_quad(
        cls, top_left: Vec2, top_right: Vec2, bottom_left: Vec2, bottom_right: Vec2,
        color=0xFFFFFF, alpha: float = 1.0,
    ) -> "TextureVertexBuffer":
        buf = cls()
        buf.set_positions(top_left, top_right, bottom_left, bottom_right)
        buf.set_blends(color, alpha)
        return buf

    @property
    def data(self) -> tuple[float, ...]:
        return tuple(self._data)

    def copy(self) -> "TextureVertexBuffer":
        other = TextureVertexBuffer()
        other._data = list(self._data)
        return other

    def vertex(self, corner: Corner) -> Vertex:
        base = Corner(corner) * _STRIDE
        return Vertex(*self._data[base : base + _STRIDE])

    def set_rect(self, top_left: Vec2, bottom_right: Vec2) -> None:
        """Axis-aligned positions from two opposite corners."""
        self.set_positions(
            top_left,
            Vec2(bottom_right.x, top_left.y),
            Vec2(top_left.x, bottom_right.y),
            bottom_right,
        )

    def set_positions(self, top_left: Vec2, top_right: Vec2, bottom_left: Vec2, bottom_right: Vec2) -> None:
        for corner, pos in zip(Corner, (top_left, top_right, bottom_left, bottom_right)):
            base = corner * _STRIDE + _POS
            self._data[base] = float(pos.x)
            self._data[base + 1] = float(pos.y)

    def set_blends(self, color, alpha: float) -> None:
        self.set_color_blends(color)
        self.set_alpha_blends(alpha)

    def set_color_blends(self, *args) -> None:
        """Set one colour for every vertex, or four colours in corner order."""
        if len(args) == 1:
            colors = args * 4
        elif len(args) == 4:
            colors = args
        else:
            raise TypeError("set_color_blends takes one or four colours")
        for corner, color in zip(Corner, colors):
            base = corner * _STRIDE + _COLOR
            self._data[base : base + 3] = list(as_rgb(color).unit())

    def set_alpha_blends(self, *args) -> None:
        """Set one alpha for every vertex, or four alphas in corner order."""
        if len(args) == 1:
            alphas = args * 4
        elif len(args) == 4:
            alphas = args
        else:
            raise TypeError("set_alpha_blends takes one or four alpha values")
        for corner, alpha in zip(Corner, alphas):
            self._data[corner * _STRIDE + _ALPHA] = float(alpha)

    def set_tex_coord(self, uv_left_top: Vec2, uv_right_bottom: Vec2) -> None:
        lt, rb = uv_left_top, uv_right_bottom
        coords = ((lt.x, lt.y), (rb.x, lt.y), (lt.x, rb.y), (rb.x, rb.y))
        for corner, (u, v) in zip(Corner, coords):
            base = corner * _STRIDE + _UV
            self._data[base] = float(u)
            self._data[base + 1] = float(v)