"""A horizontal slider selecting an integer from 0 to a maximum."""

from __future__ import annotations

import math
from typing import Callable, Optional

from ..vector import Vec2, clamp
from .element import Canvas, Element, mouse_data

_WHITE = 0xFFFFFF
_HANDLE_HALF_SIZE = Vec2(1.0, 9.0)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Slider(Element):
    """A bar centred on ``pos_relative`` whose handle is dragged with the left button.

    While not dragged, ``func_synch_value`` (if given) supplies the value each
    step. A drag that changes the value calls ``func_on_value_changed(value, max_value)``.
    """

    HEIGHT = 12.0

    def __init__(
        self,
        pos_relative: Vec2,
        width: float,
        max_value: int,
        func_synch_value: Optional[Callable[[], int]] = None,
        func_on_value_changed: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        super().__init__()
        self.pos_relative = pos_relative
        self._width_half = width * 0.5
        self.max_value = max_value
        self.value = 0
        self.func_synch_value = func_synch_value
        self.func_on_value_changed = func_on_value_changed
        self.background_color = 0x000000
        self._dragging = False

    @property
    def width(self) -> float:
        return self._width_half * 2.0

    @property
    def dragging(self) -> bool:
        return self._dragging

    def left_top_relative(self) -> Vec2:
        return Vec2(self.pos_relative.x - self._width_half, self.pos_relative.y - self.HEIGHT * 0.5)

    def right_bottom_relative(self) -> Vec2:
        return Vec2(self.pos_relative.x + self._width_half, self.pos_relative.y + self.HEIGHT * 0.5)

    def set_pos_relative(self, pos: Vec2) -> None:
        self.pos_relative = pos

    def set_size(self, size: Vec2) -> None:
        """Only the width is taken; the height is fixed."""
        self._width_half = size.x * 0.5

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        if mouse_data.left_pressed:
            self._dragging = True
        if mouse_data.left_released:
            self._dragging = False

    def step(self) -> None:
        if mouse_data.left_released:
            self._dragging = False
        if self._dragging:
            mouse_data.mouse_on_gui = True
            before = self.value
            fraction = (mouse_data.mouse_pos.x - self.left_top().x) / self.width
            self.value = clamp(_round_half_away(fraction * self.max_value), 0, self.max_value)
            if self.value != before and self.func_on_value_changed is not None:
                self.func_on_value_changed(self.value, self.max_value)
        elif self.func_synch_value is not None:
            self.value = clamp(self.func_synch_value(), 0, self.max_value)

    def draw(self, canvas: Canvas) -> None:
        lt, rb = self.left_top_relative(), self.right_bottom_relative()
        canvas.draw_rectangle(lt, rb, self.background_color, 1.0)
        canvas.draw_rectangle(lt, rb, _WHITE, 1.0, 1.0)
        handle = Vec2(
            lt.x + self.value / self.max_value * self.width,
            lt.y + (rb.y - lt.y) * 0.5,
        )
        canvas.draw_rectangle(handle - _HANDLE_HALF_SIZE, handle + _HANDLE_HALF_SIZE, _WHITE, 1.0)

    def value_normalized(self) -> float:
        """The value as a fraction of the maximum."""
        return self.value / self.max_value