"""Pages: rectangular panels that hold other elements."""

from __future__ import annotations

import math
from typing import Optional

from ..vector import Vec2, point_in_rectangle
from .element import (
    BACKGROUND_COLOR,
    BACKGROUND_EDGE_COLOR,
    BACKGROUND_EDGE_WIDTH,
    Canvas,
    Container,
    Element,
    mouse_data,
)

RESIZE_CURSOR = "resize_nwse"
_HANDLE_HALF_SIZE = Vec2(8.0, 8.0)
_WHITE = 0xFFFFFF


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Page(Element, Container):
    """A panel whose children are placed relative to its top-left corner."""

    def __init__(self, left_top_relative: Vec2 = Vec2(0.0, 0.0), size: Vec2 = Vec2(64.0, 64.0)) -> None:
        super().__init__()
        self._lt_relative = left_top_relative
        self._size = size

    @property
    def size(self) -> Vec2:
        return self._size

    def left_top_relative(self) -> Vec2:
        return self._lt_relative

    def right_bottom_relative(self) -> Vec2:
        return self._lt_relative + self._size

    def set_pos_relative(self, pos: Vec2) -> None:
        self._lt_relative = pos

    def set_size(self, size: Vec2) -> None:
        self._size = size

    def set_pos_add(self, pos_add: Vec2) -> None:
        self.pos_add = pos_add
        self.synch_pos_add(self.left_top())

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        self.check_mouse(mouse_pos)

    def step(self) -> None:
        self.step_elements()

    def draw(self, canvas: Canvas) -> None:
        lt, rb = self.left_top_relative(), self.right_bottom_relative()
        canvas.draw_rectangle(lt, rb, BACKGROUND_COLOR, 1.0)
        canvas.draw_rectangle(lt, rb, BACKGROUND_EDGE_COLOR, 1.0, BACKGROUND_EDGE_WIDTH)
        with canvas.layer(lt):
            self.draw_elements(canvas)


class DraggablePage(Page):
    """A page moved by dragging it with the left button, kept inside the view.

    ``view_size`` is the size of the screen the page must stay in; the GUI sets
    it on the class each frame, and an instance may override it.
    """

    view_size = Vec2(1280.0, 720.0)

    def __init__(self, left_top_relative: Vec2 = Vec2(0.0, 0.0), size: Vec2 = Vec2(64.0, 64.0)) -> None:
        super().__init__(left_top_relative, size)
        self._relative_to_mouse = Vec2()
        self._dragging = False

    @property
    def dragging(self) -> bool:
        return self._dragging

    def point_in_me(self, point: Vec2) -> bool:
        return self._dragging or super().point_in_me(point)

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        if not self._dragging:
            self.check_mouse(mouse_pos)
        if mouse_data.left_pressed and not self._dragging:
            self._dragging = True
            self._relative_to_mouse = self.left_top() - mouse_data.mouse_pos

    def step(self) -> None:
        if mouse_data.left_released:
            self._dragging = False
        if self._dragging:
            self.set_pos(self._relative_to_mouse + mouse_data.mouse_pos)

        max_pos = self.view_size - self._size
        lt = self.left_top()
        x = min(lt.x, max_pos.x)
        y = min(lt.y, max_pos.y)
        self.set_pos(Vec2(max(x, 0.0), max(y, 0.0)))

        self.step_elements()


class DraggableResizablePage(DraggablePage):
    """A draggable page resized from its bottom-right corner in whole grid cells."""

    def __init__(self, left_top_relative: Vec2, cell_size: Vec2, grid_size: Vec2, grid_min_size: Vec2) -> None:
        super().__init__(left_top_relative, Vec2(1.0, 1.0))
        self._resizing = False
        self.cursor: Optional[str] = None
        self._cell_size = Vec2(int(cell_size.x), int(cell_size.y))
        self._grid_size = Vec2(int(grid_size.x), int(grid_size.y))
        self._grid_min_size = Vec2(int(grid_min_size.x), int(grid_min_size.y))
        self._sync_size()

    @property
    def resizing(self) -> bool:
        return self._resizing

    @property
    def cell_size(self) -> Vec2:
        return self._cell_size

    @cell_size.setter
    def cell_size(self, size: Vec2) -> None:
        self._cell_size = Vec2(int(size.x), int(size.y))
        self._sync_size()

    @property
    def grid_size(self) -> Vec2:
        return self._grid_size

    @grid_size.setter
    def grid_size(self, size: Vec2) -> None:
        self._grid_size = Vec2(int(size.x), int(size.y))
        self._sync_size()

    @property
    def grid_min_size(self) -> Vec2:
        return self._grid_min_size

    @grid_min_size.setter
    def grid_min_size(self, size: Vec2) -> None:
        self._grid_min_size = Vec2(int(size.x), int(size.y))
        self._sync_size()

    def _sync_size(self) -> None:
        self._grid_size = Vec2(
            max(self._grid_min_size.x, self._grid_size.x),
            max(self._grid_min_size.y, self._grid_size.y),
        )
        super().set_size(
            Vec2(
                float(self._cell_size.x * self._grid_size.x),
                float(self._cell_size.y * self._grid_size.y),
            )
        )

    def point_in_me(self, point: Vec2) -> bool:
        return self._resizing or super().point_in_me(point)

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        rb = self.right_bottom()
        if point_in_rectangle(mouse_pos, rb - _HANDLE_HALF_SIZE, rb + _HANDLE_HALF_SIZE):
            self.cursor = RESIZE_CURSOR
            if mouse_data.left_pressed:
                self._resizing = True
            return
        if not self._resizing:
            super().on_mouse_on_me(mouse_pos)

    def step(self) -> None:
        if mouse_data.left_released:
            self._resizing = False
        if not self._resizing:
            super().step()
            return
        self.cursor = RESIZE_CURSOR
        self.set_size(mouse_data.mouse_pos - self.left_top())

    def draw(self, canvas: Canvas) -> None:
        super().draw(canvas)
        rb = self.right_bottom_relative()
        canvas.draw_line(Vec2(rb.x, rb.y - 12.0), Vec2(rb.x - 12.0, rb.y), _WHITE, 1.0, 2.0)
        canvas.draw_line(Vec2(rb.x, rb.y - 6.0), Vec2(rb.x - 6.0, rb.y), _WHITE, 1.0, 2.0)
        self.cursor = None

    def set_size(self, size: Vec2) -> None:
        """Snap a pixel size to the nearest whole number of cells."""
        cells = Vec2(size.x / self._cell_size.x, size.y / self._cell_size.y)
        self._grid_size = Vec2(_round_half_away(cells.x), _round_half_away(cells.y))
        self._sync_size()

    def set_grid(self, cell_size: Vec2, grid_size: Vec2) -> None:
        self._cell_size = Vec2(int(cell_size.x), int(cell_size.y))
        self._grid_size = Vec2(int(grid_size.x), int(grid_size.y))
        self._sync_size()