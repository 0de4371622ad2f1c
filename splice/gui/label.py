"""Static text labels."""

from __future__ import annotations

from typing import Callable, Optional, Union

from ..texts import Text
from ..vector import Vec2
from .element import FRONT_TEXT_COLOR, Canvas, Element, HAlign, TextManager, VAlign


class Label(Element, TextManager):
    """Text anchored at a point; it never takes the mouse."""

    def __init__(
        self,
        pos: Vec2,
        text: Union[Text, str],
        halign: HAlign = HAlign.LEFT,
        valign: VAlign = VAlign.TOP,
    ) -> None:
        super().__init__()
        self.pos = pos
        self.func_step: Optional[Callable[["Label"], None]] = None
        self.color = FRONT_TEXT_COLOR
        self.set_text(text)
        self.set_align(halign, valign)

    def left_top_relative(self) -> Vec2:
        return self.pos

    def right_bottom_relative(self) -> Vec2:
        return self.pos

    def set_pos_relative(self, pos: Vec2) -> None:
        self.pos = pos

    def set_size(self, size: Vec2) -> None:
        """Labels have no size of their own; the request is ignored."""

    def point_in_me(self, point: Vec2) -> bool:
        return False

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        """Labels do not react to the mouse."""

    def step(self) -> None:
        if self.func_step is not None:
            self.func_step(self)

    def draw(self, canvas: Canvas) -> None:
        self.draw_text(canvas, self.pos, self.color, 1.0)