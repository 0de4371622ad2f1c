"""Clickable buttons."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from ..texts import Text
from ..vector import Vec2
from .element import (
    FRONT_COLOR,
    FRONT_EDGE_COLOR,
    FRONT_EDGE_WIDTH,
    FRONT_HIGHLIGHT_ALPHA,
    Canvas,
    Element,
    HAlign,
    TextManager,
    VAlign,
    mouse_data,
)

DEFAULT_SIZE = Vec2(64.0, 32.0)
_WHITE = 0xFFFFFF


class HighlightStyle(Enum):
    WHITEN = "whiten"
    OUTLINE = "outline"


class ButtonBase(Element):
    """A rectangle centred on ``pos_relative`` that calls ``func`` when clicked."""

    def __init__(
        self,
        pos_relative: Vec2 = Vec2(),
        size: Vec2 = DEFAULT_SIZE,
        func: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self.pos_relative = pos_relative
        self._size_half = Vec2()
        self.set_size(size)
        self.func = func
        self.highlight_condition: Optional[Callable[[], bool]] = None
        self.highlight_style = HighlightStyle.WHITEN
        self.outline_width = 2.0
        self._mouse_on_me = False

    @property
    def size(self) -> Vec2:
        return self._size_half * 2.0

    @property
    def hovered(self) -> bool:
        """Whether the cursor was over the button since it was last drawn."""
        return self._mouse_on_me

    def left_top_relative(self) -> Vec2:
        return self.pos_relative - self._size_half

    def right_bottom_relative(self) -> Vec2:
        return self.pos_relative + self._size_half

    def set_pos_relative(self, pos: Vec2) -> None:
        self.pos_relative = pos

    def set_size(self, size: Vec2) -> None:
        self._size_half = size * 0.5

    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        self._mouse_on_me = True
        if mouse_data.left_pressed and self.func is not None:
            self.func()

    def draw(self, canvas: Canvas) -> None:
        lt, rb = self.left_top_relative(), self.right_bottom_relative()
        canvas.draw_rectangle(lt, rb, FRONT_COLOR, 1.0)
        canvas.draw_rectangle(lt, rb, FRONT_EDGE_COLOR, 1.0, FRONT_EDGE_WIDTH)

        self.draw_content(canvas)

        forced = self.highlight_condition is not None and self.highlight_condition()
        if forced or self._mouse_on_me:
            if self.highlight_style is HighlightStyle.WHITEN:
                canvas.draw_rectangle(lt, rb, _WHITE, FRONT_HIGHLIGHT_ALPHA)
            else:
                canvas.draw_rectangle(lt, rb, _WHITE, 1.0 if forced else 0.5, self.outline_width)
        self._mouse_on_me = False

    def draw_content(self, canvas: Canvas) -> None:
        """Draw what sits on the button face; a plain button has nothing."""


class TextButton(ButtonBase, TextManager):
    """A button showing centred text."""

    def __init__(
        self,
        func: Optional[Callable[[], None]],
        text: Union[Text, str],
        pos_relative: Vec2 = Vec2(),
        size: Vec2 = DEFAULT_SIZE,
    ) -> None:
        super().__init__(pos_relative, size, func)
        self.set_text(text)
        self.set_align(HAlign.CENTER, VAlign.MIDDLE)

    def draw_content(self, canvas: Canvas) -> None:
        self.draw_text(canvas, self.pos_relative)


class ImageButton(ButtonBase):
    """A button whose face is a sprite stretched to fill it."""

    def __init__(
        self,
        func: Optional[Callable[[], None]],
        sprite: Any,
        pos_relative: Vec2 = Vec2(),
        size: Vec2 = DEFAULT_SIZE,
        mouse_label: Text = Text.EMPTY,
    ) -> None:
        super().__init__(pos_relative, size, func)
        self.mouse_label = mouse_label
        self.sprite = sprite

    def draw_content(self, canvas: Canvas) -> None:
        image_size = canvas.sprite_size(self.sprite)
        if image_size is None:
            return
        scale = self.size / image_size
        canvas.draw_sprite(self.sprite, self.pos_relative, _WHITE, 1.0, scale, 0.0)


class CustomDrawingButton(ButtonBase):
    """A button whose face is drawn by ``draw_func(canvas, centre)``."""

    def __init__(
        self,
        func: Optional[Callable[[], None]],
        draw_func: Callable[[Canvas, Vec2], None],
        pos_relative: Vec2 = Vec2(),
        size: Vec2 = DEFAULT_SIZE,
        mouse_label: Text = Text.EMPTY,
    ) -> None:
        super().__init__(pos_relative, size, func)
        self.mouse_label = mouse_label
        self.draw_func = draw_func

    def draw_content(self, canvas: Canvas) -> None:
        self.draw_func(canvas, self.pos_relative)