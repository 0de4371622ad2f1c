"""GUI element bases, shared mouse state and a recording canvas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Union

from ..color import as_rgb
from ..input import InputState
from ..texts import Text, get_text
from ..vector import Vec2, point_in_rectangle

BACKGROUND_COLOR = 0x1E1E1E
BACKGROUND_EDGE_COLOR = 0xFFFFFF
BACKGROUND_EDGE_WIDTH = 1.0

FRONT_COLOR = 0x2F2F2F
FRONT_HIGHLIGHT_ALPHA = 0.2
FRONT_EDGE_COLOR = 0x4D4D4D
FRONT_TEXT_COLOR = 0xCCCCCC
FRONT_EDGE_WIDTH = 1.0


class HAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


def _color(color) -> int:
    return int(as_rgb(color))


@dataclass(frozen=True)
class RectangleCommand:
    left_top: Vec2
    right_bottom: Vec2
    color: int
    alpha: float
    outline_width: float = 0.0


@dataclass(frozen=True)
class LineCommand:
    start: Vec2
    end: Vec2
    color: int
    alpha: float
    width: float = 1.0


@dataclass(frozen=True)
class TextCommand:
    text: str
    pos: Vec2
    color: int
    alpha: float
    halign: HAlign = HAlign.LEFT
    valign: VAlign = VAlign.TOP


@dataclass(frozen=True)
class SpriteCommand:
    sprite: Any
    pos: Vec2
    color: int
    alpha: float
    scale: Vec2 = Vec2(1.0, 1.0)
    rotation: float = 0.0


DrawCommand = Union[RectangleCommand, LineCommand, TextCommand, SpriteCommand]


class Canvas:
    """Records draw calls in order for a rendering backend to replay.

    An outline width of zero means a filled rectangle. Text is measured with a
    fixed character width and line height.
    """

    def __init__(
        self,
        char_width: float = 8.0,
        line_height: float = 16.0,
        sprite_sizes: Optional[Mapping[Any, Vec2]] = None,
    ) -> None:
        self.char_width = char_width
        self.line_height = line_height
        self.sprite_sizes: dict[Any, Vec2] = dict(sprite_sizes or {})
        self.commands: list[DrawCommand] = []
        self._offsets: list[Vec2] = [Vec2()]

    @property
    def offset(self) -> Vec2:
        return self._offsets[-1]

    @contextmanager
    def layer(self, offset: Vec2) -> Iterator["Canvas"]:
        """Shift everything drawn inside the block by ``offset``; layers nest."""
        self._offsets.append(self.offset + offset)
        try:
            yield self
        finally:
            self._offsets.pop()

    def clear(self) -> None:
        self.commands.clear()

    def text_size(self, text: str) -> Vec2:
        lines = text.split("\n")
        width = max(len(line) for line in lines) * self.char_width
        return Vec2(width, len(lines) * self.line_height)

    def sprite_size(self, sprite: Any) -> Optional[Vec2]:
        """Pixel size of a known sprite, or None if there is no such sprite."""
        return self.sprite_sizes.get(sprite)

    def draw_rectangle(self, left_top: Vec2, right_bottom: Vec2, color, alpha: float, outline_width: float = 0.0) -> None:
        self.commands.append(
            RectangleCommand(left_top + self.offset, right_bottom + self.offset, _color(color), alpha, outline_width)
        )

    def draw_line(self, start: Vec2, end: Vec2, color, alpha: float, width: float = 1.0) -> None:
        self.commands.append(LineCommand(start + self.offset, end + self.offset, _color(color), alpha, width))

    def draw_text(
        self, text: str, pos: Vec2, color, alpha: float,
        halign: HAlign = HAlign.LEFT, valign: VAlign = VAlign.TOP,
    ) -> None:
        self.commands.append(TextCommand(text, pos + self.offset, _color(color), alpha, halign, valign))

    def draw_sprite(
        self, sprite: Any, pos: Vec2, color, alpha: float,
        scale: Vec2 = Vec2(1.0, 1.0), rotation: float = 0.0,
    ) -> None:
        self.commands.append(SpriteCommand(sprite, pos + self.offset, _color(color), alpha, scale, rotation))


@dataclass
class MouseData:
    """Mouse state for the GUI in the current frame."""

    mouse_on_gui: bool = False
    mouse_pos: Vec2 = Vec2()
    mouse_label: Text = Text.EMPTY
    left_pressed: bool = False
    left_holding: bool = False
    left_released: bool = False

    def sync(self, mouse_pos: Vec2, left_state: InputState) -> None:
        """Start a new frame from the cursor position and the left button state."""
        state = InputState(left_state)
        self.mouse_on_gui = False
        self.mouse_pos = mouse_pos
        self.mouse_label = Text.EMPTY
        self.left_pressed = bool(state & InputState.PRESS)
        self.left_holding = bool(state & InputState.HOLD)
        self.left_released = bool(state & InputState.RELEASE)


mouse_data = MouseData()


class Element(ABC):
    """Something placed in a GUI container.

    Positions are relative to ``pos_add``, the offset of the container.
    """

    def __init__(self) -> None:
        super().__init__()
        self.showing = True
        self.mouse_label = Text.EMPTY
        self.pos_add = Vec2()

    @abstractmethod
    def left_top_relative(self) -> Vec2:
        """Top-left corner relative to the container."""

    @abstractmethod
    def right_bottom_relative(self) -> Vec2:
        """Bottom-right corner relative to the container."""

    @abstractmethod
    def set_pos_relative(self, pos: Vec2) -> None:
        """Move the element, in container coordinates."""

    @abstractmethod
    def set_size(self, size: Vec2) -> None:
        """Resize the element."""

    def left_top(self) -> Vec2:
        return self.pos_add + self.left_top_relative()

    def right_bottom(self) -> Vec2:
        return self.pos_add + self.right_bottom_relative()

    def set_pos(self, pos: Vec2) -> None:
        """Move the element, in absolute coordinates."""
        self.set_pos_relative(pos - self.pos_add)

    def point_in_me(self, point: Vec2) -> bool:
        return point_in_rectangle(point, self.left_top(), self.right_bottom())

    def set_pos_add(self, pos_add: Vec2) -> None:
        self.pos_add = pos_add

    @abstractmethod
    def on_mouse_on_me(self, mouse_pos: Vec2) -> None:
        """Called when the element is the topmost one under the cursor."""

    def step(self) -> None:
        """Per-frame update; elements override it as needed."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the element in container coordinates."""


class Container:
    """An ordered stack of elements; later elements are on top."""

    def __init__(self) -> None:
        super().__init__()
        self._elements: list[Element] = []

    @property
    def elements(self) -> tuple[Element, ...]:
        return tuple(self._elements)

    def add_element(self, element: Element) -> Element:
        self._elements.append(element)
        return element

    def remove_element(self, element: Element) -> None:
        self._elements = [e for e in self._elements if e is not element]

    def synch_pos_add(self, pos_add: Vec2) -> None:
        for element in self._elements:
            if element.showing:
                element.set_pos_add(pos_add)

    def check_mouse(self, mouse_pos: Vec2) -> Optional[Element]:
        """Hand the cursor to the topmost shown element under it.

        A left press brings that element to the top. The press and hold are then
        consumed so that nothing beneath sees them. Returns the element, if any.
        """
        hit = next(
            (e for e in reversed(self._elements) if e.showing and e.point_in_me(mouse_pos)),
            None,
        )
        if hit is None:
            return None
        mouse_data.mouse_label = hit.mouse_label
        if mouse_data.left_pressed:
            self.remove_element(hit)
            self._elements.append(hit)
        hit.on_mouse_on_me(mouse_pos)
        mouse_data.left_pressed = False
        mouse_data.left_holding = False
        mouse_data.mouse_on_gui = True
        return hit

    def step_elements(self) -> None:
        for element in list(self._elements):
            if element.showing:
                element.step()

    def draw_elements(self, canvas: Canvas) -> None:
        for element in self._elements:
            if element.showing:
                element.draw(canvas)


class TextManager:
    """Text content that is either a localised ``Text`` or a literal string."""

    def __init__(self) -> None:
        super().__init__()
        self._text = Text.EMPTY
        self._string = ""
        self._use_string = False
        self.halign = HAlign.LEFT
        self.valign = VAlign.TOP

    def set_text(self, text: Union[Text, str]) -> None:
        if isinstance(text, str):
            self._string = text
            self._use_string = True
        else:
            self._text = Text(text)
            self._string = ""
            self._use_string = False

    @property
    def text(self) -> Text:
        """The localised text in use, or EMPTY when a literal string is shown."""
        return Text.EMPTY if self._use_string else self._text

    @property
    def text_string(self) -> str:
        return self._string if self._use_string else get_text(self._text)

    def set_align(self, halign: HAlign, valign: VAlign) -> None:
        self.halign = halign
        self.valign = valign

    def draw_text(self, canvas: Canvas, pos: Vec2, color=FRONT_TEXT_COLOR, alpha: float = 1.0) -> None:
        canvas.draw_text(self.text_string, pos, color, alpha, self.halign, self.valign)