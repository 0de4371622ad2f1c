"""Localised interface strings."""

from __future__ import annotations

from enum import Enum, IntEnum

from .vector import Vec2


class Language(Enum):
    CHINESE = "chinese"
    ENGLISH = "english"


class Text(IntEnum):
    EMPTY = 0
    OK = 1
    CANCEL = 2
    APPLY = 3
    RESET = 4
    EDITOR_TOOL_HAND = 5
    EDITOR_TOOL_PENCIL = 6
    EDITOR_TOOL_ERASER = 7
    EDITOR_TOOL_SWATCHES = 8
    EDITOR_TOOL_CONTROLLER = 9
    EDITOR_OPERATION_PROMPT_CAMERA = 10
    EDITOR_OPERATION_PROMPT_HAND = 11
    EDITOR_OPERATION_PROMPT_PENCIL = 12
    EDITOR_OPERATION_PROMPT_CONTROLLER_SETTING = 13
    EDITOR_END = 14


# (Chinese, English) in the order of ``Text``.
_TABLE: tuple[tuple[str, str], ...] = (
    ("", ""),
    ("确定", "OK"),
    ("取消", "Cancel"),
    ("应用", "Apply"),
    ("重置", "Reset"),
    ("[1] - 自由视角", "[1] - Free view"),
    ("[2] - 放置装置", "[2] - Place devices"),
    ("[3] - 移除装置", "[3] - Remove devices"),
    ("[4] - 更改配色", "[4] - Change colors"),
    ("[5] - 编辑控制器", "[5] - Edit controller"),
    (
        "[鼠标中键] - 移动视图，[鼠标滚轮] - 缩放视图，[1~5] - 切换工具",
        "[Mouse Middle Button] or [W/A/S/D] - Move view, [Move Scroll Wheel] - Zoom view, [1~5] - Switch tool",
    ),
    ("[鼠标左键] - 移动视图", "[Mouse Left Button] - Move view"),
    ("[Q/E] - 上/下一个装置", "[Q/E] - Previous/Next device"),
    (
        "[任意] - 绑定，[Esc] - 清空，[鼠标右键] - 取消",
        "[Any] - Bind, [Esc] - Clear, [Mouse Right Button] - Cancel",
    ),
    ("我们走吧 !!", "Here we go!!"),
)

DEFAULT_TEXT = "ERROR"

_LABEL_EDGE_LEFT_TOP = Vec2(-4.0, -2.0)
_LABEL_EDGE_RIGHT_BOTTOM = Vec2(4.0, 6.0)
_LABEL_BACKGROUND = 0x000000
_LABEL_FOREGROUND = 0xCCCCCC

_texts: list[str] = []


def initialize_texts(language: Language) -> None:
    """Load every string in the given language, replacing any loaded before."""
    index = 0 if Language(language) is Language.CHINESE else 1
    _texts.clear()
    _texts.extend(pair[index] for pair in _TABLE)


def get_text(text: int) -> str:
    """The loaded string for ``text``, or ``"ERROR"`` if none is loaded for it."""
    index = int(text)
    return _texts[index] if 0 <= index < len(_texts) else DEFAULT_TEXT


def draw_text_label(canvas, text: int, pos: Vec2) -> None:
    """Draw a string on a dark box whose top left is near ``pos``."""
    string = get_text(text)
    size = canvas.text_size(string)
    canvas.draw_rectangle(
        pos + _LABEL_EDGE_LEFT_TOP,
        pos + _LABEL_EDGE_RIGHT_BOTTOM + size,
        _LABEL_BACKGROUND,
        1.0,
    )
    canvas.draw_text(string, pos, _LABEL_FOREGROUND, 1.0)