import pytest

from splice.gui.element import Canvas, RectangleCommand, TextCommand
from splice.texts import Language, Text, draw_text_label, get_text, initialize_texts
from splice.vector import Vec2


@pytest.fixture(autouse=True)
def english():
    initialize_texts(Language.ENGLISH)
    yield
    initialize_texts(Language.ENGLISH)


def test_english_strings():
    assert get_text(Text.OK) == "OK"
    assert get_text(Text.CANCEL) == "Cancel"
    assert get_text(Text.EDITOR_END) == "Here we go!!"


def test_chinese_strings():
    initialize_texts(Language.CHINESE)
    assert get_text(Text.OK) == "确定"
    assert get_text(Text.EDITOR_END) == "我们走吧 !!"


def test_empty_text_is_empty_string():
    assert get_text(Text.EMPTY) == ""


def test_every_text_is_loaded():
    assert [get_text(text) for text in Text] == [
        "",
        "OK",
        "Cancel",
        "Apply",
        "Reset",
        "[1] - Free view",
        "[2] - Place devices",
        "[3] - Remove devices",
        "[4] - Change colors",
        "[5] - Edit controller",
        "[Mouse Middle Button] or [W/A/S/D] - Move view, [Move Scroll Wheel] - Zoom view, [1~5] - Switch tool",
        "[Mouse Left Button] - Move view",
        "[Q/E] - Previous/Next device",
        "[Any] - Bind, [Esc] - Clear, [Mouse Right Button] - Cancel",
        "Here we go!!",
    ]


def test_out_of_range_gives_error():
    assert get_text(len(Text)) == "ERROR"
    assert get_text(-1) == "ERROR"


def test_reinitialize_switches_language():
    initialize_texts(Language.CHINESE)
    chinese = get_text(Text.RESET)
    initialize_texts(Language.ENGLISH)
    assert get_text(Text.RESET) == "Reset"
    assert chinese == "重置"


def test_draw_text_label_box_and_text():
    canvas = Canvas(char_width=8.0, line_height=16.0)
    pos = Vec2(10.0, 20.0)
    draw_text_label(canvas, Text.APPLY, pos)
    box, label = canvas.commands
    assert isinstance(box, RectangleCommand)
    assert box.left_top == pos + Vec2(-4.0, -2.0)
    assert box.right_bottom == pos + Vec2(4.0, 6.0) + canvas.text_size("Apply")
    assert box.color == 0x000000
    assert isinstance(label, TextCommand)
    assert label.text == "Apply"
    assert label.pos == pos
    assert label.color == 0xCCCCCC