import pytest

from splice.input import InputState
from splice.gui.button import (
    DEFAULT_SIZE,
    ButtonBase,
    CustomDrawingButton,
    HighlightStyle,
    ImageButton,
    TextButton,
)
from splice.gui.element import (
    FRONT_COLOR,
    FRONT_EDGE_COLOR,
    FRONT_EDGE_WIDTH,
    FRONT_HIGHLIGHT_ALPHA,
    Canvas,
    Container,
    HAlign,
    RectangleCommand,
    SpriteCommand,
    TextCommand,
    VAlign,
    mouse_data,
)
from splice.texts import Language, Text, initialize_texts
from splice.vector import Vec2


@pytest.fixture(autouse=True)
def reset_state():
    initialize_texts(Language.ENGLISH)
    mouse_data.sync(Vec2(), InputState.NOTHING)
    yield
    mouse_data.sync(Vec2(), InputState.NOTHING)


def test_bounds_centred_on_position():
    button = ButtonBase(Vec2(100.0, 100.0), Vec2(64.0, 32.0))
    assert button.left_top_relative() == Vec2(100.0, 100.0) - Vec2(64.0, 32.0) * 0.5
    assert button.right_bottom_relative() == Vec2(100.0, 100.0) + Vec2(64.0, 32.0) * 0.5
    assert button.size == Vec2(64.0, 32.0)


def test_default_size():
    assert ButtonBase().size == DEFAULT_SIZE


def test_func_called_only_on_press():
    calls = []
    button = ButtonBase(func=lambda: calls.append(1))
    button.on_mouse_on_me(Vec2())
    assert calls == []
    assert button.hovered
    mouse_data.sync(Vec2(), InputState.PRESS)
    button.on_mouse_on_me(Vec2())
    assert calls == [1]


def test_draw_background_and_edge():
    canvas = Canvas()
    ButtonBase(Vec2(50.0, 50.0)).draw(canvas)
    fill, edge = canvas.commands
    assert fill.color == FRONT_COLOR and fill.outline_width == 0.0
    assert edge.color == FRONT_EDGE_COLOR and edge.outline_width == FRONT_EDGE_WIDTH


def test_whiten_highlight_when_hovered_then_cleared():
    canvas = Canvas()
    button = ButtonBase(Vec2(50.0, 50.0))
    button.on_mouse_on_me(Vec2(50.0, 50.0))
    button.draw(canvas)
    assert len(canvas.commands) == 3
    assert canvas.commands[-1].alpha == FRONT_HIGHLIGHT_ALPHA
    assert not button.hovered
    canvas.clear()
    button.draw(canvas)
    assert len(canvas.commands) == 2


def test_outline_highlight_hover_and_forced():
    button = ButtonBase(Vec2(50.0, 50.0))
    button.highlight_style = HighlightStyle.OUTLINE
    button.outline_width = 3.0
    canvas = Canvas()
    button.on_mouse_on_me(Vec2())
    button.draw(canvas)
    hover = canvas.commands[-1]
    assert (hover.alpha, hover.outline_width) == (0.5, 3.0)
    canvas.clear()
    button.highlight_condition = lambda: True
    button.draw(canvas)
    forced = canvas.commands[-1]
    assert (forced.alpha, forced.outline_width) == (1.0, 3.0)


def test_text_button_draws_centred_text():
    canvas = Canvas()
    button = TextButton(None, Text.OK, Vec2(20.0, 30.0))
    button.draw(canvas)
    texts = [c for c in canvas.commands if isinstance(c, TextCommand)]
    assert len(texts) == 1
    assert texts[0].text == "OK"
    assert texts[0].pos == Vec2(20.0, 30.0)
    assert (texts[0].halign, texts[0].valign) == (HAlign.CENTER, VAlign.MIDDLE)


def test_image_button_scales_sprite_to_button():
    canvas = Canvas(sprite_sizes={"icon": Vec2(32.0, 16.0)})
    button = ImageButton(None, "icon", Vec2(10.0, 10.0), Vec2(64.0, 32.0), Text.APPLY)
    button.draw(canvas)
    sprites = [c for c in canvas.commands if isinstance(c, SpriteCommand)]
    assert len(sprites) == 1
    assert sprites[0].scale == Vec2(64.0, 32.0) / Vec2(32.0, 16.0)
    assert sprites[0].pos == Vec2(10.0, 10.0)
    assert button.mouse_label == Text.APPLY


def test_image_button_missing_sprite_draws_no_sprite():
    canvas = Canvas()
    ImageButton(None, "nothing").draw(canvas)
    assert [type(c) for c in canvas.commands] == [RectangleCommand, RectangleCommand]


def test_custom_drawing_button_receives_centre():
    seen = []
    button = CustomDrawingButton(None, lambda canvas, centre: seen.append(centre), Vec2(7.0, 8.0))
    button.draw(Canvas())
    assert seen == [Vec2(7.0, 8.0)]


def test_click_through_container():
    calls = []
    container = Container()
    container.add_element(ButtonBase(Vec2(50.0, 50.0), func=lambda: calls.append("clicked")))
    mouse_data.sync(Vec2(50.0, 50.0), InputState.PRESS | InputState.HOLD)
    container.check_mouse(Vec2(50.0, 50.0))
    assert calls == ["clicked"]