import pytest

from splice.gui.button import ButtonBase
from splice.gui.element import (
    BACKGROUND_COLOR,
    BACKGROUND_EDGE_COLOR,
    Canvas,
    LineCommand,
    RectangleCommand,
    TextCommand,
    mouse_data,
)
from splice.gui.label import Label
from splice.gui.page import RESIZE_CURSOR, DraggablePage, DraggableResizablePage, Page
from splice.input import InputState
from splice.vector import Vec2


@pytest.fixture(autouse=True)
def reset_mouse():
    mouse_data.sync(Vec2(), InputState.NOTHING)
    yield
    mouse_data.sync(Vec2(), InputState.NOTHING)


def test_set_pos_add_moves_children_to_page_corner():
    page = Page(Vec2(10.0, 20.0), Vec2(100.0, 50.0))
    label = page.add_element(Label(Vec2(5.0, 5.0), "hi"))
    page.set_pos_add(Vec2(1.0, 2.0))
    assert label.pos_add == page.left_top()
    assert page.left_top() == Vec2(1.0, 2.0) + page.left_top_relative()


def test_mouse_is_passed_to_children():
    clicks = []
    page = Page(Vec2(10.0, 20.0), Vec2(100.0, 50.0))
    button = page.add_element(ButtonBase(Vec2(20.0, 20.0), Vec2(10.0, 10.0), lambda: clicks.append(1)))
    page.set_pos_add(Vec2())
    mouse_data.left_pressed = True
    centre = (button.left_top() + button.right_bottom()) * 0.5
    page.on_mouse_on_me(centre)
    assert clicks == [1]
    assert not mouse_data.left_pressed


def test_step_steps_children():
    page = Page()
    seen = []
    label = page.add_element(Label(Vec2(), "x"))
    label.func_step = seen.append
    page.step()
    assert seen == [label]


def test_draw_background_then_children_offset():
    page = Page(Vec2(10.0, 20.0), Vec2(100.0, 50.0))
    label = page.add_element(Label(Vec2(5.0, 5.0), "hi"))
    canvas = Canvas()
    page.draw(canvas)
    background, edge, text = canvas.commands
    assert isinstance(background, RectangleCommand)
    assert background.left_top == page.left_top_relative()
    assert background.right_bottom == page.right_bottom_relative()
    assert background.color == BACKGROUND_COLOR
    assert edge.color == BACKGROUND_EDGE_COLOR and edge.outline_width == 1.0
    assert isinstance(text, TextCommand)
    assert text.pos == page.left_top_relative() + label.pos


def test_drag_follows_mouse_until_release():
    page = DraggablePage(Vec2(10.0, 10.0), Vec2(50.0, 50.0))
    page.view_size = Vec2(500.0, 500.0)
    start = page.left_top()
    mouse_data.left_pressed = True
    mouse_data.mouse_pos = Vec2(20.0, 20.0)
    page.on_mouse_on_me(Vec2(20.0, 20.0))
    assert page.dragging
    assert page.point_in_me(Vec2(999.0, 999.0))

    mouse_data.left_pressed = False
    delta = Vec2(100.0, 50.0)
    mouse_data.mouse_pos = Vec2(20.0, 20.0) + delta
    page.step()
    assert page.left_top() == start + delta

    mouse_data.left_released = True
    page.step()
    assert not page.dragging


def test_press_on_child_does_not_drag():
    page = DraggablePage(Vec2(0.0, 0.0), Vec2(100.0, 100.0))
    button = page.add_element(ButtonBase(Vec2(50.0, 50.0), Vec2(20.0, 20.0)))
    page.set_pos_add(Vec2())
    mouse_data.left_pressed = True
    page.on_mouse_on_me((button.left_top() + button.right_bottom()) * 0.5)
    assert not page.dragging


def test_step_keeps_page_inside_view():
    page = DraggablePage(Vec2(0.0, 0.0), Vec2(50.0, 50.0))
    page.view_size = Vec2(500.0, 500.0)
    page.set_pos(Vec2(480.0, -30.0))
    page.step()
    assert page.left_top() == Vec2(450.0, 0.0)


def make_resizable():
    return DraggableResizablePage(Vec2(0.0, 0.0), Vec2(16, 16), Vec2(4, 4), Vec2(2, 2))


def test_resizable_size_is_cells_times_grid():
    page = make_resizable()
    assert page.size == Vec2(64.0, 64.0)


def test_set_size_snaps_to_cells_and_respects_minimum():
    page = make_resizable()
    page.set_size(Vec2(160.0, 8.0))
    assert page.grid_size.x == 10
    assert page.grid_size.y == page.grid_min_size.y
    assert page.size == Vec2(
        page.cell_size.x * page.grid_size.x, page.cell_size.y * page.grid_size.y
    )


def test_grid_below_minimum_is_raised():
    page = DraggableResizablePage(Vec2(), Vec2(8, 8), Vec2(1, 1), Vec2(2, 3))
    assert page.grid_size == Vec2(2, 3)


def test_set_grid_replaces_cell_and_grid():
    page = make_resizable()
    page.set_grid(Vec2(10, 20), Vec2(5, 5))
    assert page.cell_size == Vec2(10, 20)
    assert page.size == Vec2(50.0, 100.0)


def test_resize_from_handle():
    page = make_resizable()
    page.view_size = Vec2(1000.0, 1000.0)
    mouse_data.left_pressed = True
    page.on_mouse_on_me(page.right_bottom())
    assert page.resizing
    assert page.cursor == RESIZE_CURSOR
    assert page.point_in_me(Vec2(999.0, 999.0))

    mouse_data.left_pressed = False
    mouse_data.mouse_pos = Vec2(96.0, 48.0)
    page.step()
    assert page.size == Vec2(96.0, 48.0)
    assert page.grid_size == Vec2(6, 3)

    mouse_data.left_released = True
    page.step()
    assert not page.resizing


def test_press_away_from_handle_drags():
    page = make_resizable()
    mouse_data.left_pressed = True
    mouse_data.mouse_pos = Vec2(5.0, 5.0)
    page.on_mouse_on_me(Vec2(5.0, 5.0))
    assert page.dragging
    assert not page.resizing


def test_resizable_draw_adds_corner_lines():
    page = make_resizable()
    canvas = Canvas()
    page.draw(canvas)
    lines = canvas.commands[-2:]
    assert all(isinstance(c, LineCommand) for c in lines)
    assert all(c.width == 2.0 for c in lines)
    rb = page.right_bottom_relative()
    assert all(c.start.x == rb.x and c.end.y == rb.y for c in lines)
    assert page.cursor is None