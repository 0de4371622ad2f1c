"""The top-level GUI and the currently active one."""

from __future__ import annotations

from typing import Optional

from ..camera import Camera
from ..input import InputState
from ..texts import Text, draw_text_label
from ..vector import Vec2
from .element import Canvas, Container, mouse_data
from .page import DraggablePage

_LABEL_OFFSET = Vec2(16.0, 0.0)


class GUI(Container):
    """A screen-space layer of elements driven once per frame by ``work``."""

    def work(self, canvas: Canvas, camera: Camera, mouse_pos: Vec2, left_state: InputState) -> None:
        """Run one frame: hit-test, step and draw the elements in screen space.

        ``mouse_pos`` is the cursor in window pixels. The camera is reset to an
        unzoomed, unrotated screen view for the frame and restored afterwards.
        """
        zoom, pos, rotation = camera.zoom, camera.pos, camera.rotation
        camera.zoom = 1.0
        camera.pos = camera.view_size * 0.5
        camera.rotation = 0.0
        try:
            DraggablePage.view_size = camera.view_size
            mouse_data.sync(camera.window_to_scene(mouse_pos), left_state)

            self.synch_pos_add(Vec2())
            self.check_mouse(mouse_data.mouse_pos)
            self.step_elements()
            self.draw_elements(canvas)

            if mouse_data.mouse_label != Text.EMPTY:
                draw_text_label(canvas, mouse_data.mouse_label, mouse_pos + _LABEL_OFFSET)
        finally:
            camera.zoom = zoom
            camera.pos = pos
            camera.rotation = rotation


class _ActiveSlot:
    """Holds the GUI that is currently shown, if any."""

    def __init__(self) -> None:
        self.gui: Optional[GUI] = None

    def replace(self, gui: Optional[GUI]) -> Optional[GUI]:
        previous, self.gui = self.gui, gui
        return previous


_active = _ActiveSlot()


def current_gui() -> Optional[GUI]:
    """Return the GUI that is currently shown, or None."""
    return _active.gui


def set_gui(gui: Optional[GUI]) -> None:
    """Make ``gui`` the current GUI."""
    _active.replace(gui)


def unset_gui(gui: Optional[GUI] = None) -> None:
    """Clear the current GUI; if ``gui`` is given, only when it is the current one."""
    if gui is None or gui is _active.gui:
        _active.replace(None)


def set_or_unset_gui(gui: Optional[GUI], set_it: bool) -> None:
    """Set ``gui`` when ``set_it`` is true, otherwise unset it."""
    (set_gui if set_it else unset_gui)(gui)