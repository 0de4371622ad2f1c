"""A 2D camera that maps window coordinates into the scene."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec2, deg_to_rad, rad_to_deg


@dataclass(frozen=True)
class _Snapshot:
    viewport_pos: Vec2
    viewport_size: Vec2
    view_size: Vec2
    pos: Vec2
    zoom: float
    rotation: float


class Camera:
    """View parameters of the scene, with a stack to save and restore them.

    ``pos`` is the centre of the view and ``rotation`` is in radians. The view
    rotation is the opposite of the camera rotation.
    """

    def __init__(self) -> None:
        self.window_size = Vec2(1, 1)
        self.viewport_pos = Vec2(0, 0)
        self.viewport_size = Vec2(1, 1)
        self.view_size = Vec2(1, 1)
        self.pos = Vec2(0.0, 0.0)
        self.zoom = 1.0
        self.rotation = 0.0
        self._stack: list[_Snapshot] = []

    @property
    def rotation_degree(self) -> float:
        return rad_to_deg(self.rotation)

    @rotation_degree.setter
    def rotation_degree(self, angle: float) -> None:
        self.rotation = deg_to_rad(angle)

    @property
    def view_rotation(self) -> float:
        return -self.rotation

    @view_rotation.setter
    def view_rotation(self, rad: float) -> None:
        self.rotation = -rad

    @property
    def view_rotation_degree(self) -> float:
        return -rad_to_deg(self.rotation)

    @view_rotation_degree.setter
    def view_rotation_degree(self, angle: float) -> None:
        self.rotation = -deg_to_rad(angle)

    @property
    def depth(self) -> int:
        """Number of saved states on the stack."""
        return len(self._stack)

    def window_to_scene(self, pos_on_window: Vec2) -> Vec2:
        """Convert a point in window pixels to scene coordinates."""
        half_window = self.window_size * 0.5
        ratio = self.view_size / self.window_size
        return (pos_on_window - half_window).rotated(self.view_rotation) * ratio / self.zoom + self.pos

    def set_viewport(self, pos: Vec2, size: Vec2) -> None:
        self.viewport_pos = Vec2(int(pos.x), int(pos.y))
        self.viewport_size = Vec2(int(size.x), int(size.y))

    def push(self) -> None:
        """Save the current view parameters."""
        self._stack.append(
            _Snapshot(
                self.viewport_pos,
                self.viewport_size,
                self.view_size,
                self.pos,
                self.zoom,
                self.rotation,
            )
        )

    def pop(self) -> None:
        """Restore the most recently saved parameters; does nothing if none are saved."""
        if not self._stack:
            return
        saved = self._stack.pop()
        self.view_size = saved.view_size
        self.pos = saved.pos
        self.zoom = saved.zoom
        self.rotation = saved.rotation
        self.set_viewport(saved.viewport_pos, saved.viewport_size)