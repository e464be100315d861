"""Mouse controls for panning, rotating and zooming the map view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class MouseButton(IntEnum):
    """Pointer button numbers as reported by the window system."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5


@dataclass
class ViewState:
    """Where and how the map is viewed, and the state of the mouse."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    x_rotation: float = 0.0
    y_rotation: float = 0.0
    z_rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    mouse_x: int = 0
    mouse_y: int = 0
    left_pressed: bool = False
    right_pressed: bool = False
    zoom_in_effect: float = 1.1
    zoom_out_effect: float = 0.9
    rotation_effect: float = 0.1

    def _zoom(self, factor: float) -> None:
        self.scale_x *= factor
        self.scale_y *= factor
        self.scale_z *= factor

    def mouse_down(self, button: int, x: int, y: int) -> None:
        """Zoom on scroll, or start a left (pan) or right (rotate) drag."""
        if button == MouseButton.SCROLL_UP:
            self._zoom(self.zoom_in_effect)
        if button == MouseButton.SCROLL_DOWN:
            self._zoom(self.zoom_out_effect)
        if button == MouseButton.LEFT:
            self.left_pressed = True
        if button == MouseButton.RIGHT:
            self.right_pressed = True
        self.mouse_x, self.mouse_y = x, y

    def mouse_up(self, button: int, x: int, y: int) -> None:
        """End a drag started with ``button``."""
        if button == MouseButton.LEFT:
            self.left_pressed = False
        if button == MouseButton.RIGHT:
            self.right_pressed = False
        self.mouse_x, self.mouse_y = x, y

    def mouse_drag(self, x: int, y: int) -> None:
        """Pan or rotate by the pointer's movement since the last event."""
        dx = x - self.mouse_x
        dy = y - self.mouse_y
        if self.left_pressed:
            self.offset_x += dx
            self.offset_y += dy
        if self.right_pressed:
            self.x_rotation += dy * self.rotation_effect * 0.1
            self.y_rotation += dx * self.rotation_effect * 0.1
        self.mouse_x, self.mouse_y = x, y