"""State and camera control for a small animated solar system scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .transforms import look_at, normal_matrix, perspective, rotate, scale, translate

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
FIELD_OF_VIEW = math.radians(45.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

SUN_SCALE = 1.5
SUN_COLOR = (1.0, 0.8, 0.2)
SPIN_AXIS = (0.0, 1.0, 0.0)

MOUSE_SENSITIVITY = 0.01
PITCH_LIMIT = 1.5
SCROLL_STEP = 0.5
MIN_DISTANCE = 3.0
MAX_DISTANCE = 50.0


@dataclass
class CelestialBody:
    """A sphere that circles a centre in the x-z plane while spinning."""

    color: tuple[float, float, float]
    radius: float
    orbit_radius: float
    orbit_speed: float
    rotation_speed: float
    orbit_angle: float = 0.0
    rotation_angle: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def _advance(self, delta_time: float) -> None:
        self.orbit_angle += self.orbit_speed * delta_time
        self.rotation_angle += self.rotation_speed * delta_time

    def update(self, delta_time: float) -> None:
        """Advance the body and place it on its orbit about the origin."""
        self.orbit_around((0.0, 0.0, 0.0), delta_time)

    def orbit_around(self, center, delta_time: float) -> None:
        """Advance the body and place it on its orbit about ``center``."""
        self._advance(delta_time)
        cx, cy, cz = (float(c) for c in center)
        self.position = np.array(
            [
                cx + self.orbit_radius * math.cos(self.orbit_angle),
                cy,
                cz + self.orbit_radius * math.sin(self.orbit_angle),
            ]
        )

    def model_matrix(self) -> np.ndarray:
        model = translate(np.identity(4), self.position)
        model = rotate(model, self.rotation_angle, SPIN_AXIS)
        return scale(model, self.radius)


@dataclass(frozen=True)
class RenderItem:
    """One sphere to draw: its transforms and surface colour."""

    kind: str
    model: np.ndarray
    normal: np.ndarray
    color: tuple[float, float, float]


class SolarSystem:
    """A sun, two planets and a moon, with an orbiting mouse-driven camera."""

    def __init__(self) -> None:
        self.camera_pos = np.array([0.0, 5.0, 15.0])
        self.camera_target = np.zeros(3)
        self.camera_up = np.array([0.0, 1.0, 0.0])
        self.camera_distance = 15.0
        self.camera_angle_x = 0.0
        self.camera_angle_y = 0.0

        self.first_mouse = True
        self.mouse_pressed = False
        self.last_x = 0.0
        self.last_y = 0.0

        self.planets = [
            CelestialBody((0.8, 0.3, 0.3), 0.8, 4.0, 2.0, 5.0),
            CelestialBody((0.3, 0.5, 0.8), 1.2, 7.0, 1.0, 3.0),
        ]
        self.moon = CelestialBody((0.7, 0.7, 0.7), 0.3, 2.0, 8.0, 10.0)

        self.current_time = 0.0
        self.delta_time = 0.0
        self.last_frame = 0.0

    def step(self, current_time: float) -> None:
        """Advance the scene to the clock reading ``current_time``."""
        self.delta_time = current_time - self.last_frame
        self.last_frame = current_time
        self.current_time = current_time
        self.update(self.delta_time)

    def update(self, delta_time: float) -> None:
        """Move every body by ``delta_time`` and refresh the camera."""
        for planet in self.planets:
            planet.update(delta_time)
        if len(self.planets) > 1:
            self.moon.orbit_around(self.planets[1].position, delta_time)
        self.update_camera()

    def update_camera(self) -> None:
        """Place the camera on its sphere from the current angles."""
        pitch = self.camera_angle_x
        yaw = self.camera_angle_y
        self.camera_pos = self.camera_distance * np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )

    def on_mouse_move(self, x: float, y: float) -> None:
        """Turn the camera while the button is held."""
        if self.first_mouse:
            self.last_x, self.last_y = x, y
            self.first_mouse = False
        if not self.mouse_pressed:
            return
        x_offset = (x - self.last_x) * MOUSE_SENSITIVITY
        y_offset = (self.last_y - y) * MOUSE_SENSITIVITY
        self.last_x, self.last_y = x, y
        self.camera_angle_y += x_offset
        self.camera_angle_x = min(max(self.camera_angle_x + y_offset, -PITCH_LIMIT), PITCH_LIMIT)

    def on_mouse_button(self, pressed: bool, x: float, y: float) -> None:
        """Start or stop a drag; ``x`` and ``y`` give the cursor position."""
        self.mouse_pressed = pressed
        if pressed:
            self.last_x, self.last_y = x, y

    def on_scroll(self, y_offset: float) -> None:
        """Zoom the camera in or out within fixed limits."""
        distance = self.camera_distance - y_offset * SCROLL_STEP
        self.camera_distance = min(max(distance, MIN_DISTANCE), MAX_DISTANCE)

    def view_matrix(self) -> np.ndarray:
        return look_at(self.camera_pos, self.camera_target, self.camera_up)

    def projection_matrix(self) -> np.ndarray:
        return perspective(FIELD_OF_VIEW, WINDOW_WIDTH / WINDOW_HEIGHT, NEAR_PLANE, FAR_PLANE)

    def model_matrices(self) -> list[RenderItem]:
        """Return the sun, then each planet, then the moon, ready to draw."""
        sun_model = scale(np.identity(4), SUN_SCALE)
        items = [RenderItem("sun", sun_model, normal_matrix(sun_model), SUN_COLOR)]
        for planet in self.planets:
            model = planet.model_matrix()
            items.append(RenderItem("planet", model, normal_matrix(model), planet.color))
        moon_model = self.moon.model_matrix()
        items.append(RenderItem("moon", moon_model, normal_matrix(moon_model), self.moon.color))
        return items