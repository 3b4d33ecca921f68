"""A third-person camera that eases toward its target framing."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

_NEAR = 0.1
_FAR = 100.0
_PITCH_LIMIT = 89.0
_CURSOR_SENSITIVITY = 0.1
_EASE_RATE = 2.0


def _wrap_degrees(angle: float) -> float:
    return (angle + 180.0) % 360.0 - 180.0


def _perspective_zo(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [0, 1]."""
    tan_half = math.tan(fov_y / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = far / (near - far)
    projection[3, 2] = -1.0
    projection[2, 3] = -(far * near) / (far - near)
    return projection


class CameraControllerThirdPerson:
    """Orbits a center point; moves from the stored state to the target as the factor goes 0 to 1.

    `camera`, if given, is called with the view and projection matrices after each update.
    """

    def __init__(
        self,
        camera: Callable[[np.ndarray, np.ndarray], object] | None = None,
        aspect: float = 1.0,
    ) -> None:
        self._camera = camera
        self.aspect = float(aspect)
        self._dst_distance = 10.0
        self._dst_center = np.zeros(3)
        self._dst_pitch = 0.0
        self._dst_yaw = 0.0
        self._dst_fov_y = 30.0
        self._src_distance = 10.0
        self._src_center = np.zeros(3)
        self._src_pitch = 0.0
        self._src_yaw = 0.0
        self._src_fov_y = 30.0
        self._factor = 0.0
        self.view_matrix = np.eye(4)
        self.projection_matrix = np.eye(4)

    @property
    def interpolation_factor(self) -> float:
        return self._factor

    def set_center(self, center) -> None:
        self._dst_center = np.array(center, dtype=float).reshape(3)

    def set_pitch_yaw(self, pitch: float, yaw: float) -> None:
        self._dst_pitch = float(pitch)
        self._dst_yaw = float(yaw)

    def set_distance(self, distance: float) -> None:
        self._dst_distance = float(distance)

    def set_fov_y(self, fov_y: float) -> None:
        self._dst_fov_y = float(fov_y)

    def _lerp(self, source, target):
        return source + (target - source) * self._factor

    def get_pitch_yaw(self) -> tuple[float, float]:
        """Current (pitch, yaw) in degrees, turning the short way round."""
        diff_pitch = _wrap_degrees(self._dst_pitch - self._src_pitch)
        diff_yaw = _wrap_degrees(self._dst_yaw - self._src_yaw)
        return (
            self._src_pitch + diff_pitch * self._factor,
            self._src_yaw + diff_yaw * self._factor,
        )

    def get_center(self) -> np.ndarray:
        return self._lerp(self._src_center, self._dst_center)

    def get_distance(self) -> float:
        return self._lerp(self._src_distance, self._dst_distance)

    def get_fov_y(self) -> float:
        return self._lerp(self._src_fov_y, self._dst_fov_y)

    def set_interpolation_factor(self, factor: float = 0.0) -> None:
        self._factor = float(factor)

    def store_current_state(self) -> None:
        """Make the current interpolated framing the new starting point."""
        self._src_center = self.get_center()
        self._src_pitch, self._src_yaw = self.get_pitch_yaw()
        self._src_distance = self.get_distance()
        self._src_fov_y = self.get_fov_y()

    def update(self, delta_time: float) -> None:
        """Advance the easing and recompute the view and projection matrices."""
        self._factor = min(max(self._factor + delta_time * _EASE_RATE, 0.0), 1.0)
        pitch_deg, yaw_deg = self.get_pitch_yaw()
        center = self.get_center()
        distance = self.get_distance()
        fov_y = self.get_fov_y()

        pitch = math.radians(pitch_deg)
        yaw = math.radians(yaw_deg)
        back = np.array(
            [math.cos(pitch) * -math.sin(yaw), math.sin(pitch), math.cos(pitch) * math.cos(yaw)]
        )
        right = np.array([math.cos(yaw), 0.0, math.sin(yaw)])
        up = np.cross(back, right)
        eye = center + back * distance

        rotation = np.stack([right, up, back])
        view = np.eye(4)
        view[:3, :3] = rotation
        view[:3, 3] = -(rotation @ eye)

        self.view_matrix = view
        self.projection_matrix = _perspective_zo(math.radians(fov_y), self.aspect, _NEAR, _FAR)
        if self._camera is not None:
            self._camera(self.view_matrix.copy(), self.projection_matrix.copy())

    def cursor_move(self, x: float, y: float) -> None:
        self._dst_yaw += x * _CURSOR_SENSITIVITY
        self._dst_pitch += y * _CURSOR_SENSITIVITY
        self._dst_pitch = min(max(self._dst_pitch, -_PITCH_LIMIT), _PITCH_LIMIT)