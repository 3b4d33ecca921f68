"""A snapshot of one player's movement controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(eq=False)
class PlayerInput:
    """Movement keys held during one frame and the horizontal facing direction."""

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    brake: bool = False
    orientation: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))

    def __post_init__(self) -> None:
        self.orientation = np.array(self.orientation, dtype=float).reshape(3)


def orientation_from_yaw(yaw: float) -> np.ndarray:
    """Return the horizontal unit facing vector for a camera yaw given in degrees."""
    radians = math.radians(yaw)
    return np.array([math.sin(radians), 0.0, -math.cos(radians)])