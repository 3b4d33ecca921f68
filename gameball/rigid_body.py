"""Rigid bodies: the shared state plus sphere and cube shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

_DEFAULT_GRAVITY = (0.0, -9.8, 0.0)


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _matrix(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3, 3)


def rotation_matrix(rotation_vector) -> np.ndarray:
    """Return the rotation by |v| radians about the axis v (identity for v = 0)."""
    vector = _vector(rotation_vector)
    angle = float(np.linalg.norm(vector))
    if angle < 1e-12:
        return np.eye(3)
    x, y, z = vector / angle
    skew = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    return np.eye(3) + math.sin(angle) * skew + (1.0 - math.cos(angle)) * (skew @ skew)


@dataclass(eq=False, kw_only=True)
class RigidBody:
    """Mass, inertia and motion state of a body; inertia is in body space."""

    mass: float = 1.0
    inertia: np.ndarray = field(default_factory=lambda: np.eye(3))
    inertia_inv: np.ndarray = field(default_factory=lambda: np.eye(3))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3))
    gravity: np.ndarray = field(default_factory=lambda: _vector(_DEFAULT_GRAVITY))
    friction: float = 0.0
    elasticity: float = 0.0

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.inertia = _matrix(self.inertia)
        self.inertia_inv = _matrix(self.inertia_inv)
        self.position = _vector(self.position)
        self.velocity = _vector(self.velocity)
        self.angular_velocity = _vector(self.angular_velocity)
        self.orientation = _matrix(self.orientation)
        self.gravity = _vector(self.gravity)

    def update(self, delta_time: float) -> None:
        """Advance position and orientation by one time step."""
        self.position = self.position + self.velocity * delta_time
        self.orientation = rotation_matrix(self.angular_velocity * delta_time) @ self.orientation


@dataclass(eq=False, kw_only=True)
class Sphere(RigidBody):
    """A solid sphere."""

    radius: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.set_radius_mass(self.radius, self.mass)

    def set_radius_mass(self, radius: float = 1.0, mass: float = 1.0) -> None:
        self.radius = float(radius)
        self.mass = float(mass)
        self.inertia = np.eye(3) * (0.4 * self.mass * self.radius * self.radius)
        self.inertia_inv = np.linalg.inv(self.inertia)


@dataclass(eq=False, kw_only=True)
class Cube(RigidBody):
    """A solid cube; an infinite mass makes it immovable."""

    side_length: float = 1.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.set_side_length_mass(self.side_length, self.mass)

    def set_side_length_mass(self, side_length: float = 1.0, mass: float = 1.0) -> None:
        self.side_length = float(side_length)
        self.mass = float(mass)
        if math.isinf(self.mass):
            self.inertia = np.eye(3) * self.mass
            self.inertia_inv = np.zeros((3, 3))
        else:
            self.inertia = np.eye(3) * (self.mass * self.side_length * self.side_length / 6.0)
            self.inertia_inv = np.linalg.inv(self.inertia)