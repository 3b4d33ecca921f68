"""A cube-shaped obstacle backed by a cube in the physics world."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.objects import Obstacle
from gameball.rigid_body import Cube

if TYPE_CHECKING:
    from gameball.world import World

_GRAVITY = (0.0, -9.8, 0.0)
_ELASTICITY = 0.25
_FRICTION = 0.5


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _matrix(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3, 3)


class Block(Obstacle):
    """A cube obstacle; an infinite mass makes it immovable."""

    def __init__(
        self,
        world: World,
        position,
        mass: float = math.inf,
        gravity: bool = False,
        side_length: float = 1.0,
    ) -> None:
        super().__init__(world)
        self._position = _vector(position)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)
        self._inertia = np.eye(3)
        self._side_length = float(side_length)
        self._mass = float(mass)
        self._gravity = _vector(_GRAVITY) if gravity else np.zeros(3)

        self.cube_id = world.physics_world.create_cube()
        self.set_gravity(self._gravity)
        self.set_mass(self._mass)
        self.set_side_length(self._side_length)
        self.set_motion(self._position, self._velocity, self._orientation, self._angular_momentum)
        cube = self._cube
        cube.elasticity = _ELASTICITY
        cube.friction = _FRICTION

    @property
    def _cube(self) -> Cube:
        return self.world.physics_world.get_cube(self.cube_id)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def velocity(self) -> np.ndarray:
        return self._velocity.copy()

    @property
    def orientation(self) -> np.ndarray:
        return self._orientation.copy()

    @property
    def angular_momentum(self) -> np.ndarray:
        return self._angular_momentum.copy()

    @property
    def inertia(self) -> np.ndarray:
        """Body-space inertia tensor of the cube."""
        return self._inertia.copy()

    @property
    def gravity(self) -> np.ndarray:
        return self._gravity.copy()

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def side_length(self) -> float:
        return self._side_length

    def set_mass(self, mass: float) -> None:
        cube = self._cube
        self._mass = float(mass)
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_gravity(self, gravity) -> None:
        self._gravity = _vector(gravity)
        self._cube.gravity = self._gravity.copy()

    def set_side_length(self, side_length: float) -> None:
        cube = self._cube
        self._side_length = float(side_length)
        cube.set_side_length_mass(self._side_length, self._mass)
        self._inertia = cube.inertia.copy()

    def set_motion(self, position, velocity, orientation, angular_momentum) -> None:
        self._position = _vector(position)
        self._velocity = _vector(velocity)
        self._orientation = _matrix(orientation)
        self._angular_momentum = _vector(angular_momentum)

        cube = self._cube
        cube.position = self._position.copy()
        cube.velocity = self._velocity.copy()
        cube.orientation = self._orientation.copy()
        cube.angular_velocity = cube.inertia_inv @ self._angular_momentum

    def update_tick(self) -> None:
        """Copy the cube's motion state back into this block."""
        cube = self._cube
        self._position = cube.position.copy()
        self._velocity = cube.velocity.copy()
        self._orientation = cube.orientation.copy()
        with np.errstate(invalid="ignore"):
            self._angular_momentum = cube.inertia @ cube.angular_velocity