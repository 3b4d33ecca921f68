"""A rolling ball unit steered by its owner's input."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from gameball.objects import Unit
from gameball.player_input import PlayerInput
from gameball.rigid_body import Sphere

if TYPE_CHECKING:
    from gameball.world import World

_GRAVITY = (0.0, -9.8, 0.0)
_UP = np.array([0.0, 1.0, 0.0])
_ELASTICITY = 1.0
_FRICTION = 10.0
_ANGULAR_ACCELERATION = math.radians(2880.0)
_VELOCITY_DECAY = 0.5
_ANGULAR_VELOCITY_DECAY = 0.2


def _vector(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _matrix(values) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3, 3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class RegularBall(Unit):
    """A ball backed by a sphere in the physics world."""

    def __init__(
        self,
        world: World,
        player_id: int,
        position,
        radius: float = 1.0,
        mass: float = 1.0,
    ) -> None:
        super().__init__(world, player_id)
        self._radius = float(radius)
        self._mass = float(mass)
        self._position = _vector(position)
        self._velocity = np.zeros(3)
        self._orientation = np.eye(3)
        self._angular_momentum = np.zeros(3)

        self.sphere_id = world.physics_world.create_sphere()
        sphere = self._sphere
        sphere.position = self._position.copy()
        sphere.set_radius_mass(self._radius, self._mass)
        sphere.orientation = self._orientation.copy()
        sphere.velocity = self._velocity.copy()
        sphere.angular_velocity = np.zeros(3)
        sphere.elasticity = _ELASTICITY
        sphere.friction = _FRICTION
        sphere.gravity = _vector(_GRAVITY)

    @property
    def _sphere(self) -> Sphere:
        return self.world.physics_world.get_sphere(self.sphere_id)

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
    def radius(self) -> float:
        return self._radius

    @property
    def mass(self) -> float:
        return self._mass

    def _steer(self, sphere: Sphere, player_input: PlayerInput, delta_time: float) -> None:
        forward = _normalize(player_input.orientation)
        right = _normalize(np.cross(forward, _UP))

        direction = np.zeros(3)
        if player_input.move_forward:
            direction -= right
        if player_input.move_backward:
            direction += right
        if player_input.move_left:
            direction -= forward
        if player_input.move_right:
            direction += forward

        length = float(np.linalg.norm(direction))
        if length > 0.0:
            sphere.angular_velocity = (
                sphere.angular_velocity + direction / length * _ANGULAR_ACCELERATION * delta_time
            )
        if player_input.brake:
            sphere.angular_velocity = np.zeros(3)

    def update_tick(self) -> None:
        """Apply the owner's input if this is its primary unit, damp motion, and sync state."""
        delta_time = self.world.tick_delta_t
        sphere = self._sphere

        owner = self.world.get_player(self.player_id)
        if owner is not None and owner.primary_unit_id == self.unit_id:
            self._steer(sphere, owner.take_player_input(), delta_time)

        sphere.velocity = sphere.velocity * _VELOCITY_DECAY**delta_time
        sphere.angular_velocity = sphere.angular_velocity * _ANGULAR_VELOCITY_DECAY**delta_time

        self._position = sphere.position.copy()
        self._velocity = sphere.velocity.copy()
        self._orientation = sphere.orientation.copy()
        self._angular_momentum = sphere.inertia @ sphere.angular_velocity

    def set_mass(self, mass: float) -> None:
        self._sphere.set_radius_mass(self._radius, mass)
        self._mass = float(mass)

    def set_gravity(self, gravity) -> None:
        self._sphere.gravity = _vector(gravity)

    def set_radius(self, radius: float) -> None:
        self._sphere.set_radius_mass(radius, self._mass)
        self._radius = float(radius)

    def set_motion(
        self,
        position=(0.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=None,
        angular_momentum=(0.0, 0.0, 0.0),
    ) -> None:
        position = _vector(position)
        velocity = _vector(velocity)
        orientation = np.eye(3) if orientation is None else _matrix(orientation)
        angular_momentum = _vector(angular_momentum)

        sphere = self._sphere
        sphere.position = position.copy()
        sphere.velocity = velocity.copy()
        sphere.orientation = orientation.copy()
        sphere.angular_velocity = sphere.inertia_inv @ angular_momentum

        self._position = position
        self._velocity = velocity
        self._orientation = orientation
        self._angular_momentum = angular_momentum