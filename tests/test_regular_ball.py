import math
import random

import numpy as np
import pytest

from gameball.block import Block
from gameball.player_input import PlayerInput
from gameball.regular_ball import RegularBall
from gameball.world import World

_MAX_TICK = 500


@pytest.fixture
def world():
    w = World()
    yield w
    w.close()


def _populate(world):
    player = world.create_player()
    unit = world.create_unit(RegularBall, player.player_id, (0.0, 1.0, 0.0), 1.0, 1.0)
    player.set_primary_unit(unit.unit_id)
    world.create_obstacle(Block, (0.0, -50.0, 0.0), math.inf, False, 100.0)
    return player.player_id, unit.unit_id


def _make_case(yaw, forward_key, backward_key, left_key, right_key):
    forward = np.array([math.cos(math.radians(yaw)), 0.0, math.sin(math.radians(yaw))])
    forward /= np.linalg.norm(forward)
    right = np.cross(forward, [0.0, 1.0, 0.0])
    right /= np.linalg.norm(right)
    player_input = PlayerInput(
        move_forward=forward_key,
        move_backward=backward_key,
        move_left=left_key,
        move_right=right_key,
        orientation=forward,
    )
    combined = np.zeros(2)
    if forward_key:
        combined += [0.0, 1.0]
    if backward_key:
        combined += [0.0, -1.0]
    if left_key:
        combined += [-1.0, 0.0]
    if right_key:
        combined += [1.0, 0.0]
    expected = np.array([0.0, 1.0, 0.0])
    length = np.linalg.norm(combined)
    if length > 0.0:
        combined /= length
        expected = expected + (combined[0] * right + combined[1] * forward) * 20.0
    return player_input, expected


def _random_cases(count, seed):
    rng = random.Random(seed)
    return [
        (
            rng.uniform(0.0, 360.0),
            bool(rng.randint(0, 1)),
            bool(rng.randint(0, 1)),
            bool(rng.randint(0, 1)),
            bool(rng.randint(0, 1)),
        )
        for _ in range(count)
    ]


def _closest_distance(world, player_id, unit_id, player_input, expected):
    closest = math.inf
    for _ in range(_MAX_TICK):
        world.get_player(player_id).set_input(player_input)
        world.update_tick()
        ball = world.get_unit(unit_id)
        closest = min(closest, float(np.linalg.norm(ball.position - expected)))
        if closest < 0.2:
            break
    return closest


@pytest.mark.parametrize("case", _random_cases(16, 2023))
def test_functional_random_inputs(world, case):
    player_input, expected = _make_case(*case)
    player_id, unit_id = _populate(world)
    closest = _closest_distance(world, player_id, unit_id, player_input, expected)
    assert closest < 0.2
    assert isinstance(world.get_unit(unit_id), RegularBall)


@pytest.mark.parametrize(
    "case",
    [
        (0.0, True, False, False, False),
        (90.0, False, False, True, False),
        (200.0, False, True, False, True),
        (45.0, False, False, False, False),
    ],
)
def test_functional_fixed_inputs(world, case):
    player_input, expected = _make_case(*case)
    player_id, unit_id = _populate(world)
    closest = _closest_distance(world, player_id, unit_id, player_input, expected)
    assert closest < 0.2
    assert world.get_player(player_id).primary_unit_id == unit_id


def test_construction_configures_sphere(world):
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (1.0, 2.0, 3.0), 2.0, 3.0)
    sphere = world.physics_world.get_sphere(ball.sphere_id)
    np.testing.assert_allclose(sphere.position, [1.0, 2.0, 3.0])
    assert sphere.radius == 2.0
    assert sphere.mass == 3.0
    assert sphere.elasticity == 1.0
    assert sphere.friction == 10.0
    np.testing.assert_allclose(sphere.gravity, [0.0, -9.8, 0.0])
    assert world.get_unit(ball.unit_id) is ball
    assert ball.player_id == player.player_id


def test_set_mass_and_radius(world):
    ball = RegularBall(world, 1, (0.0, 0.0, 0.0))
    ball.set_mass(2.0)
    ball.set_radius(3.0)
    sphere = world.physics_world.get_sphere(ball.sphere_id)
    assert sphere.mass == 2.0
    assert sphere.radius == 3.0
    assert ball.mass == 2.0
    assert ball.radius == 3.0
    np.testing.assert_allclose(sphere.inertia @ sphere.inertia_inv, np.eye(3), atol=1e-12)


def test_set_gravity(world):
    ball = RegularBall(world, 1, (0.0, 0.0, 0.0))
    ball.set_gravity((0.0, 0.0, -1.0))
    np.testing.assert_allclose(world.physics_world.get_sphere(ball.sphere_id).gravity, [0.0, 0.0, -1.0])


def test_set_motion_round_trip(world):
    ball = RegularBall(world, 1, (0.0, 0.0, 0.0))
    ball.set_motion((1.0, 0.0, 0.0), (0.0, 2.0, 0.0), np.eye(3), (0.1, 0.2, 0.3))
    sphere = world.physics_world.get_sphere(ball.sphere_id)
    np.testing.assert_allclose(sphere.position, [1.0, 0.0, 0.0])
    np.testing.assert_allclose(sphere.velocity, [0.0, 2.0, 0.0])
    np.testing.assert_allclose(sphere.inertia @ sphere.angular_velocity, [0.1, 0.2, 0.3])
    np.testing.assert_allclose(ball.angular_momentum, [0.1, 0.2, 0.3])
    np.testing.assert_allclose(ball.position, [1.0, 0.0, 0.0])


def test_set_motion_defaults_reset_state(world):
    ball = RegularBall(world, 1, (5.0, 5.0, 5.0))
    ball.set_motion()
    np.testing.assert_allclose(ball.position, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(ball.orientation, np.eye(3))


def test_update_tick_damps_velocity_without_owner(world):
    ball = RegularBall(world, 99, (0.0, 0.0, 0.0))
    ball.set_motion((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
    ball.update_tick()
    assert 0.0 < ball.velocity[0] < 4.0
    assert ball.velocity[1] == 0.0


def test_brake_stops_spin(world):
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 0.0, 0.0))
    player.set_primary_unit(ball.unit_id)
    ball.set_motion(angular_momentum=(1.0, 1.0, 1.0))
    player.set_input(PlayerInput(brake=True, move_forward=True))
    ball.update_tick()
    np.testing.assert_allclose(ball.angular_momentum, [0.0, 0.0, 0.0])


def test_primary_unit_consumes_input(world):
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 0.0, 0.0))
    player.set_primary_unit(ball.unit_id)
    player.set_input(PlayerInput(move_forward=True))
    ball.update_tick()
    assert player.player_input.move_forward is False
    assert np.linalg.norm(ball.angular_momentum) > 0.0


def test_non_primary_unit_ignores_input(world):
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 0.0, 0.0))
    player.set_input(PlayerInput(move_forward=True))
    ball.update_tick()
    assert player.player_input.move_forward is True
    np.testing.assert_allclose(ball.angular_momentum, [0.0, 0.0, 0.0])