import numpy as np
import pytest

from gameball.player_input import PlayerInput, orientation_from_yaw


def test_defaults():
    player_input = PlayerInput()
    assert not any(
        (
            player_input.move_forward,
            player_input.move_backward,
            player_input.move_left,
            player_input.move_right,
            player_input.brake,
        )
    )
    assert np.allclose(player_input.orientation, [0.0, 0.0, 1.0])


def test_orientation_is_copied_into_array():
    source = [1.0, 0.0, 0.0]
    player_input = PlayerInput(orientation=source)
    source[0] = 5.0
    assert np.allclose(player_input.orientation, [1.0, 0.0, 0.0])
    assert player_input.orientation.shape == (3,)


def test_orientation_from_zero_yaw():
    assert np.allclose(orientation_from_yaw(0.0), [0.0, 0.0, -1.0])


@pytest.mark.parametrize("yaw", [0.0, 33.0, 90.0, 181.5, -47.0, 359.0])
def test_orientation_is_horizontal_unit(yaw):
    direction = orientation_from_yaw(yaw)
    assert direction[1] == 0.0
    assert np.linalg.norm(direction) == pytest.approx(1.0)


@pytest.mark.parametrize("yaw", [0.0, 12.0, 200.0])
def test_quarter_turn_is_perpendicular(yaw):
    a = orientation_from_yaw(yaw)
    b = orientation_from_yaw(yaw + 90.0)
    assert np.dot(a, b) == pytest.approx(0.0, abs=1e-12)


def test_full_turn_is_identity():
    assert np.allclose(orientation_from_yaw(17.0), orientation_from_yaw(377.0))