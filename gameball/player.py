"""A player taking part in a logic world."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from gameball.player_input import PlayerInput

if TYPE_CHECKING:
    from gameball.world import World


class Player:
    """A player registered with a world; owns a primary unit and pending input."""

    def __init__(self, world: World) -> None:
        self._world = world
        self._primary_unit_id = 0
        self._input = PlayerInput()
        self._player_id = world.register_player(self)

    @property
    def player_id(self) -> int:
        return self._player_id

    @property
    def primary_unit_id(self) -> int:
        """Id of the unit this player controls; 0 if none was set."""
        return self._primary_unit_id

    @property
    def player_input(self) -> PlayerInput:
        """A copy of the input waiting to be consumed."""
        return replace(self._input)

    def set_primary_unit(self, unit_id: int) -> None:
        self._primary_unit_id = unit_id

    def set_input(self, player_input: PlayerInput) -> None:
        self._input = replace(player_input)

    def take_player_input(self) -> PlayerInput:
        """Return the pending input and reset it to the default."""
        taken = self._input
        self._input = PlayerInput()
        return taken

    def destroy(self) -> None:
        """Remove this player from its world."""
        self._world.unregister_player(self._player_id)