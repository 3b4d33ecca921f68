"""The logic world: registries of players, units and obstacles over a physics world."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable

from gameball.physics_world import PhysicsWorld
from gameball.player import Player

if TYPE_CHECKING:
    from gameball.objects import Object, Obstacle, Unit

_TICK_DELTA_T = 1.0 / 64.0


class World:
    """Owns the game state; ids of every kind are counted from 1."""

    def __init__(self) -> None:
        self.physics_world = PhysicsWorld()
        self._objects: dict[int, Object] = {}
        self._units: dict[int, Unit] = {}
        self._obstacles: dict[int, Obstacle] = {}
        self._players: dict[int, Player] = {}
        self._next_object_id = 1
        self._next_unit_id = 1
        self._next_obstacle_id = 1
        self._next_player_id = 1
        self._version = 1
        self._events: deque[Callable[[], object]] = deque()

    def __enter__(self) -> World:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def version(self) -> int:
        """Number of ticks run so far, plus one."""
        return self._version

    @property
    def tick_delta_t(self) -> float:
        return _TICK_DELTA_T

    def register_object(self, obj: Object) -> int:
        object_id = self._next_object_id
        self._next_object_id += 1
        self._objects[object_id] = obj
        return object_id

    def unregister_object(self, object_id: int) -> None:
        self._objects.pop(object_id, None)

    def register_unit(self, unit: Unit) -> int:
        unit_id = self._next_unit_id
        self._next_unit_id += 1
        self._units[unit_id] = unit
        return unit_id

    def unregister_unit(self, unit_id: int) -> None:
        self._units.pop(unit_id, None)

    def register_obstacle(self, obstacle: Obstacle) -> int:
        obstacle_id = self._next_obstacle_id
        self._next_obstacle_id += 1
        self._obstacles[obstacle_id] = obstacle
        return obstacle_id

    def unregister_obstacle(self, obstacle_id: int) -> None:
        self._obstacles.pop(obstacle_id, None)

    def register_player(self, player: Player) -> int:
        player_id = self._next_player_id
        self._next_player_id += 1
        self._players[player_id] = player
        return player_id

    def unregister_player(self, player_id: int) -> None:
        self._players.pop(player_id, None)

    def get_object(self, object_id: int) -> Object | None:
        return self._objects.get(object_id)

    def get_unit(self, unit_id: int) -> Unit | None:
        return self._units.get(unit_id)

    def get_obstacle(self, obstacle_id: int) -> Obstacle | None:
        return self._obstacles.get(obstacle_id)

    def get_player(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def create_unit(self, unit_type, player_id: int, *args, **kwargs):
        """Build a unit of the given type owned by the player; it registers itself."""
        return unit_type(self, player_id, *args, **kwargs)

    def create_obstacle(self, obstacle_type, *args, **kwargs):
        """Build an obstacle of the given type; it registers itself."""
        return obstacle_type(self, *args, **kwargs)

    def create_player(self) -> Player:
        return Player(self)

    def remove_player(self, player_id: int) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        player.destroy()
        return True

    def remove_unit(self, unit_id: int) -> bool:
        unit = self.get_unit(unit_id)
        if unit is None:
            return False
        unit.destroy()
        return True

    def remove_obstacle(self, obstacle_id: int) -> bool:
        obstacle = self.get_obstacle(obstacle_id)
        if obstacle is None:
            return False
        obstacle.destroy()
        return True

    def push_event(self, event: Callable[[], object]) -> None:
        """Queue a deferred action; queued actions run through run_events."""
        self._events.append(event)

    def run_events(self) -> int:
        """Run queued actions in the order they were pushed; return how many ran."""
        count = 0
        while self._events:
            self._events.popleft()()
            count += 1
        return count

    def update_tick(self) -> None:
        """Advance physics and every object by one tick."""
        delta_t = self.tick_delta_t
        self.physics_world.apply_gravity(delta_t)
        self.physics_world.solve_collisions()
        for obj in list(self._objects.values()):
            obj.update_tick()
        self.physics_world.solve_collisions()
        self.physics_world.update(delta_t)
        self._version += 1

    def close(self) -> None:
        """Destroy every object, then every player."""
        for obj in list(self._objects.values()):
            obj.destroy()
        for player in list(self._players.values()):
            player.destroy()