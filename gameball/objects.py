"""Objects living in a logic world: the base object, units and obstacles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gameball.world import World


class Object:
    """Anything that lives in a world and is updated every tick."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.actor_initialize = True
        self.tick_count = 0
        self._object_id = world.register_object(self)

    @property
    def object_id(self) -> int:
        return self._object_id

    def update_tick(self) -> None:
        """Advance this object by one logic tick, counting the ticks seen."""
        self.tick_count += 1

    def destroy(self) -> None:
        """Remove this object from its world."""
        self.world.unregister_object(self._object_id)


class Unit(Object):
    """An object owned by a player."""

    def __init__(self, world: World, player_id: int) -> None:
        super().__init__(world)
        self.player_id = player_id
        self._unit_id = world.register_unit(self)

    @property
    def unit_id(self) -> int:
        return self._unit_id

    def destroy(self) -> None:
        self.world.unregister_unit(self._unit_id)
        super().destroy()


class Obstacle(Object):
    """An object that belongs to no player."""

    def __init__(self, world: World) -> None:
        super().__init__(world)
        self._obstacle_id = world.register_obstacle(self)

    @property
    def obstacle_id(self) -> int:
        return self._obstacle_id

    def destroy(self) -> None:
        self.world.unregister_obstacle(self._obstacle_id)
        super().destroy()