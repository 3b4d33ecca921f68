# gameball

Game logic for a rolling-ball game, built on a small rigid-body physics
engine. Spheres and cubes are simulated with gravity, impulse-based collision
response, elasticity and friction. A tick-driven game world of players, units
and obstacles sits on top of the physics. A smoothed third-person camera
controller is included as well.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Physics

`gameball.physics_world.PhysicsWorld` holds spheres and cubes. Each is keyed
by an integer id, and ids start at 1. An unknown id passed to `get_sphere` or
`get_cube` raises `KeyError`. The constructor accepts an optional
`random.Random`, which sets the order in which contacts are resolved.

```python
from gameball.physics_world import PhysicsWorld

physics = PhysicsWorld()
ball_id = physics.create_sphere(radius=1.0, mass=1.0)
floor_id = physics.create_cube(side_length=20.0, mass=float("inf"))

ball = physics.get_sphere(ball_id)
ball.position[:] = (0.0, 1.0, 0.0)
floor = physics.get_cube(floor_id)
floor.position[:] = (0.0, -10.0, 0.0)
floor.gravity[:] = 0.0

dt = 1.0 / 64.0
physics.apply_gravity(dt)
physics.solve_collisions()
physics.update(dt)
```

`solve_collisions` checks contacts between pairs of spheres and between
spheres and cubes. It does not check cube against cube. It keeps applying
impulses until no contact is still approaching.

The building blocks can also be used on their own:

- `gameball.rigid_body` provides the following:
  - `RigidBody`, a dataclass with mass, inertia, position, velocity, angular
    velocity, orientation, gravity, friction and elasticity.
  - `Sphere` and `Cube`, whose inertia is derived from their size and mass.
    A cube of infinite mass is immovable.
  - `rotation_matrix`, which builds a rotation from an axis-angle vector.
- `gameball.collision` provides the following:
  - `detect_sphere_sphere` and `detect_sphere_cube` each return a
    `Collision` (contact point, normal and penetration) or `None`.
  - `solve_collision` applies the normal and friction impulses between two
    bodies. It returns `False` if the bodies are already separating.

## Game world

`gameball.world.World` runs the game in ticks of 1/64 second. Each call to
`update_tick` does the following:

1. Applies gravity.
2. Resolves collisions.
3. Calls `update_tick` on every object.
4. Resolves collisions again.
5. Advances the physics and bumps `World.version`.

```python
from gameball.world import World
from gameball.player_input import PlayerInput
from gameball.regular_ball import RegularBall
from gameball.block import Block

with World() as world:
    player = world.create_player()
    ball = world.create_unit(RegularBall, player.player_id, (0.0, 1.0, 0.0), 1.0, 1.0)
    player.set_primary_unit(ball.unit_id)
    world.create_obstacle(Block, (0.0, -50.0, 0.0), float("inf"), False, 100.0)

    for _ in range(100):
        player.set_input(PlayerInput(move_forward=True))
        world.update_tick()

    print(ball.position)
```

The game objects are:

- `gameball.objects.Object` is the base class for anything in the world.
  `Unit` is an object owned by a player, and `Obstacle` is an object owned by
  none. Each registers itself with the world on creation. `destroy()` removes
  it again.
- `gameball.player.Player` holds a primary unit id and the pending
  `PlayerInput`. `take_player_input()` returns the pending input and resets it
  to the default.
- `gameball.player_input.PlayerInput` records which movement keys (forward,
  backward, left, right, brake) are held, plus a facing direction.
  `orientation_from_yaw` turns a camera yaw in degrees into that direction.
- `gameball.regular_ball.RegularBall` is a unit backed by a physics sphere.
  When it is its owner's primary unit, it steers by spinning the sphere.
  Brake stops the spin. Its linear and angular velocity are damped every tick.
- `gameball.block.Block` is an obstacle backed by a physics cube. By default
  it has infinite mass and no gravity.

`World.remove_player`, `remove_unit` and `remove_obstacle` each return whether
anything was removed. `World.close()` destroys all objects and players. It is
also called when the world is used as a context manager.

### Deferred changes

The helpers in `gameball.events` queue work on a world through
`World.push_event`:

- `event_create_player`
- `event_create_unit`
- `event_create_obstacle`
- `event_remove_player`
- `event_remove_unit`
- `event_remove_obstacle`

Queued work runs only when `World.run_events()` is called. It runs in the
order it was pushed, and the call returns how many events ran. `update_tick`
does not run the queue.

### Background ticking

`gameball.logic.Manager` owns a `World`, which is created if none is given.
It ticks the world on a background thread between `start()` and `stop()`.
The default interval is one tick delta. Hold `manager.lock` while touching
the world from another thread. Calling `start()` twice raises `RuntimeError`,
and so does calling `stop()` without a running thread.

## Camera

`gameball.camera.CameraControllerThirdPerson` orbits a center point.

You set the wanted center, pitch/yaw, distance and vertical field of view
with `set_center`, `set_pitch_yaw`, `set_distance` and `set_fov_y`.

Each `update(delta_time)` does the following:

- Moves the interpolation factor toward 1.
- Blends from the stored state to the target. Angles turn the short way
  round.
- Computes `view_matrix` and a depth-zero-to-one `projection_matrix`.
- If the controller was given a callable, calls it with copies of both
  matrices.

`store_current_state()` makes the current blend the new starting point.
`cursor_move` turns mouse motion into yaw and pitch, with pitch clamped to
±89 degrees.

## What this package does not do

There is no window, renderer, asset loading, keyboard or mouse handling, and
no command-line program. The package simulates and computes camera matrices
only. Drawing the scene and feeding real input are left to the caller.