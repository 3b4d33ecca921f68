"""Rolling-ball game logic on a small rigid-body physics engine, with a third-person camera controller."""

__version__ = "0.1.0"