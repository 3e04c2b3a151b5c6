"""Numerical integrators that advance a body under a force."""

from __future__ import annotations

from phy2d.body import Body
from phy2d.vector import Vector2D


def _acceleration(body: Body, force: Vector2D) -> Vector2D:
    return Vector2D(force.x / body.mass, force.y / body.mass)


def euler_integration(body: Body, time_step: float, force: Vector2D) -> None:
    """Advance the body one step with semi-implicit Euler integration."""
    acceleration = _acceleration(body, force)
    body.velocity = body.velocity + acceleration * time_step
    body.position = body.position + body.velocity * time_step


def verlet_integration(
    body: Body, time_step: float, force: Vector2D, previous_position: Vector2D
) -> None:
    """Advance the body one step with position Verlet integration."""
    acceleration = _acceleration(body, force)
    new_position = (
        body.position * 2 - previous_position + acceleration * (time_step * time_step)
    )
    body.velocity = (new_position - previous_position) * (1.0 / (2 * time_step))
    body.position = new_position