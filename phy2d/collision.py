"""Circle-circle collision detection and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from phy2d.body import Body
from phy2d.vector import Vector2D


@dataclass(frozen=True)
class CollisionInfo:
    """Result of a collision test between two bodies."""

    is_colliding: bool
    collision_normal: Vector2D = field(default_factory=Vector2D)
    penetration_depth: float = 0.0


def check_collision(body1: Body, body2: Body) -> CollisionInfo:
    """Test whether two circular bodies overlap."""
    offset = body2.position - body1.position
    combined_radius = body1.radius + body2.radius
    dist = offset.magnitude()
    if dist < combined_radius:
        return CollisionInfo(True, offset.normalize(), combined_radius - dist)
    return CollisionInfo(False)


def resolve_collision(body1: Body, body2: Body, collision: CollisionInfo) -> None:
    """Push overlapping bodies apart and exchange velocity along the normal."""
    if not collision.is_colliding:
        return
    normal = collision.collision_normal
    correction = normal * (collision.penetration_depth / 2.0)
    body1.position = body1.position - correction
    body2.position = body2.position + correction
    relative_velocity = (body2.velocity - body1.velocity).dot(normal)
    impulse = normal * relative_velocity
    body1.velocity = body1.velocity - impulse
    body2.velocity = body2.velocity + impulse