"""Rigid circular bodies and their surface materials."""

from __future__ import annotations

from dataclasses import dataclass, field

from phy2d.vector import Vector2D


@dataclass
class Material:
    """Surface properties of a body."""

    friction: float
    restitution: float


@dataclass
class Body:
    """A circular body with position, velocity, mass and radius."""

    position: Vector2D = field(default_factory=Vector2D)
    velocity: Vector2D = field(default_factory=Vector2D)
    mass: float = 1.0
    radius: float = 1.0

    def apply_force(self, force: Vector2D) -> None:
        """Change the velocity by force divided by mass."""
        acceleration = Vector2D(force.x / self.mass, force.y / self.mass)
        self.velocity = self.velocity + acceleration

    def update(self, time_step: float) -> None:
        """Advance the position by velocity over one time step."""
        self.position = self.position + self.velocity * time_step