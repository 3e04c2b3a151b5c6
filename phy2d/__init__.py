"""Two-dimensional physics: vectors, bodies, collisions, integrators, camera and timer."""

__version__ = "0.1.0"
__all__ = ["body", "camera", "collision", "integration", "timer", "utils", "vector"]