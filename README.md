# phy2d

A small toolkit for two-dimensional physics. It provides vectors, circular
bodies with mass and radius, circle-circle collisions, Euler and Verlet
integrators, a camera, a timer and a random number helper. It needs nothing
outside the standard library.

## Installation

```
pip install .
```

## Vectors

`phy2d.vector.Vector2D` is an immutable (frozen dataclass) pair of coordinates
with the usual arithmetic:

```python
from phy2d.vector import Vector2D

a = Vector2D(1.0, 2.0)
b = Vector2D(3.0, 4.0)

a + b              # Vector2D(x=4.0, y=6.0)
a - b              # Vector2D(x=-2.0, y=-2.0)
a * 2.0            # Vector2D(x=2.0, y=4.0)
2.0 * a            # Vector2D(x=2.0, y=4.0)
a.dot(b)           # 11.0
b.magnitude()      # 5.0
b.normalize()      # Vector2D(x=0.6, y=0.8)
a.distance(b)      # 2.828...
```

`Vector2D()` with no arguments is the zero vector. The zero vector normalizes
to the zero vector.

## Bodies and materials

`phy2d.body.Body` is a circular body with `position`, `velocity`, `mass`
(default `1.0`) and `radius` (default `1.0`).

```python
from phy2d.body import Body
from phy2d.vector import Vector2D

body = Body(Vector2D(0.0, 0.0), Vector2D(0.0, 0.0), mass=1.0, radius=1.0)
body.apply_force(Vector2D(10.0, 5.0))   # velocity += force / mass
body.update(1.0)                        # position += velocity * time_step
```

`apply_force` changes the velocity directly by `force / mass`; it does not
scale by a time step.

`phy2d.body.Material` holds `friction` and `restitution` (bounciness). It is a
plain record: nothing else in the package reads it.

## Collisions

Bodies are treated as circles. `check_collision` returns a `CollisionInfo`
with `is_colliding`, the `collision_normal` pointing from the first body to
the second, and the `penetration_depth`. Bodies collide when the distance
between their centres is less than the sum of their radii.

`resolve_collision` moves each body half the penetration depth apart along
the normal and exchanges their relative velocity along the normal. It does
nothing if `is_colliding` is false.

```python
from phy2d.collision import check_collision, resolve_collision

info = check_collision(body_a, body_b)
resolve_collision(body_a, body_b, info)
```

## Integration

```python
from phy2d.integration import euler_integration, verlet_integration

euler_integration(body, 0.1, Vector2D(0.0, -9.8))
verlet_integration(body, 0.1, Vector2D(0.0, -9.8), previous_position)
```

`euler_integration` updates the velocity from `force / mass` first, then the
position from the new velocity. `verlet_integration` computes the new position
from the current and previous positions, sets the velocity to the central
difference between the new and previous positions, and stores the new
position. Both change the body in place.

## Camera

```python
from phy2d.camera import Camera

camera = Camera(Vector2D(0.0, 0.0), 1.0)
camera.move(Vector2D(5.0, 0.0))   # position += direction
camera.zoom_by(2.0)               # zoom *= factor
```

## Timer

```python
from phy2d.timer import Timer

timer = Timer()
timer.start()
seconds = timer.elapsed()   # float seconds since start()
```

`Timer` uses `time.monotonic` unless another clock function is passed to it.
Calling `start()` again restarts it; `elapsed()` before `start()` raises
`RuntimeError`.

## Random numbers

```python
import random
from phy2d.utils import random_float

value = random_float(-1.0, 1.0)                    # module-level random
value = random_float(-1.0, 1.0, random.Random(42))  # a given generator
```

## What it does not do

There is no world object that holds many bodies and steps them together, and
no gravity, drag or spring helpers: you call the integrators and collision
functions on bodies yourself. There is no drawing, window or input handling;
`Camera` only stores a position and zoom.

## Running the tests

```
pip install .[test]
pytest
```