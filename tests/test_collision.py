import pytest

from phy2d.body import Body
from phy2d.collision import CollisionInfo, check_collision, resolve_collision
from phy2d.vector import Vector2D


def make(x, y, radius=1.0, vx=0.0, vy=0.0):
    return Body(Vector2D(x, y), Vector2D(vx, vy), 1.0, radius)


def test_separated_bodies_do_not_collide():
    info = check_collision(make(0.0, 0.0), make(5.0, 0.0))
    assert info.is_colliding is False


def test_touching_bodies_do_not_collide():
    info = check_collision(make(0.0, 0.0), make(2.0, 0.0))
    assert info.is_colliding is False


def test_overlapping_bodies_collide_with_normal_towards_second():
    info = check_collision(make(0.0, 0.0), make(1.0, 0.0))
    assert info.is_colliding is True
    assert info.collision_normal == Vector2D(1.0, 0.0)
    assert info.penetration_depth == pytest.approx(1.0)


def test_normal_is_unit_length():
    info = check_collision(make(0.0, 0.0, 3.0), make(1.0, 1.0, 3.0))
    assert info.is_colliding
    assert info.collision_normal.magnitude() == pytest.approx(1.0)


def test_coincident_bodies_have_zero_normal():
    info = check_collision(make(1.0, 1.0), make(1.0, 1.0))
    assert info.is_colliding
    assert info.collision_normal == Vector2D(0.0, 0.0)


def test_resolve_ignores_non_colliding():
    a = make(0.0, 0.0, vx=1.0)
    b = make(5.0, 0.0, vx=-1.0)
    resolve_collision(a, b, CollisionInfo(False))
    assert a.position == Vector2D(0.0, 0.0)
    assert b.velocity == Vector2D(-1.0, 0.0)


def test_resolve_separates_bodies():
    a = make(0.0, 0.0)
    b = make(1.0, 0.0)
    resolve_collision(a, b, check_collision(a, b))
    assert a.position.distance(b.position) == pytest.approx(a.radius + b.radius)
    assert check_collision(a, b).is_colliding is False


def test_resolve_preserves_velocity_sum():
    a = make(0.0, 0.0, vx=2.0, vy=1.0)
    b = make(1.0, 0.5, vx=-1.0, vy=0.5)
    before = a.velocity + b.velocity
    resolve_collision(a, b, check_collision(a, b))
    after = a.velocity + b.velocity
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_resolve_leaves_tangential_velocity_unchanged():
    a = make(0.0, 0.0, vy=3.0)
    b = make(1.0, 0.0, vy=-2.0)
    resolve_collision(a, b, check_collision(a, b))
    assert a.velocity.y == 3.0
    assert b.velocity.y == -2.0