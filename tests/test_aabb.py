import pytest

from softray.aabb import AABB
from softray.ray import Ray
from softray.vector import XYZ

UNIT = AABB(XYZ(-1.0, -1.0, -1.0), XYZ(1.0, 1.0, 1.0))


def test_ray_through_box_hits():
    ray = Ray(XYZ(0.0, 0.0, -5.0), XYZ(0.0, 0.0, 1.0))
    assert UNIT.hit(ray, 0.0, float("inf")) is True


def test_ray_in_negative_direction_hits():
    ray = Ray(XYZ(0.0, 0.0, 5.0), XYZ(0.0, 0.0, -1.0))
    assert UNIT.hit(ray, 0.0, float("inf")) is True


def test_ray_beside_box_misses():
    ray = Ray(XYZ(5.0, 5.0, -5.0), XYZ(0.0, 0.0, 1.0))
    assert UNIT.hit(ray, 0.0, float("inf")) is False


def test_box_beyond_max_t_misses():
    ray = Ray(XYZ(0.0, 0.0, -5.0), XYZ(0.0, 0.0, 1.0))
    assert UNIT.hit(ray, 0.0, 1.0) is False


def test_diagonal_ray_hits():
    ray = Ray(XYZ(-5.0, -5.0, -5.0), XYZ(1.0, 1.0, 1.0))
    assert UNIT.hit(ray, 0.0, float("inf")) is True


def test_merge_takes_componentwise_extremes():
    a = AABB(XYZ(0.0, -2.0, 3.0), XYZ(1.0, 5.0, 4.0))
    b = AABB(XYZ(-1.0, 0.0, 2.0), XYZ(2.0, 1.0, 6.0))
    merged = a.merge(b)
    assert merged.minimum == XYZ(-1.0, -2.0, 2.0)
    assert merged.maximum == XYZ(2.0, 5.0, 6.0)


def test_merge_is_commutative():
    a = AABB(XYZ(0.0, -2.0, 3.0), XYZ(1.0, 5.0, 4.0))
    b = AABB(XYZ(-1.0, 0.0, 2.0), XYZ(2.0, 1.0, 6.0))
    assert a.merge(b) == b.merge(a)


@pytest.mark.parametrize("box", [UNIT, AABB(XYZ(2.0, 2.0, 2.0), XYZ(3.0, 3.0, 3.0))])
def test_merge_with_self_is_identity(box):
    assert box.merge(box) == box