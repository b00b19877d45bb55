import pytest

from softray.ray import Ray
from softray.triangle import Rect, Triangle
from softray.vector import XYZ

INF = float("inf")
P0 = XYZ(0.0, 0.0, -1.0)
P1 = XYZ(1.0, 0.0, -1.0)
P2 = XYZ(0.0, 1.0, -1.0)


def _down_ray(x, y):
    return Ray(XYZ(x, y, 0.0), XYZ(0.0, 0.0, -1.0))


def test_ray_hits_inside_triangle():
    tri = Triangle(P0, P1, P2)
    ray = _down_ray(0.2, 0.2)
    record = tri.hit(ray, 0.0, INF)
    assert record is not None
    assert record.obj is tri
    assert record.point == ray.at(record.t)
    assert record.point.z == pytest.approx(P0.z)
    assert record.normal.dot(ray.direction) < 0.0
    assert record.normal.length() == pytest.approx(1.0)


def test_ray_outside_triangle_but_inside_rect():
    ray = _down_ray(0.8, 0.8)
    assert Triangle(P0, P1, P2).hit(ray, 0.0, INF) is None
    assert Rect(P0, P1, P2).hit(ray, 0.0, INF) is not None


def test_edge_point_hits_rect_only():
    ray = _down_ray(0.5, 0.0)
    assert Triangle(P0, P1, P2).hit(ray, 0.0, INF) is None
    assert Rect(P0, P1, P2).hit(ray, 0.0, INF) is not None


def test_outside_rect_misses():
    assert Rect(P0, P1, P2).hit(_down_ray(1.5, 0.5), 0.0, INF) is None


def test_parallel_ray_misses():
    ray = Ray(XYZ(0.2, 0.2, -1.0), XYZ(1.0, 0.0, 0.0))
    assert Triangle(P0, P1, P2).hit(ray, 0.0, INF) is None


def test_t_outside_range_misses():
    tri = Triangle(P0, P1, P2)
    assert tri.hit(_down_ray(0.2, 0.2), 0.0, 0.5) is None
    assert tri.hit(_down_ray(0.2, 0.2), 2.0, INF) is None


def test_uv_at_vertices():
    tri = Triangle(P0, P1, P2)
    assert tuple(tri.uv(P0)) == pytest.approx((0.0, 0.0))
    assert tuple(tri.uv(P1)) == pytest.approx((1.0, 0.0))
    assert tuple(tri.uv(P2)) == pytest.approx((0.0, 1.0))


def test_contains_rules():
    tri = Triangle(P0, P1, P2)
    rect = Rect(P0, P1, P2)
    assert tri.contains(0.2, 0.4, 0.4) is True
    assert tri.contains(0.0, 0.5, 0.5) is False
    assert rect.contains(-1.0, 1.0, 1.0) is True
    assert rect.contains(0.0, 1.5, 0.5) is False


def test_bounding_box_spans_vertices():
    tri = Triangle(XYZ(1.0, -2.0, 3.0), XYZ(-1.0, 4.0, 0.0), XYZ(2.0, 0.0, -5.0))
    box = tri.bounding_box(0.0, 1.0)
    assert box.minimum == XYZ(-1.0, -2.0, -5.0)
    assert box.maximum == XYZ(2.0, 4.0, 3.0)


def test_degenerate_triangle_rejected():
    with pytest.raises(ValueError):
        Triangle(XYZ(0.0, 0.0, 0.0), XYZ(1.0, 1.0, 1.0), XYZ(2.0, 2.0, 2.0))