import pytest

from softray.ray import Ray
from softray.vector import XYZ


def test_at_zero_is_origin():
    ray = Ray(XYZ(1.0, 2.0, 3.0), XYZ(0.0, 0.0, -1.0))
    assert ray.at(0.0) == ray.origin


@pytest.mark.parametrize("t", [-2.0, 0.5, 1.0, 7.25])
def test_at_moves_along_direction(t):
    ray = Ray(XYZ(1.0, -1.0, 0.5), XYZ(0.3, 2.0, -4.0))
    assert ray.at(t) - ray.origin == t * ray.direction


def test_default_time_is_zero():
    ray = Ray(XYZ(), XYZ(1.0, 0.0, 0.0))
    assert ray.time == 0.0


def test_time_is_kept():
    ray = Ray(XYZ(), XYZ(1.0, 0.0, 0.0), 0.75)
    assert ray.time == 0.75