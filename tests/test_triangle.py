import numpy as np
import pytest

from olio.ray import Ray
from olio.triangle import Triangle, ray_triangle_hit

P0 = (0.0, 0.0, 0.0)
P1 = (1.0, 0.0, 0.0)
P2 = (0.0, 1.0, 0.0)


def _down_ray(x, y, z=1.0):
    return Ray(np.array([x, y, z]), np.array([0.0, 0.0, -1.0]))


def test_ray_triangle_hit_returns_t_and_uv():
    result = ray_triangle_hit(P0, P1, P2, _down_ray(0.2, 0.3), 0.0, 10.0)
    assert result is not None
    ray_t, uv = result
    assert ray_t == pytest.approx(1.0)
    assert uv == pytest.approx([0.2, 0.3])


def test_hit_point_matches_barycentric_combination():
    ray = Ray(np.array([0.1, 0.2, 3.0]), np.array([0.05, 0.1, -1.0]))
    ray_t, (beta, gamma) = ray_triangle_hit(P0, P1, P2, ray, 0.0, 100.0)
    p0, p1, p2 = map(np.array, (P0, P1, P2))
    expected = (1 - beta - gamma) * p0 + beta * p1 + gamma * p2
    assert ray.at(ray_t) == pytest.approx(expected)


def test_ray_triangle_miss_outside():
    assert ray_triangle_hit(P0, P1, P2, _down_ray(0.8, 0.8), 0.0, 10.0) is None


def test_ray_triangle_parallel_ray_misses():
    ray = Ray(np.array([0.2, 0.2, 1.0]), np.array([1.0, 0.0, 0.0]))
    assert ray_triangle_hit(P0, P1, P2, ray, 0.0, 10.0) is None


@pytest.mark.parametrize("tmin,tmax", [(1.5, 10.0), (0.0, 0.5)])
def test_ray_triangle_respects_t_range(tmin, tmax):
    assert ray_triangle_hit(P0, P1, P2, _down_ray(0.2, 0.2), tmin, tmax) is None


def test_triangle_normal_is_unit_and_perpendicular():
    tri = Triangle([(0, 0, 0), (2, 1, 0), (0, 3, 1)])
    assert np.linalg.norm(tri.normal) == pytest.approx(1.0)
    for edge in (tri.points[1] - tri.points[0], tri.points[2] - tri.points[0]):
        assert np.dot(tri.normal, edge) == pytest.approx(0.0)


def test_default_name_and_incomplete_triangle():
    tri = Triangle()
    assert tri.name == "Triangle"
    assert not tri.is_complete
    assert tri.hit(_down_ray(0.2, 0.2), 0.0, 10.0) is None


def test_hit_front_face():
    tri = Triangle([P0, P1, P2])
    ray = _down_ray(0.2, 0.3)
    record = tri.hit(ray, 0.0, 10.0)
    assert record is not None
    assert record.front_face is True
    assert record.surface is tri
    assert record.point == pytest.approx(ray.at(record.ray_t))
    assert record.normal == pytest.approx(tri.normal)


def test_hit_back_face_flips_normal():
    tri = Triangle([P0, P1, P2])
    ray = Ray(np.array([0.2, 0.3, -1.0]), np.array([0.0, 0.0, 1.0]))
    record = tri.hit(ray, 0.0, 10.0)
    assert record is not None
    assert record.front_face is False
    assert record.normal == pytest.approx(-tri.normal)


def test_set_points_rejects_too_few():
    tri = Triangle()
    with pytest.raises(ValueError):
        tri.set_points([P0, P1])


def test_set_points_keeps_first_three():
    tri = Triangle()
    tri.set_points([P0, P1, P2, (5.0, 5.0, 5.0)])
    assert tri.is_complete
    assert [list(p) for p in tri.points] == [list(P0), list(P1), list(P2)]
    assert np.linalg.norm(tri.normal) == pytest.approx(1.0)