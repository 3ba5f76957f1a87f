"""Unit tests for the thin-lens camera.

Tests cover:
- Orthonormal basis and viewport derived from look-from/look-at
- Pinhole rays (zero aperture)
- Lens sampling for depth of field
"""

import math

import pytest

from raytracer.camera import Camera
from raytracer.core.vector import Point3, Vector3


@pytest.fixture
def pinhole():
    return Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                  vfov=90.0, aspect_ratio=2.0, aperture=0.0, focus_dist=1.0)


class TestCameraBasis:
    """Tests for the cached basis and viewport."""

    def test_basis_vectors(self, pinhole):
        assert tuple(pinhole.w) == pytest.approx((0, 0, 1))
        assert tuple(pinhole.u) == pytest.approx((1, 0, 0))
        assert tuple(pinhole.v) == pytest.approx((0, 1, 0))

    def test_basis_is_orthonormal(self):
        cam = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0),
                     vfov=20.0, aspect_ratio=16 / 9, aperture=0.1, focus_dist=10.0)
        for a in (cam.u, cam.v, cam.w):
            assert a.length() == pytest.approx(1.0)
        assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
        assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
        assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

    def test_viewport_extents(self, pinhole):
        assert tuple(pinhole.horizontal) == pytest.approx((4, 0, 0))
        assert tuple(pinhole.vertical) == pytest.approx((0, 2, 0))
        assert tuple(pinhole.lower_left_corner) == pytest.approx((-2, -1, -1))

    def test_viewport_scales_with_focus_distance(self):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=90.0, aspect_ratio=2.0, aperture=0.0, focus_dist=3.0)
        assert tuple(cam.horizontal) == pytest.approx((12, 0, 0))
        assert tuple(cam.lower_left_corner) == pytest.approx((-6, -3, -3))

    def test_lens_radius_is_half_aperture(self):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=40.0, aspect_ratio=1.0, aperture=0.5, focus_dist=2.0)
        assert cam.lens_radius == 0.25


class TestGetRay:
    """Tests for ray generation."""

    def test_center_ray_looks_down_minus_w(self, pinhole, rng):
        ray = pinhole.get_ray(0.5, 0.5, rng)
        assert ray.origin == Point3(0, 0, 0)
        assert tuple(ray.direction) == pytest.approx((0, 0, -1))

    def test_corner_rays(self, pinhole, rng):
        assert tuple(pinhole.get_ray(0, 0, rng).direction) == pytest.approx((-2, -1, -1))
        assert tuple(pinhole.get_ray(1, 1, rng).direction) == pytest.approx((2, 1, -1))

    def test_aperture_offsets_origin_in_lens_plane(self, rng):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=90.0, aspect_ratio=2.0, aperture=2.0, focus_dist=1.0)
        origins = set()
        for _ in range(100):
            ray = cam.get_ray(0.25, 0.75, rng)
            assert ray.origin.z == pytest.approx(0.0)
            assert ray.origin.length() < 1.0
            # Every lens sample still passes through the same point on the focus plane
            assert tuple(ray.at(1.0)) == pytest.approx((-1.0, 0.5, -1.0))
            origins.add(tuple(ray.origin))
        assert len(origins) > 1

    def test_vfov_controls_viewport_height(self):
        cam = Camera(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                     vfov=60.0, aspect_ratio=1.0)
        assert cam.vertical.length() == pytest.approx(2 * math.tan(math.radians(30)))
