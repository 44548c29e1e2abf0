"""Tests for primary ray generation."""

import random

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3


def _pinhole(**kwargs):
    params = dict(look_from=Vector3(0, 0, 0), look_at=Vector3(0, 0, -1),
                  vup=Vector3(0, 1, 0), vfov=90, aspect_ratio=1.0,
                  aperture=0.0, focus_dist=1.0)
    params.update(kwargs)
    return Camera(**params)


class TestCamera:
    """Tests for the thin-lens camera basis and rays."""

    def test_basis(self):
        camera = _pinhole()
        assert tuple(camera.w) == pytest.approx((0, 0, 1))
        assert tuple(camera.u) == pytest.approx((1, 0, 0))
        assert tuple(camera.v) == pytest.approx((0, 1, 0))
        assert tuple(camera.lower_left_corner) == pytest.approx((-1, -1, -1))

    def test_center_ray(self, rng):
        ray = _pinhole().get_ray(0.5, 0.5, rng)
        assert tuple(ray.origin) == (0, 0, 0)
        assert tuple(ray.direction) == pytest.approx((0, 0, -1))

    def test_corner_rays(self, rng):
        camera = _pinhole()
        assert tuple(camera.get_ray(0, 0, rng).direction) == pytest.approx((-1, -1, -1))
        assert tuple(camera.get_ray(1, 1, rng).direction) == pytest.approx((1, 1, -1))

    def test_aspect_ratio_widens_viewport(self, rng):
        camera = _pinhole(aspect_ratio=2.0)
        assert tuple(camera.get_ray(1, 0.5, rng).direction) == pytest.approx((2, 0, -1))

    def test_fixed_shutter_time(self, rng):
        camera = _pinhole(time0=0.25, time1=0.25)
        assert all(camera.get_ray(0.5, 0.5, rng).time == 0.25 for _ in range(10))

    def test_shutter_interval(self, rng):
        camera = _pinhole(time0=0.0, time1=1.0)
        times = [camera.get_ray(0.5, 0.5, rng).time for _ in range(100)]
        assert all(0.0 <= t <= 1.0 for t in times)
        assert len(set(times)) > 1

    def test_defocus_rays_converge_on_focus_plane(self):
        camera = _pinhole(aperture=2.0, focus_dist=3.0)
        rng = random.Random(8)
        for s, t in ((0.5, 0.5), (0.1, 0.9), (0.7, 0.2)):
            pinhole = _pinhole(focus_dist=3.0).get_ray(s, t, random.Random(0))
            focus_point = pinhole.origin + pinhole.direction
            ray = camera.get_ray(s, t, rng)
            assert tuple(ray.origin + ray.direction) == pytest.approx(tuple(focus_point))
            assert ray.origin.z == pytest.approx(0.0)
            assert ray.origin.length() <= 1.0

    def test_update_camera_after_move(self, rng):
        camera = _pinhole()
        camera.look_from = Vector3(0, 0, 5)
        camera.look_at = Vector3(0, 0, 4)
        camera.update_camera()
        ray = camera.get_ray(0.5, 0.5, rng)
        assert tuple(ray.origin) == (0, 0, 5)
        assert tuple(ray.direction) == pytest.approx((0, 0, -1))
