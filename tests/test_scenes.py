"""Tests for the stock scenes and the scene registry."""

import random

import pytest

from raytracer.core.vector import Point3
from raytracer.geometry import HittableList, Sphere
from raytracer.materials import Dielectric, Lambertian, Metal
from raytracer.scenes import SCENES, build_scene, random_scene, three_spheres


class TestRandomScene:
    """Tests for the procedural cover scene."""

    def test_layout(self, rng):
        world = random_scene(rng)
        spheres = list(world)
        assert isinstance(world, HittableList)
        # Ground + at most 22x22 small spheres + 3 feature spheres
        assert 4 < len(world) <= 1 + 22 * 22 + 3
        ground = spheres[0]
        assert ground.center == Point3(0, -1000, 0)
        assert ground.radius == 1000
        assert [s.center for s in spheres[-3:]] == [Point3(0, 1, 0), Point3(-4, 1, 0), Point3(4, 1, 0)]
        assert isinstance(spheres[-3].material, Dielectric)
        assert isinstance(spheres[-2].material, Lambertian)
        assert isinstance(spheres[-1].material, Metal)

    def test_small_spheres_keep_clear_of_metal_sphere(self, rng):
        small = [s for s in random_scene(rng) if s.radius == 0.2]
        assert small
        for s in small:
            assert s.center.y == 0.2
            assert (s.center - Point3(4, 0.2, 0)).length() > 0.9

    def test_glass_material_is_shared(self, rng):
        world = random_scene(rng)
        glass = [s.material for s in world if isinstance(s.material, Dielectric)]
        assert all(m is glass[0] for m in glass)

    def test_same_seed_same_scene(self):
        a = [(tuple(s.center), s.radius, type(s.material)) for s in random_scene(random.Random(5))]
        b = [(tuple(s.center), s.radius, type(s.material)) for s in random_scene(random.Random(5))]
        assert a == b


class TestRegistry:
    """Tests for build_scene."""

    def test_three_spheres(self):
        world = three_spheres()
        assert len(world) == 4
        assert all(isinstance(s, Sphere) for s in world)

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_build_every_scene(self, name, rng):
        assert len(build_scene(name, rng)) > 0

    def test_unknown_scene(self, rng):
        with pytest.raises(KeyError, match="Unknown scene"):
            build_scene("cornell", rng)
