# scenes.py
import logging
from typing import Callable, Dict

from raytracer.core.vector import Point3
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import HittableList
from raytracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets

logger = logging.getLogger(__name__)


def random_scene(rng) -> HittableList:
    """
    The cover scene: a large grey ground, a grid of small randomly placed
    spheres and three large feature spheres (glass, diffuse, metal).
    """
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, DiffusePresets.ground()))

    keep_clear = Point3(4, 0.2, 0)
    glass = DielectricPresets.glass()  # shared by every small glass sphere

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - keep_clear).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                material = DiffusePresets.random(rng)
            elif choose_mat < 0.95:
                material = MetalPresets.random(rng)
            else:
                material = glass
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, glass))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, DiffusePresets.brown()))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.polished()))

    logger.info("Built random scene with %d spheres", len(world))
    return world


def three_spheres(rng=None) -> HittableList:
    """
    Ground plus a diffuse, a glass and a metal sphere side by side around x=0, z=0.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, DiffusePresets.ground()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, DiffusePresets.brown()))
    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.gold()))
    logger.info("Built three-sphere scene with %d spheres", len(world))
    return world


SCENES: Dict[str, Callable[..., HittableList]] = {
    "random": random_scene,
    "three_spheres": three_spheres,
}


def build_scene(name: str, rng) -> HittableList:
    """
    Build a registered scene by name.

    Raises:
        KeyError: If no scene is registered under name
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    return builder(rng)
