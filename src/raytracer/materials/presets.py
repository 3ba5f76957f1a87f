# materials/presets.py
from raytracer.core.vector import Color
from raytracer.materials.metal import Metal
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.dielectric import Dielectric


class ColorPresets:
    """Common colors used by the stock scenes."""
    GROUND_GREY = Color(0.5, 0.5, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)


class DiffusePresets:
    """Predefined diffuse materials."""

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(ColorPresets.GROUND_GREY)

    @staticmethod
    def brown() -> Lambertian:
        return Lambertian(ColorPresets.BROWN)

    @staticmethod
    def random(rng) -> Lambertian:
        # Product of two samples skews towards darker, more saturated colors.
        return Lambertian(Color.random(rng) * Color.random(rng))


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def polished() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.0)

    @staticmethod
    def random(rng) -> Metal:
        return Metal(Color.random_range(rng, 0.5, 1.0), fuzz=rng.uniform(0.0, 0.5))


class DielectricPresets:
    """Predefined dielectric materials with their refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)
