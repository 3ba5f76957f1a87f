# materials/metal.py
from typing import Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.core.utils import reflect, random_in_unit_sphere
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material


class Metal(Material):
    """
    Metal material with reflective properties. fuzz perturbs the mirror
    direction; 0 is a perfect mirror, values around 1 look brushed.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.unit_vector(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz})"
