# materials/lambertian.py
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.core.utils import random_unit_vector
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Color, Ray]:
        # Pick a random scatter direction by adding a random unit vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can cancel the normal almost exactly.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.p, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
