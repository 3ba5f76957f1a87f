# materials/dielectric.py
import math
from typing import Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.core.utils import reflect, refract
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material (glass, water) described by its index of refraction.
    """
    def __init__(self, ir: float):
        self.ir = ir

    @staticmethod
    def reflectance(cosine: float, ref_idx: float) -> float:
        """
        Schlick's approximation of the Fresnel reflectance.
        """
        r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
        r0 = r0 * r0
        return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

    def refraction_ratio(self, front_face: bool) -> float:
        # Entering the medium from outside, or leaving it.
        return 1.0 / self.ir if front_face else self.ir

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Color, Ray]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        ratio = self.refraction_ratio(rec.front_face)

        unit_direction = ray_in.direction.unit_vector()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return attenuation, Ray(rec.p, direction)

    def __repr__(self) -> str:
        return f"Dielectric(ir={self.ir})"
