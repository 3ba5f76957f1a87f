# geometry/sphere.py
import math
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    The material may be shared with other spheres.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
