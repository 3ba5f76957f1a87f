# materials/material.py
from typing import Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are never modified after construction, so one instance can be
    shared by any number of spheres.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
