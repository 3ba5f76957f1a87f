# geometry/hittable.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = False, material=None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always against the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the intersection with t_min < t <= t_max, or None if there is none.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
