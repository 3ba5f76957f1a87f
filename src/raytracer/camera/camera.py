# camera/camera.py
import math
from raytracer.core.vector import Point3, Vector3
from raytracer.core.ray import Ray
from raytracer.core.utils import degrees_to_radians, random_in_unit_disk


class Camera:
    """
    Positionable thin-lens camera. The basis and viewport are computed once in
    the constructor and never change afterwards.

    Args:
        look_from: Camera position.
        look_at: Point the camera looks at.
        vup: World "up" used to orient the camera.
        vfov: Vertical field of view in degrees.
        aspect_ratio: Image width divided by height.
        aperture: Lens diameter; 0 gives a pinhole camera with no defocus blur.
        focus_dist: Distance from the lens to the plane in perfect focus.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist

        theta = degrees_to_radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis; the camera looks down -w
        self.w = (look_from - look_at).unit_vector()
        self.u = vup.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        # Scale by focus distance so the viewport sits on the focus plane
        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2.0 -
                                  self.vertical / 2.0 -
                                  self.w * focus_dist)
        self.lens_radius = aperture / 2.0

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through viewport coordinates (s, t) with depth of field."""
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        return Ray(
            self.origin + offset,
            self.lower_left_corner + self.horizontal * s + self.vertical * t
            - self.origin - offset
        )

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, vfov={self.vfov}, "
                f"aspect_ratio={self.aspect_ratio}, aperture={self.aperture}, "
                f"focus_dist={self.focus_dist})")
