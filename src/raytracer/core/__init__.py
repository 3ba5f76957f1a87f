from raytracer.core.vector import Vector3, Point3, Color, dot, cross, unit_vector
from raytracer.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Ray", "dot", "cross", "unit_vector"]
