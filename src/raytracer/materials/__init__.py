from raytracer.materials.material import Material
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal
from raytracer.materials.dielectric import Dielectric

__all__ = ["Material", "Lambertian", "Metal", "Dielectric"]
