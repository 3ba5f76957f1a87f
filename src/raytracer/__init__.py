"""Recursive Monte Carlo ray tracer for scenes of spheres.

Subpackages:
    core: Vectors, rays and random sampling helpers
    geometry: Hittable objects (spheres) and the scene list
    materials: Lambertian, metal and dielectric scattering
    camera: Thin-lens camera with depth of field
    renderer: Light transport, sampling loop, tone mapping and image output
"""

__version__ = "0.1.0"
