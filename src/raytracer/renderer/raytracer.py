# renderer/raytracer.py
import logging
import random
import time
from typing import Optional

import numpy as np

from raytracer.camera.camera import Camera
from raytracer.core.ray import Ray
from raytracer.core.vector import Color
from raytracer.geometry.hittable import Hittable
from raytracer.renderer.tone_mapping import quantize

logger = logging.getLogger(__name__)

# Skips hits caused by floating point error right at the surface a ray leaves
T_MIN = 0.001
INFINITY = float("inf")
MAX_BOUNCES = 50

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background(ray: Ray) -> Color:
    """
    Vertical white to sky-blue gradient seen by rays that escape the scene.
    """
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Color:
    """
    Returns the color seen along the ray. If the ray hits an object, the material
    scatter is followed recursively for at most 'depth' bounces.
    """
    if depth <= 0:
        return Color(0.0, 0.0, 0.0)  # Exceeded recursion depth

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background(ray)

    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return Color(0.0, 0.0, 0.0)
    attenuation, scattered = scatter_result
    return attenuation * ray_color(scattered, world, depth - 1, rng)


def sample_pixel(i: int, j: int, world: Hittable, camera: Camera,
                 width: int, height: int, samples_per_pixel: int,
                 max_depth: int, rng) -> Color:
    """
    Sums samples_per_pixel jittered camera rays through pixel (i, j), where j
    counts rows from the bottom of the image.
    """
    pixel_color = Color(0.0, 0.0, 0.0)
    for _ in range(samples_per_pixel):
        u = (i + rng.random()) / (width - 1)
        v = (j + rng.random()) / (height - 1)
        pixel_color += ray_color(camera.get_ray(u, v, rng), world, max_depth, rng)
    return pixel_color


def render(world: Hittable, camera: Camera, width: int, height: int,
           samples_per_pixel: int, max_depth: int, rng) -> np.ndarray:
    """
    Renders the scene into a linear (not yet gamma corrected) image.

    Returns:
        Array of shape (height, width, 3); row 0 is the top of the image and each
        entry is the mean of the pixel's samples.
    """
    if width < 2 or height < 2:
        raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")

    image = np.zeros((height, width, 3), dtype=np.float64)
    scale = 1.0 / samples_per_pixel

    logger.info("Rendering %dx%d, %d samples per pixel, max depth %d",
                width, height, samples_per_pixel, max_depth)
    start = time.perf_counter()

    # Scanlines run top to bottom, the order the image writers expect
    for j in range(height - 1, -1, -1):
        logger.info("Scanlines remaining: %d", j)
        row = height - 1 - j
        for i in range(width):
            color = sample_pixel(i, j, world, camera, width, height,
                                 samples_per_pixel, max_depth, rng)
            image[row, i] = (color.x * scale, color.y * scale, color.z * scale)

    logger.info("Done in %.2fs", time.perf_counter() - start)
    return image


class Renderer:
    """
    Holds the image settings and the random source for one render of a scene.

    Passing the same seed reproduces the same image.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = MAX_BOUNCES, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Linear image, see render()."""
        return render(world, camera, self.width, self.height,
                      self.samples_per_pixel, self.max_depth, self.rng)

    def render_image(self, world: Hittable, camera: Camera) -> np.ndarray:
        """Gamma corrected 8-bit image of shape (height, width, 3)."""
        return quantize(self.render(world, camera))
