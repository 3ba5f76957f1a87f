from raytracer.renderer.raytracer import Renderer, ray_color, render, sample_pixel
from raytracer.renderer.tone_mapping import quantize
from raytracer.renderer.image_io import ImageWriteError, save_image

__all__ = [
    "Renderer", "ray_color", "render", "sample_pixel",
    "quantize",
    "ImageWriteError", "save_image",
]
