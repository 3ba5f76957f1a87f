"""
Configuration settings for the ray tracer
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from raytracer.camera.camera import Camera
from raytracer.core.vector import Point3, Vector3
from raytracer.scenes import SCENES

# Image size, sampling and bounce budget per quality level
QUALITY_PRESETS = {
    "draft": {"width": 400, "samples": 10, "bounces": 10},
    "medium": {"width": 1200, "samples": 100, "bounces": 50},
    "final": {"width": 2560, "samples": 500, "bounces": 50},
}

DEFAULT_QUALITY = "draft"


class ConfigError(ValueError):
    """Raised for render settings that cannot produce an image."""


@dataclass
class CameraSettings:
    look_from: Tuple[float, float, float] = (13.0, 2.0, 3.0)
    look_at: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    vup: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    vfov: float = 20.0
    aperture: float = 0.1
    focus_dist: float = 10.0


@dataclass
class RenderSettings:
    image_width: int = QUALITY_PRESETS[DEFAULT_QUALITY]["width"]
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = QUALITY_PRESETS[DEFAULT_QUALITY]["samples"]
    max_depth: int = QUALITY_PRESETS[DEFAULT_QUALITY]["bounces"]
    output: str = "image.ppm"
    seed: Optional[int] = None
    scene: str = "random"
    camera: CameraSettings = field(default_factory=CameraSettings)

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        """Settings for a named quality preset, with any field overridden."""
        if quality not in QUALITY_PRESETS:
            raise ConfigError(
                f"Unknown quality {quality!r}, expected one of {sorted(QUALITY_PRESETS)}")
        preset = QUALITY_PRESETS[quality]
        values = {
            "image_width": preset["width"],
            "samples_per_pixel": preset["samples"],
            "max_depth": preset["bounces"],
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> "RenderSettings":
        """
        Check every setting, raising ConfigError on the first bad value.
        """
        if self.aspect_ratio <= 0:
            raise ConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_width < 2 or self.image_height < 2:
            raise ConfigError(
                f"image must be at least 2x2 pixels, got {self.image_width}x{self.image_height}")
        if self.samples_per_pixel < 1:
            raise ConfigError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be positive, got {self.max_depth}")
        if self.scene not in SCENES:
            raise ConfigError(f"Unknown scene {self.scene!r}, expected one of {sorted(SCENES)}")
        if not self.output:
            raise ConfigError("output path must not be empty")

        cam = self.camera
        if not 0.0 < cam.vfov < 180.0:
            raise ConfigError(f"vfov must be in (0, 180) degrees, got {cam.vfov}")
        if cam.aperture < 0:
            raise ConfigError(f"aperture must not be negative, got {cam.aperture}")
        if cam.focus_dist <= 0:
            raise ConfigError(f"focus_dist must be positive, got {cam.focus_dist}")
        view = Vector3(*cam.look_from) - Vector3(*cam.look_at)
        if view.near_zero():
            raise ConfigError("look_from and look_at must differ")
        if Vector3(*cam.vup).cross(view).near_zero():
            raise ConfigError("vup must not be parallel to the viewing direction")
        return self

    def build_camera(self) -> Camera:
        cam = self.camera
        return Camera(Point3(*cam.look_from), Point3(*cam.look_at), Vector3(*cam.vup),
                      cam.vfov, self.aspect_ratio, cam.aperture, cam.focus_dist)
