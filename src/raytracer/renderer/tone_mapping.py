# renderer/tone_mapping.py
import numpy as np

# Upper clamp before scaling by 256 so a full channel maps to 255
MAX_INTENSITY = 0.999


def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    Approximate gamma-2 encoding of a linear radiance image.
    """
    return np.sqrt(np.maximum(linear, 0.0))


def quantize(linear: np.ndarray) -> np.ndarray:
    """
    Gamma correct, clamp to [0, 0.999] and convert a linear image to 8-bit.
    """
    mapped = gamma_correct(linear).clip(0.0, MAX_INTENSITY)
    return (mapped * 256.0).astype(np.uint8)

