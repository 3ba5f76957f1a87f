# renderer/image_io.py
import logging
import os
import tempfile
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


class ImageWriteError(OSError):
    """Raised when a rendered image cannot be persisted."""


def format_ppm(pixels: np.ndarray) -> str:
    """
    Encode an 8-bit image of shape (height, width, 3) as ASCII PPM (P3).
    Rows are written top to bottom, one "r g b" line per pixel.
    """
    height, width = pixels.shape[:2]
    lines = [f"P3\n{width} {height}\n255"]
    for r, g, b in pixels.reshape(-1, 3):
        lines.append(f"{int(r)} {int(g)} {int(b)}")
    return "\n".join(lines) + "\n"


def _pil_format(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    fmt = Image.registered_extensions().get(ext)
    if fmt is None:
        raise ImageWriteError(f"Unsupported image extension: {ext or '(none)'}")
    # Some formats Pillow reads have no encoder
    if fmt.upper() not in Image.SAVE:
        raise ImageWriteError(f"Pillow cannot write {fmt} images ({ext})")
    return fmt


def _default_file_mode() -> int:
    # mkstemp creates 0600 files; give the final image the usual umask mode
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_image(pixels: np.ndarray, path: Union[str, os.PathLike]) -> str:
    """
    Save an 8-bit image of shape (height, width, 3) to path.

    .ppm files are written as ASCII P3; any other extension Pillow can write is
    written through Pillow. The file is written next to its destination and
    renamed into place, so a failed save never leaves a partial image.

    Args:
        pixels: uint8 array of shape (height, width, 3), top row first
        path: Destination file

    Returns:
        The path written

    Raises:
        ImageWriteError: If the extension is unsupported or writing fails
    """
    path = os.fspath(path)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ImageWriteError(f"Expected an (height, width, 3) image, got shape {pixels.shape}")

    is_ppm = path.lower().endswith(".ppm")
    fmt = None if is_ppm else _pil_format(path)

    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    except OSError as e:
        raise ImageWriteError(f"Cannot write image to {path}: {e}") from e

    try:
        if is_ppm:
            with os.fdopen(fd, "w", encoding="ascii") as f:
                f.write(format_ppm(pixels))
        else:
            os.close(fd)
            Image.fromarray(pixels.astype(np.uint8)).save(tmp_path, format=fmt)
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, path)
    except (OSError, ValueError, KeyError) as e:
        raise ImageWriteError(f"Cannot write image to {path}: {e}") from e
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
