"""
Image loading and saving with Pillow
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from .convert import NUM_CHANNELS
from .errors import ImageLoadError, ImageSaveError

JPEG_QUALITY = 100

# Formats that cannot store an alpha channel
RGB_ONLY_FORMATS = {"JPEG", "MPO", "PPM", "EPS"}


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    channels: int
    requested_channels: int = NUM_CHANNELS


def load_image(image_path):
    """โหลดภาพและแปลงเป็น RGBA format

    Returns ``(pixels, info)`` where ``pixels`` is a uint8
    ``(height, width, 4)`` array.
    """
    try:
        with Image.open(image_path) as img:
            channels = len(img.getbands())
            # แปลงเป็น RGBA
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            pixels = np.array(img, dtype=np.uint8)
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Error loading image {str(image_path)!r}: {e}") from e

    height, width, _ = pixels.shape
    if width == 0 or height == 0:
        raise ImageLoadError(f"Image {str(image_path)!r} has no pixels")

    return pixels, ImageInfo(width=width, height=height, channels=channels)


def save_image(image_path, pixels, info, quality=JPEG_QUALITY):
    """บันทึกภาพ RGBA ลงไฟล์ และตรวจว่าไฟล์ถูกเขียนจริง"""
    expected = (info.height, info.width, info.requested_channels)
    if pixels.shape != expected:
        raise ValueError(f"pixel buffer shape {pixels.shape} does not match image {expected}")

    image_path = Path(image_path)
    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    fmt = Image.registered_extensions().get(image_path.suffix.lower())
    if fmt in RGB_ONLY_FORMATS:
        img = img.convert("RGB")

    try:
        img.save(image_path, quality=quality)
    except (OSError, ValueError) as e:
        raise ImageSaveError(f"Error saving image {str(image_path)!r}: {e}") from e

    if not image_path.is_file() or image_path.stat().st_size == 0:
        raise ImageSaveError(f"Image {str(image_path)!r} was not written")
