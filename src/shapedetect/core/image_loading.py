"""Decode image files into RGBA pixel buffers."""

import numpy as np
from PIL import Image

from .errors import ImageLoadError
from .models import PixelBuffer


def buffer_from_array(img_array):
    """Wrap an HxWx3 or HxWx4 uint8 array as a flat RGBA buffer."""
    img_array = np.asarray(img_array, dtype=np.uint8)
    if img_array.ndim != 3 or img_array.shape[2] not in (3, 4):
        raise ValueError(f"expected an HxWx3 or HxWx4 array, got shape {img_array.shape}")
    height, width, channels = img_array.shape
    if channels == 3:
        alpha = np.full((height, width, 1), 255, dtype=np.uint8)
        img_array = np.concatenate([img_array, alpha], axis=2)
    return PixelBuffer(img_array.reshape(-1).copy(), width, height, 4)


def load_image(image_path):
    """Load an image file as an RGBA pixel buffer."""
    try:
        with Image.open(image_path) as img:
            img_array = np.array(img.convert("RGBA"))
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"could not load image {image_path}: {e}") from e
    return buffer_from_array(img_array)
