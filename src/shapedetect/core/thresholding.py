"""Grayscale conversion, Otsu thresholding and binarization."""

import logging

import numpy as np

from .errors import InvalidInput

log = logging.getLogger(__name__)

FOREGROUND = 255
BACKGROUND = 0


def flat_bytes(data):
    """View any bytes-like or array data as a flat uint8 array."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    return np.asarray(data, dtype=np.uint8).reshape(-1)


def to_grayscale(buffer):
    """Convert an RGBA buffer to an HxW intensity array (alpha ignored).

    Raises InvalidInput if the dimensions are not positive, the buffer is
    not 4-channel, or its length is not width * height * 4.
    """
    width, height = buffer.width, buffer.height
    if width <= 0 or height <= 0:
        raise InvalidInput(f"image dimensions must be positive, got {width}x{height}")
    if buffer.channels != 4:
        raise InvalidInput(f"expected an RGBA buffer, got {buffer.channels} channels")
    data = flat_bytes(buffer.data)
    expected = width * height * 4
    if data.size != expected:
        raise InvalidInput(
            f"buffer length {data.size} does not match {width}x{height} RGBA ({expected})"
        )
    rgba = data.reshape(height, width, 4).astype(np.float64)
    gray = 0.299 * rgba[:, :, 0] + 0.587 * rgba[:, :, 1] + 0.114 * rgba[:, :, 2]
    return np.clip(np.rint(gray), 0, 255).astype(np.uint8)


def compute_histogram(gray):
    """256-bin intensity histogram."""
    return np.bincount(np.asarray(gray, dtype=np.uint8).ravel(), minlength=256)


def otsu_threshold(gray, fallback=127):
    """Threshold maximizing the between-class variance of the histogram.

    Ties keep the smallest intensity. Returns ``fallback`` when no split
    leaves both classes non-empty.
    """
    hist = compute_histogram(gray).tolist()
    total = sum(hist)
    weighted_sum = sum(i * count for i, count in enumerate(hist))

    sum_b = 0
    w_b = 0
    max_between = 0.0
    threshold = fallback
    for i, count in enumerate(hist):
        w_b += count
        if w_b == 0:
            continue
        w_f = total - w_b
        if w_f == 0:
            break
        sum_b += i * count
        m_b = sum_b / w_b
        m_f = (weighted_sum - sum_b) / w_f
        between = w_b * w_f * (m_b - m_f) ** 2
        if between > max_between:
            max_between = between
            threshold = i
    log.debug("Otsu threshold: %d (total=%d)", threshold, total)
    return threshold


def binarize(gray, threshold):
    """Mark pixels darker than ``threshold`` as foreground (255), the rest 0."""
    return np.where(np.asarray(gray) < threshold, FOREGROUND, BACKGROUND).astype(np.uint8)
