"""Image preparation: letterboxing to a square and building network input blobs."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass
class Letterbox:
    """A letterboxed image and the transform that produced it."""

    image: np.ndarray
    pad_x: int
    pad_y: int
    scale: float


def _resize(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Resize an 8-bit image with bilinear interpolation, channel by channel."""
    if image.dtype != np.uint8:
        raise ValueError(f"expected an 8-bit image, got {image.dtype}")
    if image.ndim not in (2, 3):
        raise ValueError(f"expected a 2-D or 3-D image, got {image.ndim} dimensions")
    if width <= 0 or height <= 0:
        raise ValueError(f"cannot resize to {width}x{height}")
    if image.shape[0] == height and image.shape[1] == width:
        return image
    if image.ndim == 2:
        resized = Image.fromarray(np.ascontiguousarray(image)).resize(
            (width, height), Image.Resampling.BILINEAR
        )
        return np.asarray(resized)
    planes = [
        np.asarray(
            Image.fromarray(np.ascontiguousarray(plane)).resize(
                (width, height), Image.Resampling.BILINEAR
            )
        )
        for plane in np.moveaxis(image, -1, 0)
    ]
    return np.stack(planes, axis=-1)


def format_to_square(image: np.ndarray, width: int, height: int) -> Letterbox:
    """Scale the image to fit width x height, keeping its aspect ratio, and pad with zeros."""
    rows, cols = image.shape[:2]
    if rows == 0 or cols == 0:
        raise ValueError("cannot letterbox an empty image")
    scale = np.float32(
        min(np.float32(width) / np.float32(cols), np.float32(height) / np.float32(rows))
    )
    resized_w = int(np.float32(cols) * scale)
    resized_h = int(np.float32(rows) * scale)
    pad_x = (width - resized_w) // 2
    pad_y = (height - resized_h) // 2

    resized = _resize(image, resized_w, resized_h)
    canvas = np.zeros((height, width) + image.shape[2:], dtype=image.dtype)
    canvas[pad_y:pad_y + resized_h, pad_x:pad_x + resized_w] = resized
    return Letterbox(image=canvas, pad_x=pad_x, pad_y=pad_y, scale=float(scale))


def blob_from_image(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Return a 1xCxHxW float32 blob scaled to [0, 1] with red and blue swapped."""
    resized = _resize(image, width, height).astype(np.float32) / np.float32(255.0)
    if resized.ndim == 2:
        resized = resized[..., np.newaxis]
    elif resized.shape[2] >= 3:
        resized[..., [0, 2]] = resized[..., [2, 0]]
    return np.ascontiguousarray(np.transpose(resized, (2, 0, 1))[np.newaxis])