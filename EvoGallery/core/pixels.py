"""RGBA pixel buffers and the luma-weighted fitness comparator."""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Rec. 601 luma weights applied to |dR|, |dG|, |dB|.
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

Color = tuple[int, int, int, int]


class PixelBufferMismatchError(ValueError):
    """Raised when two pixel buffers that must align have different shapes."""


def new_buffer(width: int, height: int) -> np.ndarray:
    """Return a fully transparent ``(height, width, 4)`` uint8 buffer."""
    return np.zeros((int(height), int(width), 4), dtype=np.uint8)


def solid_buffer(width: int, height: int, color: Sequence[int]) -> np.ndarray:
    """Return a buffer filled with one RGBA (or RGB, opaque) colour."""
    rgba = list(color) + [255] * (4 - len(color))
    buffer = new_buffer(width, height)
    buffer[:, :] = np.clip(np.asarray(rgba[:4]), 0, 255).astype(np.uint8)
    return buffer


def ensure_buffer(buffer: np.ndarray) -> np.ndarray:
    """Validate that ``buffer`` is an ``HxWx4`` array and return it as uint8."""
    array = np.asarray(buffer)
    if array.ndim != 3 or array.shape[2] != 4:
        raise PixelBufferMismatchError(
            f"Pixel buffer must have shape (height, width, 4), got {array.shape}."
        )
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise PixelBufferMismatchError("Pixel buffer must not be empty.")
    if array.dtype != np.uint8:
        array = np.clip(array, 0, 255).astype(np.uint8)
    return array


def buffer_size(buffer: np.ndarray) -> tuple[int, int]:
    """Return ``(width, height)`` of a pixel buffer."""
    return int(buffer.shape[1]), int(buffer.shape[0])


def compare_images(current: np.ndarray, target: np.ndarray) -> float:
    """Return similarity in [0, 1] between two equally sized RGBA buffers.

    Each pixel contributes ``0.299*|dR| + 0.587*|dG| + 0.114*|dB|`` normalised
    by 255; the mean over all pixels is subtracted from one. Alpha is ignored.
    """
    if current.shape != target.shape:
        raise PixelBufferMismatchError(
            f"Cannot compare buffers of shape {current.shape} and {target.shape}."
        )
    diff = np.abs(current[..., :3].astype(np.int16) - target[..., :3].astype(np.int16))
    weighted = diff.astype(np.float64) @ LUMA_WEIGHTS
    average = float(weighted.mean()) / 255.0
    return max(0.0, min(1.0, 1.0 - average))


def clamp_channel(value: float) -> int:
    return int(max(0, min(255, round(value))))


def sample_color(target: np.ndarray, x: float, y: float, alpha: int = 255) -> Color:
    """Point-sample the target at ``(x, y)`` (clamped to the buffer)."""
    width, height = buffer_size(target)
    px = min(max(int(x), 0), width - 1)
    py = min(max(int(y), 0), height - 1)
    r, g, b = (int(v) for v in target[py, px, :3])
    return (r, g, b, int(alpha))


def block_average(
    target: np.ndarray,
    x: float,
    y: float,
    width: float,
    height: float,
    alpha: int = 255,
    samples_per_axis: int = 4,
) -> Color:
    """Average colour of a rectangular block using a strided sample grid."""
    buf_w, buf_h = buffer_size(target)
    step_x = max(1, int(width // samples_per_axis))
    step_y = max(1, int(height // samples_per_axis))
    xs = [min(int(x + i), buf_w - 1) for i in range(0, max(1, int(np.ceil(width))), step_x)]
    ys = [min(int(y + j), buf_h - 1) for j in range(0, max(1, int(np.ceil(height))), step_y)]
    xs = [max(0, value) for value in xs]
    ys = [max(0, value) for value in ys]
    block = target[np.ix_(ys, xs)][..., :3].reshape(-1, 3)
    r, g, b = (int(round(float(v))) for v in block.mean(axis=0))
    return (r, g, b, int(alpha))


def neighbourhood_average(target: np.ndarray, x: float, y: float, radius: int = 2, alpha: int = 255) -> Color:
    """Average colour of the ``(2*radius+1)^2`` window centred on ``(x, y)``."""
    buf_w, buf_h = buffer_size(target)
    cx, cy = int(round(x)), int(round(y))
    xs = [min(max(cx + i, 0), buf_w - 1) for i in range(-radius, radius + 1)]
    ys = [min(max(cy + j, 0), buf_h - 1) for j in range(-radius, radius + 1)]
    window = target[np.ix_(ys, xs)][..., :3].reshape(-1, 3)
    r, g, b = (int(round(float(v))) for v in window.mean(axis=0))
    return (r, g, b, int(alpha))
