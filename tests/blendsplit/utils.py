import logging
from typing import Sequence

import numpy as np

from blendsplit.buffer import PixelBuffer

logging.basicConfig(level=logging.DEBUG)

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
GRAY = (128, 128, 128, 255)


def solid(width: int, height: int, rgba: Sequence[int]) -> PixelBuffer:
    """Buffer filled with a single color."""
    array = np.empty((height, width, 4), dtype=np.uint8)
    array[:, :] = rgba
    return PixelBuffer.fromarray(array)


def noise(rng: np.random.Generator, width: int, height: int, opaque: bool = False) -> PixelBuffer:
    """Buffer of random bytes."""
    array = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    if opaque:
        array[:, :, 3] = 255
    return PixelBuffer.fromarray(array)


def with_fraction(
    width: int, height: int, count: int, rgba: Sequence[int], rest: Sequence[int]
) -> PixelBuffer:
    """Buffer whose first ``count`` pixels are ``rgba`` and the others ``rest``."""
    array = np.empty((width * height, 4), dtype=np.uint8)
    array[:] = rest
    array[:count] = rgba
    return PixelBuffer.fromarray(array.reshape((height, width, 4)))


def pixels(buffer: PixelBuffer) -> set:
    """Distinct RGBA values of a buffer."""
    return {tuple(int(v) for v in p) for p in buffer.numpy().reshape((-1, 4))}
