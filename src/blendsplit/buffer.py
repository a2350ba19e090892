"""
Pixel buffer structure.
"""

import logging
from typing import Any, TypeVar

import numpy as np
from attrs import define, field

from blendsplit.validators import range_

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="PixelBuffer")

CHANNELS = 4
MAX_DIMENSION = 300000


@define(frozen=True, repr=False)
class PixelBuffer:
    """
    Row-major RGBA pixel buffer.

    Buffers are values: every operation returns a new buffer and leaves its
    inputs untouched, so a stage that needs the original simply keeps it.

    Example::

        from blendsplit.buffer import PixelBuffer

        buffer = PixelBuffer(2, 1, bytes([255, 0, 0, 255, 0, 0, 255, 255]))
        array = buffer.numpy()  # shape (1, 2, 4)

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: data

        ``width * height * 4`` bytes in R, G, B, A order.
    """

    width: int = field(validator=range_(1, MAX_DIMENSION))
    height: int = field(validator=range_(1, MAX_DIMENSION))
    data: bytes = field(converter=bytes)

    @data.validator
    def _validate_data(self, attribute: Any, value: bytes) -> None:
        expected = self.width * self.height * CHANNELS
        if len(value) != expected:
            raise ValueError(
                "Expected %d bytes for %dx%d RGBA, got %d"
                % (expected, self.width, self.height, len(value))
            )

    @classmethod
    def new(cls: type[T], width: int, height: int) -> T:
        """Create a buffer where every byte is zero (transparent black)."""
        return cls(width, height, bytes(width * height * CHANNELS))

    @classmethod
    def fromarray(cls: type[T], array: np.ndarray) -> T:
        """
        Create a buffer from an array of shape ``(height, width, 4)``.

        Values are cast to ``uint8``; callers are expected to pass 0-255 data.
        """
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ValueError("Expected (height, width, 4) array, got %r" % (array.shape,))
        height, width = array.shape[:2]
        return cls(width, height, np.ascontiguousarray(array, dtype=np.uint8).tobytes())

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def numpy(self) -> np.ndarray:
        """
        Get a read-only ``uint8`` view of shape ``(height, width, 4)``.

        Use ``.copy()`` on the result to obtain a writable array.
        """
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            (self.height, self.width, CHANNELS)
        )

    def copy(self: T) -> T:
        """Independent copy of this buffer."""
        return type(self)(self.width, self.height, bytes(bytearray(self.data)))

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return "%s(width=%d, height=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
        )


def invert_channels(buffer: PixelBuffer) -> PixelBuffer:
    """
    Invert the color channels of the buffer.

    R, G and B become ``255 - value``, alpha is kept. Applying it twice gives
    back the original buffer.
    """
    return PixelBuffer.fromarray(invert_array(buffer.numpy()))


def invert_array(array: np.ndarray) -> np.ndarray:
    inverted = array.copy()
    inverted[:, :, :3] = 255 - inverted[:, :, :3]
    return inverted
