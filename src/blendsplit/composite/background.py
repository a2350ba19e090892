"""
Background classification by thresholded pixel counting.
"""

import logging

import numpy as np
from attrs import frozen

from blendsplit.buffer import PixelBuffer
from blendsplit.constants import (
    BACKGROUND_RATIO,
    BLACK_THRESHOLD,
    WHITE_THRESHOLD,
    BackgroundClass,
)

logger = logging.getLogger(__name__)


@frozen
class Background:
    """
    Result of :py:func:`classify`.

    Both flags can be false for a mixed image. Should both be true, white
    takes precedence in :py:attr:`kind`.
    """

    is_white: bool
    is_black: bool

    @property
    def kind(self) -> BackgroundClass:
        if self.is_white:
            return BackgroundClass.WHITE
        if self.is_black:
            return BackgroundClass.BLACK
        return BackgroundClass.MIXED


def classify(buffer: PixelBuffer) -> Background:
    """
    Classify the background of the buffer.

    A pixel is near-white when all of R, G and B are above 240, and
    near-black when all are below 15. The image is white (or black) when more
    than 40% of its pixels are.
    """
    color = buffer.numpy()[:, :, :3]
    total = buffer.width * buffer.height
    white = int(np.count_nonzero(np.all(color > WHITE_THRESHOLD, axis=2)))
    black = int(np.count_nonzero(np.all(color < BLACK_THRESHOLD, axis=2)))
    result = Background(
        is_white=white / total > BACKGROUND_RATIO,
        is_black=black / total > BACKGROUND_RATIO,
    )
    logger.debug(
        "Background of %r: white=%d black=%d total=%d -> %s"
        % (buffer, white, black, total, result.kind.value)
    )
    return result
