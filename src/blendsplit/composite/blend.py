"""
Blend mode implementations.

Blend functions work on ``uint8`` color arrays in the 0-255 domain. Products
are rounded half up with integer arithmetic, ``(x + 127) // 255``, which is
exact here because ``a * b / 255`` never lands on a half.
"""
import logging
from typing import Callable, Union

import numpy as np

from blendsplit.buffer import PixelBuffer
from blendsplit.composite.background import classify
from blendsplit.constants import BlendMode
from blendsplit.errors import InvalidParameters

logger = logging.getLogger(__name__)


def _div255(x):
    return (x + 127) // 255


# Separable blend functions
def multiply(Cb, Cs):
    Cb = np.asarray(Cb, dtype=np.int32)
    Cs = np.asarray(Cs, dtype=np.int32)
    return _div255(Cb * Cs).astype(np.uint8)


def screen(Cb, Cs):
    Cb = np.asarray(Cb, dtype=np.int32)
    Cs = np.asarray(Cs, dtype=np.int32)
    return (255 - _div255((255 - Cb) * (255 - Cs))).astype(np.uint8)


"""Blend function table."""
BLEND_FUNC: dict[BlendMode, Callable] = {
    BlendMode.MULTIPLY: multiply,
    BlendMode.SCREEN: screen,
}


def get_mode(mode: Union[BlendMode, str]) -> BlendMode:
    """Convert a mode name to :py:class:`~blendsplit.constants.BlendMode`."""
    try:
        return BlendMode(mode)
    except ValueError:
        raise InvalidParameters("Unknown blend mode: %r" % (mode,)) from None


def resolve_mode(mode: Union[BlendMode, str], incoming: PixelBuffer) -> BlendMode:
    """
    Pick the concrete blend mode for an incoming image.

    Explicit modes are returned as is. ``AUTO`` multiplies images on a white
    background, screens images on a black background, and falls back to
    multiply for anything else.
    """
    mode = get_mode(mode)
    if mode != BlendMode.AUTO:
        return mode
    background = classify(incoming)
    if background.is_white:
        resolved = BlendMode.MULTIPLY
    elif background.is_black:
        resolved = BlendMode.SCREEN
    else:
        resolved = BlendMode.MULTIPLY
    logger.debug("Auto blend mode resolved to %s" % resolved.value)
    return resolved


def blend(
    mode: Union[BlendMode, str], backdrop: PixelBuffer, source: PixelBuffer
) -> PixelBuffer:
    """
    Blend ``source`` onto ``backdrop`` with a concrete mode.

    Only R, G and B are blended; the alpha of ``backdrop`` is kept.
    """
    mode = get_mode(mode)
    if mode not in BLEND_FUNC:
        raise InvalidParameters("Blend mode must be resolved first: %s" % mode.value)
    if backdrop.size != source.size:
        raise InvalidParameters(
            "Size mismatch: backdrop %dx%d, source %dx%d"
            % (backdrop.size + source.size)
        )
    result = backdrop.numpy().copy()
    result[:, :, :3] = BLEND_FUNC[mode](result[:, :, :3], source.numpy()[:, :, :3])
    return PixelBuffer.fromarray(result)
