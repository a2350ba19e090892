"""Merge implementation for sequential image blending."""

import logging
from typing import Sequence, Union

from attrs import frozen

from blendsplit.api import pil_io
from blendsplit.buffer import PixelBuffer, invert_channels
from blendsplit.composite.blend import blend, get_mode, resolve_mode
from blendsplit.constants import BlendMode
from blendsplit.errors import InsufficientInputs

logger = logging.getLogger(__name__)


@frozen
class MergeResult:
    """
    Result of :py:func:`merge`.

    .. py:attribute:: committed

        The blended image before inversion.

    .. py:attribute:: display

        The image to show or save: ``committed``, inverted when
        :py:attr:`inverted` is set.

    .. py:attribute:: inverted

        Whether ``display`` is inverted.
    """

    committed: PixelBuffer
    display: PixelBuffer
    inverted: bool = False

    def toggle(self, invert: bool) -> "MergeResult":
        """
        Switch inversion on or off.

        The new result is derived from :py:attr:`committed` only; no blending
        is repeated.
        """
        return with_invert(self.committed, invert)


def with_invert(committed: PixelBuffer, invert: bool) -> MergeResult:
    """Build a :py:class:`MergeResult` from a committed merge."""
    display = invert_channels(committed) if invert else committed
    return MergeResult(committed=committed, display=display, inverted=invert)


def merge(
    images: Sequence[PixelBuffer],
    mode: Union[BlendMode, str] = BlendMode.AUTO,
    invert: bool = False,
) -> MergeResult:
    """
    Merge images in order into a single image.

    The first image sets the canvas size and alpha. Each following image is
    stretched to the canvas size and blended onto everything merged so far.
    With ``AUTO``, the blend mode is chosen separately for every incoming
    image.

    Args:
        images: Two or more buffers, blended in the given order
        mode: ``multiply``, ``screen`` or ``auto``
        invert: Invert the color channels of the displayed result

    Returns:
        :py:class:`MergeResult` holding the pre-inversion result and the
        displayed result

    Raises:
        InsufficientInputs: Fewer than two images were given
        InvalidParameters: The blend mode is unknown
    """
    if len(images) < 2:
        raise InsufficientInputs(
            "At least 2 images are required to merge, got %d" % len(images)
        )
    mode = get_mode(mode)

    canvas = images[0]
    logger.debug("Merging %d images onto %r" % (len(images), canvas))
    for index, image in enumerate(images[1:], 1):
        concrete = resolve_mode(mode, image)
        if image.size != canvas.size:
            logger.debug("Resampling image %d from %dx%d" % ((index,) + image.size))
            image = pil_io.resize(image, canvas.size)
        canvas = blend(concrete, canvas, image)
        logger.debug("Blended image %d with %s" % (index, concrete.value))

    return with_invert(canvas, invert)
