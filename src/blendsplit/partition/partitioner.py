"""Block-randomized partition of an image into sparse layers."""

import logging
import random as _random
from typing import Optional, Protocol

import numpy as np
from attrs import frozen

from blendsplit.buffer import PixelBuffer, invert_array
from blendsplit.constants import (
    MAX_BLOCK_SIZE,
    MAX_LAYER_COUNT,
    MIN_BLOCK_SIZE,
    MIN_LAYER_COUNT,
)
from blendsplit.errors import InvalidParameters
from blendsplit.partition.shuffler import Assignment, assign, check_integer

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


@frozen
class Partition:
    """
    Result of :py:func:`split`.

    .. py:attribute:: layers

        Layer buffers in index order, all the size of the source.

    .. py:attribute:: assignment

        The :py:class:`~blendsplit.partition.shuffler.Assignment` used.

    .. py:attribute:: seed

        Seed of the assignment; passing it to :py:func:`split` again
        reproduces the same layers.

    .. py:attribute:: inverted

        Whether the color channels were inverted.
    """

    layers: tuple[PixelBuffer, ...]
    assignment: Assignment
    seed: float
    inverted: bool = False

    def __len__(self) -> int:
        return len(self.layers)

    def __getitem__(self, index: int) -> PixelBuffer:
        return self.layers[index]

    def __iter__(self):
        return iter(self.layers)

    def union(self) -> PixelBuffer:
        """Put the layers back together into one buffer."""
        first = self.layers[0]
        owners = self.assignment.pixel_map(first.width, first.height)
        stacked = np.stack([layer.numpy() for layer in self.layers])
        rows, cols = np.indices(owners.shape)
        return PixelBuffer.fromarray(stacked[owners, rows, cols])


def check_parameters(layer_count: int, block_size: int) -> None:
    """Raise :py:exc:`InvalidParameters` for out-of-range split settings."""
    check_integer("Layer count", layer_count)
    check_integer("Block size", block_size)
    if not MIN_LAYER_COUNT <= layer_count <= MAX_LAYER_COUNT:
        raise InvalidParameters(
            "Layer count must be in [%d, %d]: %r"
            % (MIN_LAYER_COUNT, MAX_LAYER_COUNT, layer_count)
        )
    if not MIN_BLOCK_SIZE <= block_size <= MAX_BLOCK_SIZE:
        raise InvalidParameters(
            "Block size must be in [%d, %d]: %r"
            % (MIN_BLOCK_SIZE, MAX_BLOCK_SIZE, block_size)
        )


def split(
    source: PixelBuffer,
    layer_count: int,
    block_size: int,
    invert: bool = False,
    seed: float = 0.0,
) -> Partition:
    """
    Split an image into sparse layers.

    The image is cut into ``block_size`` blocks and every block is given to
    exactly one layer, so each source pixel appears in exactly one layer.
    Pixels a layer does not own are zero (transparent black). The same
    arguments always produce the same layers.

    Args:
        source: Image to split
        layer_count: Number of layers, 2 to 10
        block_size: Block side in pixels, 8 to 128
        invert: Invert the color channels of the copied pixels
        seed: Shuffle seed in ``[0, 1)``

    Returns:
        :py:class:`Partition`

    Raises:
        InvalidParameters: An argument is out of range
    """
    check_parameters(layer_count, block_size)
    assignment = assign(source.width, source.height, block_size, layer_count, seed)

    pixels = source.numpy()
    if invert:
        pixels = invert_array(pixels)
    owners = assignment.pixel_map(source.width, source.height)

    layers = []
    for index in range(layer_count):
        layer = np.zeros_like(pixels)
        mask = owners == index
        layer[mask] = pixels[mask]
        layers.append(PixelBuffer.fromarray(layer))

    return Partition(tuple(layers), assignment, seed, invert)


def draw_seed(random: Optional[RandomSource] = None) -> float:
    """Draw a new seed from ``random``, the :py:mod:`random` module by default."""
    source = _random if random is None else random
    seed = float(source.random())
    logger.debug("Drew seed %r" % seed)
    return seed


def regenerate(
    source: PixelBuffer,
    layer_count: int,
    block_size: int,
    invert: bool = False,
    random: Optional[RandomSource] = None,
) -> Partition:
    """
    Split again with a freshly drawn seed.

    Nothing from an earlier split is reused. Pass a seeded
    :py:class:`random.Random` as ``random`` for repeatable draws.
    """
    check_parameters(layer_count, block_size)
    return split(source, layer_count, block_size, invert, draw_seed(random))
