"""
Block grid and seeded block-to-layer assignment.
"""

import logging
import math
import numbers
import numpy as np
from attrs import cmp_using, field, frozen

from blendsplit.constants import SHUFFLE_MULTIPLIER
from blendsplit.errors import InvalidParameters

logger = logging.getLogger(__name__)


def check_integer(name: str, value: object) -> None:
    """Raise :py:exc:`InvalidParameters` unless ``value`` is an integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameters("%s must be an integer: %r" % (name, value))


@frozen
class BlockGrid:
    """
    Tiling of an image into square blocks.

    Blocks on the right and bottom edges are clipped to the image.

    .. py:attribute:: block_size

        Side of a block in pixels.

    .. py:attribute:: block_width

        Number of block columns, ``ceil(width / block_size)``.

    .. py:attribute:: block_height

        Number of block rows, ``ceil(height / block_size)``.
    """

    block_size: int
    block_width: int
    block_height: int

    @classmethod
    def from_size(cls, width: int, height: int, block_size: int) -> "BlockGrid":
        for name, value in (("Width", width), ("Height", height), ("Block size", block_size)):
            check_integer(name, value)
        if block_size < 1:
            raise InvalidParameters("Block size must be at least 1: %r" % block_size)
        if width < 1 or height < 1:
            raise InvalidParameters("Invalid image size: %rx%r" % (width, height))
        return cls(
            block_size,
            -(-width // block_size),
            -(-height // block_size),
        )

    def __len__(self) -> int:
        return self.block_width * self.block_height

    def blocks(self) -> list[tuple[int, int]]:
        """Block coordinates ``(bx, by)`` in row-major order."""
        return [
            (bx, by)
            for by in range(self.block_height)
            for bx in range(self.block_width)
        ]


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@frozen
class Assignment:
    """
    Owning layer of every block.

    ``table[by, bx]`` is the layer index of block ``(bx, by)``. The table is
    read-only.
    """

    grid: BlockGrid
    layer_count: int
    table: np.ndarray = field(
        converter=_readonly, eq=cmp_using(eq=np.array_equal), hash=False, repr=False
    )

    def __getitem__(self, key: tuple[int, int]) -> int:
        bx, by = key
        return int(self.table[by, bx])

    def counts(self) -> list[int]:
        """Number of blocks owned by each layer."""
        return np.bincount(self.table.ravel(), minlength=self.layer_count).tolist()

    def pixel_map(self, width: int, height: int) -> np.ndarray:
        """Layer index of every pixel as a ``(height, width)`` array."""
        size = self.grid.block_size
        expanded = np.repeat(np.repeat(self.table, size, axis=0), size, axis=1)
        return expanded[:height, :width]


def shuffle(blocks: list, seed: float) -> list:
    """
    Permute ``blocks`` in place with the seeded swap sequence.

    Step ``i`` (from the last index down to 1) swaps ``blocks[i]`` with
    ``blocks[j]``, ``j = floor((seed * 7919 + i) mod (i + 1))``. The swap
    index depends only on the seed and ``i``, so a seed always yields the
    same permutation.
    """
    for i in range(len(blocks) - 1, 0, -1):
        j = math.floor(math.fmod(seed * SHUFFLE_MULTIPLIER + i, i + 1))
        blocks[i], blocks[j] = blocks[j], blocks[i]
    return blocks


def assign(
    width: int, height: int, block_size: int, layer_count: int, seed: float
) -> Assignment:
    """
    Assign every block of a ``width`` x ``height`` image to a layer.

    Blocks are shuffled with :py:func:`shuffle` and dealt to layers in turn,
    so layer block counts differ by at most one.

    Raises:
        InvalidParameters: ``layer_count`` is below 2, ``block_size`` below
            1, or ``seed`` outside ``[0, 1)``
    """
    check_integer("Layer count", layer_count)
    if layer_count < 2:
        raise InvalidParameters("Layer count must be at least 2: %r" % layer_count)
    if not 0.0 <= seed < 1.0:
        raise InvalidParameters("Seed must be in [0, 1): %r" % seed)
    grid = BlockGrid.from_size(width, height, block_size)

    blocks = shuffle(grid.blocks(), seed)
    table = np.zeros((grid.block_height, grid.block_width), dtype=np.intp)
    for index, (bx, by) in enumerate(blocks):
        table[by, bx] = index % layer_count

    assignment = Assignment(grid, layer_count, table)
    logger.debug(
        "Assigned %d blocks of %dpx (seed=%r): %s"
        % (len(grid), block_size, seed, assignment.counts())
    )
    return assignment
