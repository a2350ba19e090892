"""
Partition module for splitting an image into block-randomized layers.

Example usage::

    from blendsplit.api import pil_io
    from blendsplit.partition import regenerate, split

    image = pil_io.open_image('drawing.png')
    partition = split(image, layer_count=3, block_size=32, seed=0.25)
    pil_io.save_layers(partition.layers, 'layers/')

    # New random distribution, keep partition.seed to repeat it later.
    partition = regenerate(image, 3, 32)
"""

from blendsplit.partition.partitioner import Partition, draw_seed, regenerate, split
from blendsplit.partition.shuffler import Assignment, BlockGrid, assign

__all__ = [
    "Assignment",
    "BlockGrid",
    "Partition",
    "assign",
    "draw_seed",
    "regenerate",
    "split",
]
