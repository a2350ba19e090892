"""
blendsplit: merge images by blending and split them into block layers.

Basic usage::

    from blendsplit import merge, split
    from blendsplit.api import pil_io

    # Merge line art onto a colored sheet, choosing the blend mode per image
    images = [pil_io.open_image(p) for p in ('sheet.png', 'lines.png')]
    result = merge(images, mode='auto')
    pil_io.save(result.display, 'merged.png')

    # Split a picture into 3 sparse layers of 32px blocks
    partition = split(pil_io.open_image('picture.png'), 3, 32, seed=0.5)
    pil_io.save_layers(partition.layers, 'layers')

Architecture:

- :py:mod:`blendsplit.buffer`: RGBA pixel buffer value and channel inversion
- :py:mod:`blendsplit.composite`: Background classification, blending, merge
- :py:mod:`blendsplit.partition`: Block grid, seeded assignment, split
- :py:mod:`blendsplit.api.pil_io`: Conversion from and to image files
"""

from blendsplit.buffer import PixelBuffer, invert_channels
from blendsplit.composite import MergeResult, merge
from blendsplit.constants import BlendMode
from blendsplit.partition import Partition, regenerate, split
from blendsplit.version import __version__

__all__ = [
    "BlendMode",
    "MergeResult",
    "Partition",
    "PixelBuffer",
    "__version__",
    "invert_channels",
    "merge",
    "regenerate",
    "split",
]
