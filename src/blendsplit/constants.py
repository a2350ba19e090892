"""
Various constants for blendsplit
"""
from enum import Enum


class BlendMode(str, Enum):
    """
    Blend mode used when merging images.

    ``AUTO`` is not a blend function on its own, it is resolved per incoming
    image by :py:func:`~blendsplit.composite.blend.resolve_mode`.
    """
    MULTIPLY = "multiply"
    SCREEN = "screen"
    AUTO = "auto"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class BackgroundClass(str, Enum):
    """
    Dominant background of an image.
    """
    WHITE = "white"
    BLACK = "black"
    MIXED = "mixed"


# Background classification thresholds.
WHITE_THRESHOLD = 240
BLACK_THRESHOLD = 15
BACKGROUND_RATIO = 0.4

# Multiplier of the seeded block shuffle.
SHUFFLE_MULTIPLIER = 7919

# Accepted ranges of the partitioner, both inclusive.
MIN_LAYER_COUNT = 2
MAX_LAYER_COUNT = 10
DEFAULT_LAYER_COUNT = 3

MIN_BLOCK_SIZE = 8
MAX_BLOCK_SIZE = 128
DEFAULT_BLOCK_SIZE = 32

LAYER_FILENAME = "layer_{}.png"
