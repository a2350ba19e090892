"""
Exceptions raised by blendsplit.
"""


class BlendSplitError(ValueError):
    """Base class of all blendsplit errors."""


class InsufficientInputs(BlendSplitError):
    """Merge was requested with fewer than two images."""


class InvalidParameters(BlendSplitError):
    """An argument is outside the range the engine accepts."""


class DecodeError(BlendSplitError):
    """Source data could not be decoded as an image."""


class ContextUnavailable(BlendSplitError):
    """No output surface could be obtained to encode an image."""
