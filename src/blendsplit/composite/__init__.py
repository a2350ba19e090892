"""
Composite module for merging images.

Key modules:

- :py:mod:`blendsplit.composite.compositor`: Sequential merge of images
- :py:mod:`blendsplit.composite.blend`: Multiply and screen blending, and
  automatic mode selection
- :py:mod:`blendsplit.composite.background`: White / black background
  classification

Example usage::

    from blendsplit.api import pil_io
    from blendsplit.composite import merge

    images = [pil_io.open_image(path) for path in ('lines.png', 'colors.png')]
    result = merge(images, mode='auto', invert=True)
    pil_io.save(result.display, 'merged.png')

    # Undo the inversion without blending again.
    pil_io.save(result.toggle(False).display, 'merged-plain.png')
"""

from blendsplit.composite.compositor import MergeResult, merge

__all__ = [
    "MergeResult",
    "merge",
]
