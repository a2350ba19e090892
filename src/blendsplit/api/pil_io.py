"""
PIL IO module.
"""
import io
import logging
import os
from typing import IO, Iterable, Optional, Union

from PIL import Image, UnidentifiedImageError

from blendsplit.buffer import PixelBuffer
from blendsplit.constants import LAYER_FILENAME
from blendsplit.errors import ContextUnavailable, DecodeError

logger = logging.getLogger(__name__)

Source = Union[str, bytes, os.PathLike, IO[bytes]]


def frompil(image: Image.Image) -> PixelBuffer:
    """Convert PIL Image to :py:class:`~blendsplit.buffer.PixelBuffer`."""
    if image.mode != "RGBA":
        logger.debug("Converting %s image to RGBA" % image.mode)
        image = image.convert("RGBA")
    return PixelBuffer(image.width, image.height, image.tobytes())


def topil(buffer: PixelBuffer) -> Image.Image:
    """Convert :py:class:`~blendsplit.buffer.PixelBuffer` to PIL Image."""
    return Image.frombytes("RGBA", buffer.size, buffer.data)


def open_image(fp: Source) -> PixelBuffer:
    """
    Decode an image file into a pixel buffer.

    :param fp: Path, raw bytes, or a binary file object.
    :raises DecodeError: The data is not a readable image.
    """
    if isinstance(fp, (bytes, bytearray)):
        fp = io.BytesIO(fp)
    try:
        with Image.open(fp) as image:
            image.load()
            return frompil(image)
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        name = getattr(fp, "name", fp if isinstance(fp, (str, os.PathLike)) else "data")
        raise DecodeError("Cannot decode image from %s: %s" % (name, e)) from e


def resize(buffer: PixelBuffer, size: tuple[int, int]) -> PixelBuffer:
    """Stretch the buffer to ``size`` with bilinear resampling."""
    image = topil(buffer).resize(size, Image.Resampling.BILINEAR)
    return frompil(image)


def save(
    buffer: PixelBuffer,
    fp: Union[str, os.PathLike, IO[bytes]],
    format: Optional[str] = None,
) -> None:
    """
    Encode the buffer to an image file.

    :param format: Pillow format name; guessed from the file name if omitted.
    :raises ContextUnavailable: No encoder or destination is available.
    """
    try:
        topil(buffer).save(fp, format=format)
    except (KeyError, ValueError, OSError) as e:
        raise ContextUnavailable("Cannot encode image to %s: %s" % (fp, e)) from e


def save_layers(
    layers: Iterable[PixelBuffer],
    directory: Union[str, os.PathLike],
    pattern: str = LAYER_FILENAME,
) -> list[str]:
    """
    Save layers as numbered files in ``directory``, starting from 1.

    :return: List of written paths in layer order.
    :raises ContextUnavailable: The directory cannot be created or written.
    """
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise ContextUnavailable("Cannot create directory %s: %s" % (directory, e)) from e
    paths = []
    for index, layer in enumerate(layers, 1):
        path = os.path.join(directory, pattern.format(index))
        save(layer, path)
        logger.info("Saved layer %d to %s" % (index, path))
        paths.append(path)
    return paths
