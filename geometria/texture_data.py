"""Loading PNG images into raw pixel data."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass
class TextureData:
    """Pixel rows of an image, RGB or RGBA, one byte per channel."""

    width: int
    height: int
    data: bytes


def load_png(filename: str, has_alpha: bool = True) -> TextureData:
    """Read a PNG file as RGBA pixels, or RGB when ``has_alpha`` is false.

    Raises :class:`OSError` when the file cannot be read or is not a PNG.
    """
    mode = "RGBA" if has_alpha else "RGB"
    try:
        with Image.open(filename) as image:
            if image.format != "PNG":
                raise OSError(f"not a PNG image: {filename}")
            converted = image.convert(mode)
    except (OSError, ValueError) as error:
        raise OSError(f"failed to load PNG {filename}: {error}") from error
    return TextureData(converted.width, converted.height, converted.tobytes())