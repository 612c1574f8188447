import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciipress.charsets import DEFAULT_PALETTE
from asciipress.errors import ConfigurationError
from asciipress.model import check_palette
from asciipress.renderer import render

logger = logging.getLogger(__name__)

# ITU-R BT.709 luma weights
REC709_LUMA = (0.2126, 0.7152, 0.0722, 0)


def image_to_ascii(
    image: Image.Image | str | Path,
    palette: str = DEFAULT_PALETTE,
    width: int = 160,
    squash: bool = False,
) -> str:
    check_palette(palette)
    if width < 1:
        raise ConfigurationError(f"Width must be at least 1, got {width}")

    if not isinstance(image, Image.Image):
        image = Image.open(image)
    image = image.convert("RGB")

    ratio = image.width / width
    height = image.height / ratio
    if squash:
        # Terminal characters are roughly twice as tall as wide
        height /= 2
    height = max(1, int(height))

    logger.debug("Resizing %dx%d image to %dx%d", image.width, image.height, width, height)
    image = image.resize((width, height), Image.LANCZOS)
    gray = np.asarray(image.convert("L", REC709_LUMA))
    return render(gray, palette)
