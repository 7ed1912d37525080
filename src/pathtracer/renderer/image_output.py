# renderer/image_output.py
import logging
from os import PathLike
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def save_image(pixels: np.ndarray, path: Union[str, PathLike]) -> None:
    """
    Write a (height, width, 3) uint8 buffer to `path`. The format follows the
    file extension. I/O errors propagate to the caller.
    """
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got {pixels.dtype}")
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got {pixels.shape}")
    Image.fromarray(pixels).save(path)
    logger.info("Wrote %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
