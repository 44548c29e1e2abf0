# renderer/image_io.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def save_image(pixels: np.ndarray, path: str) -> None:
    """
    Write an 8-bit (height, width, 3) RGB array; the format follows the
    file extension.
    """
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(pixels).save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
