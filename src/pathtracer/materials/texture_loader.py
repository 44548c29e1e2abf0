# materials/texture_loader.py
import os
import numpy as np
from PIL import Image
from pathtracer.materials.textures import ImageTexture

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, converting it to 8-bit RGB.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img, dtype=np.uint8)
    except OSError as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    return ImageTexture(data)
