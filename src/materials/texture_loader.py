# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_image_buffer(image_path: str) -> np.ndarray:
    """
    Decode an image file into a raw (height, width, 3) uint8 RGB buffer.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image format is unsupported
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return data

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.
    """
    return ImageTexture(load_image_buffer(image_path))
