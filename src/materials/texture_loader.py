# materials/texture_loader.py
import logging
import os
import numpy as np
from PIL import Image, UnidentifiedImageError
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(path: str) -> ImageTexture:
    """
    Decode an image file into an 8-bit RGB ImageTexture. Palette, greyscale
    and alpha images are converted to RGB first.

    Raises FileNotFoundError when ``path`` does not exist and ValueError
    when Pillow cannot decode it.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No texture image at {path}")

    try:
        with Image.open(path) as image:
            rgb = image if image.mode == "RGB" else image.convert("RGB")
            raster = np.asarray(rgb, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture image {path}: {e}") from e

    logger.debug("Loaded %s: %dx%d", path, raster.shape[1], raster.shape[0])
    return ImageTexture(raster)


def create_image_material(path: str, material_class, **kwargs):
    """Shorthand for ``material_class(load_texture(path), **kwargs)``."""
    return material_class(load_texture(path), **kwargs)
