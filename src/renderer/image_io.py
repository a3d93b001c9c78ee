# renderer/image_io.py
import os
from typing import TextIO
import numpy as np
from PIL import Image


def write_ppm(pixels: np.ndarray, stream: TextIO) -> None:
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3), top row
    first, one ``R G B`` triplet per line.
    """
    pixels = np.asarray(pixels, dtype=np.uint8)
    height, width = pixels.shape[0], pixels.shape[1]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row[:, :3].tolist()))


def save_image(pixels: np.ndarray, path: str) -> None:
    """Save as PPM for ``.ppm`` paths, otherwise let Pillow pick the format."""
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w", encoding="ascii") as fh:
            write_ppm(pixels, fh)
    else:
        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
