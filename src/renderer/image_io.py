# renderer/image_io.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def encode_ppm(buffer: np.ndarray) -> str:
    """
    Plain-text (P3) PPM encoding of an (h, w, 3) uint8 buffer.
    """
    height, width, _ = buffer.shape
    lines = ["P3", f"{width} {height}", "255"]
    for row in buffer:
        lines.append(" ".join(f"{r} {g} {b}" for r, g, b in row.tolist()))
    return "\n".join(lines) + "\n"

def save_image(buffer: np.ndarray, path: str) -> None:
    """
    Writes the rendered RGB8 buffer to `path`. The extension picks the
    format: .ppm is written by hand, anything else goes through Pillow.
    """
    buffer = np.asarray(buffer, dtype=np.uint8)
    if buffer.ndim != 3 or buffer.shape[2] != 3:
        raise ValueError(f"expected an (h, w, 3) buffer, got {buffer.shape}")

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if path.lower().endswith(".ppm"):
        with open(path, "w") as f:
            f.write(encode_ppm(buffer))
    else:
        Image.fromarray(buffer).save(path)
    logger.info("Saved %dx%d image to %s", buffer.shape[1], buffer.shape[0], path)
