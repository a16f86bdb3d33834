# renderer/tone_mapping.py
import numpy as np
from numba import njit

@njit
def gamma_quantize(accumulated, samples_per_pixel):
    """
    Convert summed linear radiance of shape (h, w, 3) to 8-bit color.

    Each channel is averaged over the samples, gamma corrected with
    gamma 2 (square root), clamped to [0, 0.999] and scaled by 256.
    Non-finite or negative sums map to 0.
    """
    h, w, c = accumulated.shape
    output = np.zeros((h, w, c), dtype=np.uint8)
    scale = 1.0 / samples_per_pixel
    for y in range(h):
        for x in range(w):
            for k in range(c):
                value = accumulated[y, x, k] * scale
                if not np.isfinite(value) or value <= 0.0:
                    continue
                value = np.sqrt(value)
                if value > 0.999:
                    value = 0.999
                output[y, x, k] = np.uint8(256.0 * value)
    return output

def to_rgb8(accumulated, samples_per_pixel: int) -> np.ndarray:
    """
    Tone maps a float buffer of per-pixel radiance sums; see gamma_quantize.
    """
    buffer = np.ascontiguousarray(accumulated, dtype=np.float64)
    return gamma_quantize(buffer, samples_per_pixel)
