"""
Pixel format conversion between 8-bit RGBA and normalized float RGBA
"""

import numpy as np

NUM_CHANNELS = 4
SCALE = 255.0


def to_float(pixels):
    """แปลง uint8 RGBA เป็น float32 ในช่วง [0, 1]"""
    return (np.asarray(pixels, dtype=np.uint8).astype(np.float32) / SCALE).astype(np.float32)


def to_uint8(pixels, opaque=True):
    """แปลง float RGBA ในช่วง [0, 1] กลับเป็น uint8

    Each channel is scaled by 255, rounded to nearest and clamped to
    [0, 255]. With ``opaque`` the alpha channel is forced to 255.
    """
    scaled = np.nan_to_num(np.asarray(pixels, dtype=np.float32) * SCALE, nan=0.0)
    out = np.clip(np.rint(scaled), 0, 255).astype(np.uint8)
    if opaque:
        out[..., 3] = 255
    return out
