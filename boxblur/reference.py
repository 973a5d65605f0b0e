"""
Box Blur on the CPU with NumPy
ใช้เมื่อไม่มี OpenCL platform และใช้ตรวจผลลัพธ์จาก GPU
"""

import time

import numpy as np

from .kernel import BLUR_RADIUS, BlurResult, check_input, window

CPU_DEVICE = "numpy (CPU)"


def box_blur_reference(img, radius=BLUR_RADIUS):
    """Same window, clamping and divisor as the OpenCL ``boxBlur`` kernel."""
    img = check_input(img, radius)
    height, width, _ = img.shape
    lo, hi = window(radius)

    # Edge padding is equivalent to clamping every sample coordinate
    padded = np.pad(img, ((-lo, hi - 1), (-lo, hi - 1), (0, 0)), mode="edge")

    total = np.zeros_like(img)
    for fy in range(hi - lo):
        for fx in range(hi - lo):
            total += padded[fy:fy + height, fx:fx + width]

    return total / np.float32((hi - lo) ** 2)


def box_blur_cpu(img, radius=BLUR_RADIUS):
    start = time.perf_counter()
    output = box_blur_reference(img, radius)
    exec_time = (time.perf_counter() - start) * 1000
    return BlurResult(output=output, elapsed_ms=exec_time, device=CPU_DEVICE)
