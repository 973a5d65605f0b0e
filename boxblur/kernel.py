"""
Box Blur Kernel using PyOpenCL
หนึ่ง work-item ต่อหนึ่ง pixel, clamp พิกัดที่ขอบภาพ
"""

import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pyopencl as cl

from .convert import NUM_CHANNELS

BLUR_RADIUS = 3

# OpenCL Kernel Code
kernel_code = """
// Box Blur Kernel: window [-radius, radius) on both axes
__kernel void boxBlur(__global const float4* input,
                      __global float4* output,
                      const int width,
                      const int height,
                      const int radius) {

    int x = get_global_id(0);
    int y = get_global_id(1);

    if (x >= width || y >= height) return;

    // radius 0 samples only the pixel itself
    int lo = -radius;
    int hi = radius > 0 ? radius : 1;

    float4 sum = (float4)(0.0f, 0.0f, 0.0f, 0.0f);

    for (int fy = lo; fy < hi; fy++) {
        int imageY = clamp(y + fy, 0, height - 1);
        for (int fx = lo; fx < hi; fx++) {
            int imageX = clamp(x + fx, 0, width - 1);
            sum += input[imageY * width + imageX];
        }
    }

    // Clamped samples count toward the divisor
    float count = (float)((hi - lo) * (hi - lo));
    output[y * width + x] = sum / count;
}
"""


@dataclass
class BlurResult:
    """Outcome of one blur dispatch."""

    output: Optional[np.ndarray]
    elapsed_ms: float
    device: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output is not None


def window(radius):
    """Half-open sampling range ``[lo, hi)`` for one axis."""
    return -radius, (radius if radius > 0 else 1)


def check_input(img, radius):
    """ตรวจสอบ input ก่อนส่งเข้า kernel และคืน array แบบ float32 contiguous"""
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise ValueError(f"radius must be an integer, got {radius!r}")
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    img = np.ascontiguousarray(img, dtype=np.float32)
    if img.ndim != 3 or img.shape[2] != NUM_CHANNELS:
        raise ValueError(f"expected an (height, width, {NUM_CHANNELS}) image, got shape {img.shape}")
    if img.shape[0] == 0 or img.shape[1] == 0:
        raise ValueError("image must not be empty")
    return img


def build_program(context):
    """Compile the blur kernel for ``context``."""
    return cl.Program(context, kernel_code).build()


def box_blur(context, queue, img, radius=BLUR_RADIUS, program=None):
    """ใช้ Box Blur บน OpenCL device

    ``img`` is a float32 ``(height, width, 4)`` array of normalized
    pixels. Returns a :class:`BlurResult`; OpenCL failures are captured
    in ``result.error`` instead of being raised.
    """
    img = check_input(img, radius)
    height, width, _ = img.shape
    device_name = queue.device.name

    try:
        if program is None:
            program = build_program(context)

        mf = cl.mem_flags
        input_buf = cl.Buffer(context, mf.READ_ONLY | mf.COPY_HOST_PTR, hostbuf=img)
        try:
            output_buf = cl.Buffer(context, mf.WRITE_ONLY, img.nbytes)
            try:
                global_size = (width, height)
                start = time.perf_counter()
                event = program.boxBlur(queue, global_size, None,
                                        input_buf, output_buf,
                                        np.int32(width), np.int32(height), np.int32(radius))
                event.wait()
                exec_time = (time.perf_counter() - start) * 1000  # ms

                output_array = np.empty_like(img)
                cl.enqueue_copy(queue, output_array, output_buf).wait()
            finally:
                output_buf.release()
        finally:
            input_buf.release()
    except cl.Error as e:
        return BlurResult(output=None, elapsed_ms=0.0, device=device_name, error=e)

    return BlurResult(output=output_array, elapsed_ms=exec_time, device=device_name)
