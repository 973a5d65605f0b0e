#!/usr/bin/env python3
"""
Image Box Blur using PyOpenCL
โหลดภาพ -> blur บน OpenCL device -> บันทึกภาพ
"""

import sys

from .convert import NUM_CHANNELS, to_float, to_uint8
from .device import describe_device, setup_opencl
from .errors import DeviceSetupError, ImageLoadError, ImageSaveError, NoDeviceError
from .image_io import load_image, save_image
from .kernel import BLUR_RADIUS, box_blur
from .reference import box_blur_cpu

INPUT_PATH = "input.jpg"
OUTPUT_PATH = "input_blurred.jpg"


def run(input_path=INPUT_PATH, output_path=OUTPUT_PATH, radius=BLUR_RADIUS):
    """Blur ``input_path`` into ``output_path``. Returns the exit code."""
    try:
        pixels, info = load_image(input_path)
    except ImageLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"imgWidth: {info.width}")
    print(f"imgHeight: {info.height}")
    print(f"imgChannels: {info.channels}")
    print(f"numOfChannels: {NUM_CHANNELS}")

    img = to_float(pixels)

    try:
        context, queue, device = setup_opencl()
    except NoDeviceError as e:
        print(f"{e} Falling back to CPU (numpy).")
        result = box_blur_cpu(img, radius)
    except DeviceSetupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    else:
        print(f"Using device: {describe_device(device)}")
        result = box_blur(context, queue, img, radius)

    if not result.ok:
        print(f"Error: blur failed on {result.device}: {result.error}", file=sys.stderr)
        return 1

    print(f"Time: {result.elapsed_ms:.3f} ms")

    try:
        save_image(output_path, to_uint8(result.output), info)
    except ImageSaveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved: {output_path}")
    return 0


def main():
    return run()


if __name__ == "__main__":
    sys.exit(main())
