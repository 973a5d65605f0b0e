"""
OpenCL context and queue setup
"""

import os

import pyopencl as cl

from .errors import DeviceSetupError, NoDeviceError

# เลือก GPU ถ้ามี, ไม่งั้นใช้ CPU
DEVICE_PREFERENCE = (cl.device_type.GPU, cl.device_type.CPU, cl.device_type.ALL)


def _pick_device(platform):
    for device_type in DEVICE_PREFERENCE:
        try:
            devices = platform.get_devices(device_type=device_type)
        except cl.Error:
            continue
        if devices:
            return devices[0]
    raise NoDeviceError(f"No OpenCL devices found on platform {platform.name!r}")


def setup_opencl():
    """Setup OpenCL context และ queue

    When ``PYOPENCL_CTX`` is set, pyopencl's own selector picks the
    device. Otherwise the first platform is used, preferring a GPU and
    falling back to a CPU device.
    """
    if os.environ.get("PYOPENCL_CTX"):
        try:
            context = cl.create_some_context(interactive=False)
        except cl.Error as e:
            raise NoDeviceError(f"PYOPENCL_CTX did not select a device: {e}") from e
        device = context.devices[0]
    else:
        try:
            platforms = cl.get_platforms()
        except cl.Error as e:
            raise NoDeviceError(f"No OpenCL platforms found! ({e})") from e
        if len(platforms) == 0:
            raise NoDeviceError("No OpenCL platforms found!")

        device = _pick_device(platforms[0])
        try:
            context = cl.Context([device])
        except cl.Error as e:
            raise DeviceSetupError(f"Could not create a context on {device.name!r}: {e}") from e

    try:
        queue = cl.CommandQueue(context)
    except cl.Error as e:
        raise DeviceSetupError(f"Could not create a command queue on {device.name!r}: {e}") from e

    return context, queue, device


# device.type can carry extra bits, so name the first known kind that is set
DEVICE_KINDS = ("GPU", "CPU", "ACCELERATOR", "DEFAULT")


def device_kind(device_type):
    for kind in DEVICE_KINDS:
        if device_type & getattr(cl.device_type, kind):
            return kind
    return cl.device_type.to_string(device_type)


def describe_device(device):
    return f"{device.name} ({device_kind(device.type)})"
