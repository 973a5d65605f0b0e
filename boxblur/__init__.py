"""Box blur for RGBA images on an OpenCL device, with a numpy CPU fallback."""

__version__ = "0.1.0"
