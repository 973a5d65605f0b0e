"""Exceptions raised by boxblur."""


class BlurError(Exception):
    """Base class for boxblur errors."""


class ImageLoadError(BlurError):
    """The input image is missing or could not be decoded."""


class ImageSaveError(BlurError):
    """The output image could not be encoded or was not written."""


class NoDeviceError(BlurError):
    """No usable OpenCL platform or device was found."""


class DeviceSetupError(BlurError):
    """An OpenCL device was found but its context or queue could not be created."""
