from typing import Optional


class ImageResizerError(Exception):
    """Base class for every failure raised while resizing an image."""


class _WrappedError(ImageResizerError):
    def __init__(self, context: str, cause: BaseException):
        super().__init__(f"{context}: {cause}")
        self.context = context
        self.cause = cause


class LoadError(_WrappedError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"reading image {path}", cause)
        self.path = path


class InvalidDimensionsError(ImageResizerError):
    pass


class ResizeError(_WrappedError):
    def __init__(self, cause: BaseException):
        super().__init__("resizing image", cause)


class CompressionError(_WrappedError):
    def __init__(self, quality: int, cause: BaseException):
        super().__init__(f"setting image compression quality to {quality}", cause)
        self.quality = quality


class WriteError(_WrappedError):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"writing image {path}", cause)
        self.path = path


class ResizerClosedError(ImageResizerError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "image resizer has already been destroyed")


class WandError(Exception):
    """Raised by a wand when it is used without a loaded image or after destroy()."""


class ImagingEnvironmentError(RuntimeError):
    """Raised when the process-wide imaging environment is torn down too early."""
