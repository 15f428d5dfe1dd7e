from .errors import (
    CompressionError,
    ImageResizerError,
    ImagingEnvironmentError,
    InvalidDimensionsError,
    LoadError,
    ResizeError,
    ResizerClosedError,
    WandError,
    WriteError,
)
from .filters import FilterType
from .models import ResizeSettings, ResizeSettingsBuilder, ResizeResult
from .io_utils import gather_inputs, list_images
from .resize_service import ImageResizer, resize_many, resized_image_path, resolve_dimensions
from .wand import MagickWand, PillowWand, initialize, terminate

__all__ = [
    "ResizeSettings",
    "ResizeSettingsBuilder",
    "ResizeResult",
    "FilterType",
    "ImageResizer",
    "resize_many",
    "resized_image_path",
    "resolve_dimensions",
    "list_images",
    "gather_inputs",
    "MagickWand",
    "PillowWand",
    "initialize",
    "terminate",
    "ImageResizerError",
    "LoadError",
    "InvalidDimensionsError",
    "ResizeError",
    "CompressionError",
    "WriteError",
    "ResizerClosedError",
    "WandError",
    "ImagingEnvironmentError",
]
