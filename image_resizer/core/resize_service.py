import logging
import os
from typing import Callable, Iterable, Iterator, Optional, Tuple

from .errors import (
    CompressionError,
    ImageResizerError,
    InvalidDimensionsError,
    LoadError,
    ResizeError,
    ResizerClosedError,
    WriteError,
)
from .models import ResizeResult, ResizeSettings
from .wand import MagickWand, PillowWand

logger = logging.getLogger(__name__)

ProgressCb = Callable[[int, int], None]
LogCb = Callable[[str], None]

def resolve_dimensions(settings: ResizeSettings, wand: MagickWand) -> Tuple[int, int]:
    """Target size for the loaded image; falls back to its own size when none is set."""
    w, h = settings.width, settings.height
    if w is None and h is None:
        return wand.image_width, wand.image_height
    if (w is None) != (h is None):
        raise InvalidDimensionsError("both width and height must be set or both must be nil")
    if w <= 0 or h <= 0:
        raise InvalidDimensionsError("width and height must both be greater than zero")
    return w, h

def resized_image_path(image_file_path: str, output_dir: str = "") -> str:
    base_path = output_dir or os.path.dirname(image_file_path)
    file_name = os.path.basename(image_file_path)
    stem, dot, ext = file_name.rpartition(".")
    new_name = f"{stem}_resized.{ext}" if dot else file_name + "_resized"
    if not base_path:
        return new_name
    return os.path.normpath(os.path.join(base_path, new_name))


class ImageResizer:
    """Resizes a single image per call through a wand it owns.

    The wand is acquired here and must be released with destroy(), or by
    using the resizer as a context manager.
    """

    def __init__(self, settings: Optional[ResizeSettings] = None,
                 wand: Optional[MagickWand] = None):
        self.settings = settings or ResizeSettings()
        self._wand = wand if wand is not None else PillowWand()
        self._destroyed = False
        self.source_size: Optional[Tuple[int, int]] = None
        self.target_size: Optional[Tuple[int, int]] = None

    def __enter__(self) -> "ImageResizer":
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    def resize(self, image_file_path: str) -> str:
        if self._destroyed:
            raise ResizerClosedError()
        s, mw = self.settings, self._wand
        self.source_size = self.target_size = None

        try:
            mw.read_image(image_file_path)
        except Exception as e:
            raise LoadError(image_file_path, e) from e

        self.source_size = (mw.image_width, mw.image_height)
        width, height = resolve_dimensions(s, mw)
        self.target_size = (width, height)
        logger.debug(f"Resizing {image_file_path} to {width}x{height} (filter={s.filter_type!r})")

        try:
            mw.resize_image(width, height, s.filter_type)
        except Exception as e:
            raise ResizeError(e) from e

        try:
            mw.set_image_compression_quality(s.compression_quality)
        except Exception as e:
            raise CompressionError(s.compression_quality, e) from e

        dst = resized_image_path(image_file_path, s.output_dir)
        try:
            mw.write_image(dst)
        except Exception as e:
            raise WriteError(dst, e) from e

        logger.info(f"Resized {image_file_path} -> {dst}")
        return dst

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self._wand.destroy()


def resize_many(inputs: Iterable[str], settings: ResizeSettings,
                progress: Optional[ProgressCb] = None, log: Optional[LogCb] = None,
                wand_factory: Callable[[], MagickWand] = PillowWand) -> Iterator[ResizeResult]:
    """Resize every input with its own resizer, yielding one result per file."""
    if settings.output_dir:
        os.makedirs(settings.output_dir, exist_ok=True)
    files = list(inputs); total = len(files)
    for i, src in enumerate(files, 1):
        try:
            with ImageResizer(settings, wand_factory()) as resizer:
                dst = resizer.resize(src)
            yield ResizeResult(src, dst, True, None, resizer.source_size, resizer.target_size)
        except ImageResizerError as e:
            msg = f"[Error] {os.path.basename(src)} -> {e}"
            logger.error(msg)
            if log: log(msg)
            yield ResizeResult(src, None, False, str(e))
        finally:
            if progress: progress(i, total)
