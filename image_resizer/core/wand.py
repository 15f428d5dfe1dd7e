"""Imaging capability used by the resizer, and its Pillow-backed implementation.

A wand holds exactly one decoded image. Every wand must be destroyed once the
caller is done with it, and the process-wide environment may only be
terminated after all wands are gone.
"""

import logging
import os
import threading
from typing import Optional, Protocol

from PIL import Image

from .errors import ImagingEnvironmentError, WandError
from .filters import FilterType

logger = logging.getLogger(__name__)

_env_lock = threading.Lock()
_initialized = False
_live_wands = 0


def initialize() -> None:
    """Register Pillow's format plugins. Safe to call repeatedly."""
    global _initialized
    with _env_lock:
        if _initialized:
            return
        Image.init()
        _initialized = True
    logger.debug(f"Imaging environment initialized ({len(Image.registered_extensions())} extensions)")


def terminate() -> None:
    """Tear down the imaging environment.

    Not safe while wands are still alive; raises ImagingEnvironmentError in
    that case. A no-op when the environment is not initialized.
    """
    global _initialized
    with _env_lock:
        if not _initialized:
            return
        if _live_wands:
            raise ImagingEnvironmentError(
                f"cannot terminate imaging environment: {_live_wands} wand(s) not destroyed"
            )
        _initialized = False
    logger.debug("Imaging environment terminated")


def is_initialized() -> bool:
    return _initialized


def live_wands() -> int:
    return _live_wands


class MagickWand(Protocol):
    def read_image(self, path: str) -> None: ...

    def resize_image(self, width: int, height: int, filter_type: FilterType) -> None: ...

    @property
    def image_width(self) -> int: ...

    @property
    def image_height(self) -> int: ...

    def set_image_compression_quality(self, quality: int) -> None: ...

    def write_image(self, path: str) -> None: ...

    def destroy(self) -> None: ...


class PillowWand:
    """MagickWand implementation on top of Pillow."""

    def __init__(self):
        global _live_wands
        initialize()
        with _env_lock:
            _live_wands += 1
        self._image: Optional[Image.Image] = None
        self._format: Optional[str] = None
        self._quality = 0
        self._destroyed = False

    def _loaded(self) -> Image.Image:
        if self._destroyed:
            raise WandError("wand has been destroyed")
        if self._image is None:
            raise WandError("no image loaded")
        return self._image

    def read_image(self, path: str) -> None:
        if self._destroyed:
            raise WandError("wand has been destroyed")
        im = Image.open(path)
        try:
            im.load()
        except Exception:
            im.close()
            raise
        self._close_image()
        self._image, self._format = im, im.format

    def resize_image(self, width: int, height: int, filter_type: FilterType) -> None:
        im = self._loaded()
        resample = None if filter_type == FilterType.UNDEFINED else int(filter_type)
        resized = im.resize((width, height), resample=resample)
        im.close()
        self._image = resized

    @property
    def image_width(self) -> int:
        return self._loaded().width

    @property
    def image_height(self) -> int:
        return self._loaded().height

    def set_image_compression_quality(self, quality: int) -> None:
        self._loaded()
        self._quality = quality

    def write_image(self, path: str) -> None:
        im = self._loaded()
        ext = os.path.splitext(path)[1].lower()
        pil_fmt = Image.registered_extensions().get(ext) or self._format
        if not pil_fmt:
            raise WandError(f"cannot determine output format for {path}")

        if pil_fmt == "JPEG" and im.mode in ("RGBA", "LA", "P"):
            im = im.convert("RGB")
        kw = {"optimize": True} if pil_fmt == "JPEG" else {}
        # 0 keeps the encoder default
        if self._quality:
            if pil_fmt in ("JPEG", "WEBP"):
                kw["quality"] = int(self._quality)
            elif pil_fmt == "PNG":
                kw["compress_level"] = min(int(self._quality) // 10, 9)
        im.save(path, format=pil_fmt, **kw)

    def destroy(self) -> None:
        global _live_wands
        if self._destroyed:
            return
        self._close_image()
        self._destroyed = True
        with _env_lock:
            _live_wands -= 1

    def _close_image(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None
