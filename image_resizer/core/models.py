from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .filters import FilterType

@dataclass(frozen=True)
class ResizeSettings:
    width: Optional[int]=None
    height: Optional[int]=None
    compression_quality: int=0
    filter_type: FilterType=FilterType.UNDEFINED
    output_dir: str=""

class ResizeSettingsBuilder:
    """Chained setters over ResizeSettings; a later call overrides an earlier one.

    Nothing is validated here, dimensions are only checked once the source
    image is loaded.
    """

    def __init__(self, base: Optional[ResizeSettings]=None):
        self._settings = base or ResizeSettings()

    def dimensions(self, width: int, height: int) -> "ResizeSettingsBuilder":
        self._settings = replace(self._settings, width=width, height=height)
        return self

    def compression_quality(self, quality: int) -> "ResizeSettingsBuilder":
        self._settings = replace(self._settings, compression_quality=quality)
        return self

    def filter(self, filter_type: FilterType) -> "ResizeSettingsBuilder":
        self._settings = replace(self._settings, filter_type=filter_type)
        return self

    def output_dir(self, path: str) -> "ResizeSettingsBuilder":
        self._settings = replace(self._settings, output_dir=path)
        return self

    def build(self) -> ResizeSettings:
        return self._settings

@dataclass
class ResizeResult:
    src_path: str
    dst_path: Optional[str]
    ok: bool
    error: Optional[str] = None
    in_size: Optional[Tuple[int, int]] = None
    out_size: Optional[Tuple[int, int]] = None
