"""Shared fixtures: an in-memory wand and small sample images on disk."""

from pathlib import Path
from typing import Optional

import pytest
from PIL import Image

from image_resizer.core import wand as wand_module
from image_resizer.core.filters import FilterType


class FakeWand:
    """In-memory MagickWand that records calls and fails on demand."""

    width = 1200
    height = 850

    def __init__(self):
        self.calls: list[tuple] = []
        self.err_read: Optional[Exception] = None
        self.err_resize: Optional[Exception] = None
        self.err_quality: Optional[Exception] = None
        self.err_write: Optional[Exception] = None
        self.destroyed = 0

    def read_image(self, path: str) -> None:
        self.calls.append(("read", path))
        if self.err_read:
            raise self.err_read

    def resize_image(self, width: int, height: int, filter_type: FilterType) -> None:
        self.calls.append(("resize", width, height, filter_type))
        if self.err_resize:
            raise self.err_resize

    @property
    def image_width(self) -> int:
        return self.width

    @property
    def image_height(self) -> int:
        return self.height

    def set_image_compression_quality(self, quality: int) -> None:
        self.calls.append(("quality", quality))
        if self.err_quality:
            raise self.err_quality

    def write_image(self, path: str) -> None:
        self.calls.append(("write", path))
        if self.err_write:
            raise self.err_write

    def destroy(self) -> None:
        self.destroyed += 1

    def steps(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_wand() -> FakeWand:
    return FakeWand()


@pytest.fixture
def fake_wand_factory():
    """Factory that remembers every FakeWand it hands out."""
    made: list[FakeWand] = []

    def factory() -> FakeWand:
        w = FakeWand()
        made.append(w)
        return w

    factory.made = made
    return factory


@pytest.fixture(autouse=True)
def no_leaked_wands():
    """Every test must destroy the Pillow wands it creates."""
    before = wand_module.live_wands()
    yield
    assert wand_module.live_wands() == before


@pytest.fixture
def rgb_jpeg(tmp_path: Path) -> Path:
    path = tmp_path / "photo.jpg"
    Image.new("RGB", (120, 80), color=(200, 30, 30)).save(path, format="JPEG")
    return path


@pytest.fixture
def rgba_png(tmp_path: Path) -> Path:
    path = tmp_path / "logo.png"
    Image.new("RGBA", (64, 48), color=(0, 0, 255, 128)).save(path, format="PNG")
    return path


@pytest.fixture
def noisy_jpeg(tmp_path: Path) -> Path:
    """A JPEG with enough detail for quality to change the encoded size."""
    path = tmp_path / "noise.jpg"
    img = Image.effect_noise((256, 256), 80).convert("RGB")
    img.save(path, format="JPEG", quality=95)
    return path
