"""Tests for ResizeSettings and its builder."""

import dataclasses

import pytest

from image_resizer.core.filters import FilterType
from image_resizer.core.models import ResizeSettings, ResizeSettingsBuilder


def test_builder_with_all_options():
    settings = (
        ResizeSettingsBuilder()
        .dimensions(800, 600)
        .compression_quality(50)
        .filter(FilterType.LANCZOS)
        .output_dir("path/to/some/dir")
        .build()
    )

    assert settings == ResizeSettings(
        width=800,
        height=600,
        compression_quality=50,
        filter_type=FilterType.LANCZOS,
        output_dir="path/to/some/dir",
    )


def test_builder_no_options():
    settings = ResizeSettingsBuilder().build()

    assert settings.width is None
    assert settings.height is None
    assert settings.compression_quality == 0
    assert settings.filter_type == FilterType.UNDEFINED
    assert settings.output_dir == ""


def test_later_setter_overrides_earlier():
    settings = (
        ResizeSettingsBuilder()
        .dimensions(800, 600)
        .compression_quality(10)
        .filter(FilterType.BOX)
        .output_dir("first")
        .dimensions(320, 240)
        .compression_quality(90)
        .filter(FilterType.BICUBIC)
        .output_dir("second")
        .build()
    )

    assert (settings.width, settings.height) == (320, 240)
    assert settings.compression_quality == 90
    assert settings.filter_type == FilterType.BICUBIC
    assert settings.output_dir == "second"


def test_builder_does_not_validate():
    settings = ResizeSettingsBuilder().dimensions(0, -1).compression_quality(500).build()

    assert (settings.width, settings.height) == (0, -1)
    assert settings.compression_quality == 500


def test_built_settings_are_frozen():
    settings = ResizeSettingsBuilder().dimensions(1, 1).build()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.width = 2  # type: ignore[misc]


def test_builder_does_not_change_previously_built_settings():
    builder = ResizeSettingsBuilder().dimensions(10, 10)
    first = builder.build()

    second = builder.dimensions(20, 20).build()

    assert first.width == 10
    assert second.width == 20


def test_builder_starts_from_base_settings():
    base = ResizeSettings(compression_quality=70, output_dir="out")

    settings = ResizeSettingsBuilder(base).dimensions(5, 6).build()

    assert settings.compression_quality == 70
    assert settings.output_dir == "out"
    assert (settings.width, settings.height) == (5, 6)
