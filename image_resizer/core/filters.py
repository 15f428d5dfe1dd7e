from enum import IntEnum

from PIL import Image


class FilterType(IntEnum):
    """Resampling filter selector, forwarded as-is to Pillow.

    Values mirror ``PIL.Image.Resampling``; UNDEFINED lets Pillow pick its
    own default for the image mode.
    """

    UNDEFINED = -1
    NEAREST = Image.Resampling.NEAREST
    BOX = Image.Resampling.BOX
    BILINEAR = Image.Resampling.BILINEAR
    HAMMING = Image.Resampling.HAMMING
    BICUBIC = Image.Resampling.BICUBIC
    LANCZOS = Image.Resampling.LANCZOS

    # ImageMagick-style aliases
    POINT = Image.Resampling.NEAREST
    TRIANGLE = Image.Resampling.BILINEAR
    CUBIC = Image.Resampling.BICUBIC

    @classmethod
    def from_name(cls, name: str) -> "FilterType":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(n.lower() for n in cls.__members__)
            raise ValueError(f"Unknown filter '{name}' (choose from: {choices})") from None
