"""Resize images with a chosen size, resampling filter and compression quality."""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "0.1.0"
