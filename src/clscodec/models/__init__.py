"""Data models for .cls color sets."""

from .color import Color, parse_hex_color
from .color_name import MAX_COLOR_NAME_BYTES, ColorName
from .color_segment import ColorSegment
from .color_segment_list import ColorSegmentList
from .colorset import Colorset
from .colorset_name import MAX_COLORSET_NAME_BYTES, MAX_COLORSET_NAME_CHARS, ColorsetName
from .config import CodecConfig
from .enums import ColorKind, SerializeMode

__all__ = [
    # Models
    "Color",
    "ColorName",
    "ColorSegment",
    "ColorSegmentList",
    "Colorset",
    "ColorsetName",
    # Enums
    "ColorKind",
    "SerializeMode",
    # Config
    "CodecConfig",
    # Limits
    "MAX_COLOR_NAME_BYTES",
    "MAX_COLORSET_NAME_BYTES",
    "MAX_COLORSET_NAME_CHARS",
    "parse_hex_color",
]
