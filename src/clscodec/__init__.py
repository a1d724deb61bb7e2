"""clscodec: Encoder/decoder for .cls color set palette files."""

import logging

__version__ = "0.1.0"

from .codec import decode, encode
from .models import (
    CodecConfig,
    Color,
    ColorKind,
    ColorName,
    ColorSegment,
    ColorSegmentList,
    Colorset,
    ColorsetName,
    SerializeMode,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CodecConfig",
    "Color",
    "ColorKind",
    "ColorName",
    "ColorSegment",
    "ColorSegmentList",
    "Colorset",
    "ColorsetName",
    "SerializeMode",
    "decode",
    "encode",
]
