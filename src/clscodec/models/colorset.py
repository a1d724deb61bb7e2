"""Colorset model: a complete named palette (data structure only - byte layout is in clscodec.codec)."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field

from .color import Color, parse_hex_color
from .color_name import ColorName
from .color_segment import ColorSegment
from .color_segment_list import ColorSegmentList
from .colorset_name import ColorsetName
from .config import CodecConfig
from .enums import SerializeMode

logger = logging.getLogger(__name__)


class Colorset(BaseModel):
    """A named palette of color segments.

    The file header and the reserved field that surround these values on
    disk are constants of the format and are not stored here.

    Editing by index:
        Every ``*_color_*`` method takes a segment index and raises
        IndexOutOfRangeError when it does not exist. Validation happens
        before anything is changed, so a failed call leaves the color set
        as it was.
    """

    name: ColorsetName = Field(default_factory=ColorsetName, description="Color set title")
    segments: ColorSegmentList = Field(default_factory=ColorSegmentList, description="Palette entries")

    @classmethod
    def new(cls, config: Optional[CodecConfig] = None) -> "Colorset":
        """Create a color set holding a single unnamed transparent entry."""
        config = config or CodecConfig()
        return cls(
            name=ColorsetName.with_str(config.default_colorset_name),
            segments=ColorSegmentList(segments=[ColorSegment.new(Color.transparent_black())]),
        )

    # Codec ---------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes, config: Optional[CodecConfig] = None) -> "Colorset":
        """Decode a color set from .cls bytes (see clscodec.codec.decode)."""
        from clscodec.codec import decode

        return decode(data, config)

    def to_bytes(self) -> bytes:
        """Encode this color set to .cls bytes (see clscodec.codec.encode)."""
        from clscodec.codec import encode

        return encode(self)

    def size_in_cls(self) -> int:
        """Size of the encoded file in bytes."""
        from clscodec.codec.sizes import colorset_size

        return colorset_size(self)

    # Editing -------------------------------------------------------------

    def set_name(self, value: str, config: Optional[CodecConfig] = None) -> None:
        """Rename the color set. An empty value applies the configured fallback name."""
        if not value:
            value = (config or CodecConfig()).fallback_colorset_name
            logger.debug(f"Empty colorset name replaced with {value!r}")
        self.name.set_str(value)

    def get_name(self) -> str:
        return self.name.text

    def set_color_name(self, index: int, value: str) -> None:
        """Name a segment. An empty value removes the name."""
        segment = self.segments.get(index)
        segment.set_name(value or None)

    def set_color_rgb(self, index: int, red: int, green: int, blue: int) -> None:
        self.segments.get(index).color.set_rgb(red, green, blue)

    def set_color_hex(self, index: int, value: str) -> Color:
        """Set a segment's RGB from a hex string and return the updated color."""
        red, green, blue = parse_hex_color(value)
        color = self.segments.get(index).color
        color.set_rgb(red, green, blue)
        return color

    def set_color_transparency(self, index: int, transparent: bool) -> None:
        self.segments.get(index).color.set_transparency(transparent)

    def add_color_segment(self, name: str, hex_color: str, transparent: bool = False) -> ColorSegment:
        """Append a new segment and return it. An empty name adds it without a label."""
        color = Color.from_hex(hex_color, transparent)
        color_name = ColorName.with_str(name) if name else None
        segment = ColorSegment.new(color, color_name)
        self.segments.push(segment)
        return self.segments.get(len(self.segments) - 1)

    def remove_color_segment(self, index: int) -> ColorSegment:
        return self.segments.remove(index)

    @staticmethod
    def validate_color_name(value: str) -> None:
        """Raise NameTooLongError if value cannot be used as a color name."""
        ColorName.validate_str(value)

    # Export --------------------------------------------------------------

    def export(self, mode: SerializeMode = SerializeMode.STRUCT) -> dict[str, Any]:
        """Render as plain Python data with colors shown in the given mode.

        Example:
            >>> Colorset.new().export(SerializeMode.HEX)
            {'name': 'NewColorset', 'segments': [{'color': '', 'name': None}]}
        """
        return self.model_dump(context={"color_mode": mode})

    def export_json(self, mode: SerializeMode = SerializeMode.STRUCT, indent: Optional[int] = None) -> str:
        return self.model_dump_json(indent=indent, context={"color_mode": mode})

