"""Color model for palette entries."""

import string
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from clscodec.exceptions import InvalidHexDigitError, InvalidHexFormatError

from .enums import ColorKind, SerializeMode


def parse_hex_color(value: str) -> tuple[int, int, int]:
    """Parse a hex color string into an (r, g, b) tuple.

    Accepts "#RRGGBB", "RRGGBB", "#RGB" and "RGB". The shorthand forms
    duplicate each digit, so "#FE0" is (0xFF, 0xEE, 0x00).

    Raises:
        InvalidHexFormatError: Wrong length or misplaced '#'
        InvalidHexDigitError: A character is not a hex digit
    """
    digits = value
    if len(value) in (4, 7):
        if not value.startswith("#"):
            raise InvalidHexFormatError(value)
        digits = value[1:]
    elif len(value) not in (3, 6):
        raise InvalidHexFormatError(value)

    for ch in digits:
        if ch not in string.hexdigits:
            raise InvalidHexDigitError(value, ch)

    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)

    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


class Color(BaseModel):
    """8-bit RGB color with a transparency flag.

    Transparency is all-or-nothing in a color set: a transparent color is
    written as four zero bytes, so its stored RGB never reaches the file.
    Decoding always yields black for a transparent entry.
    """

    model_config = ConfigDict(validate_assignment=True, revalidate_instances="always")

    red: int = Field(default=0, ge=0, le=255, description="Red (0-255)")
    green: int = Field(default=0, ge=0, le=255, description="Green (0-255)")
    blue: int = Field(default=0, ge=0, le=255, description="Blue (0-255)")
    transparent: bool = Field(default=False, description="Fully transparent entry")

    @classmethod
    def new(cls, red: int, green: int, blue: int, transparent: bool = False) -> "Color":
        """Create a color from channel values."""
        return cls(red=red, green=green, blue=blue, transparent=transparent)

    @classmethod
    def from_hex(cls, value: str, transparent: bool = False) -> "Color":
        """Create a color from a hex string (see parse_hex_color)."""
        red, green, blue = parse_hex_color(value)
        return cls(red=red, green=green, blue=blue, transparent=transparent)

    @classmethod
    def transparent_black(cls) -> "Color":
        """The color every transparent entry decodes to."""
        return cls(red=0, green=0, blue=0, transparent=True)

    @property
    def kind(self) -> ColorKind:
        """Which representation this color is written as."""
        return ColorKind.TRANSPARENT if self.transparent else ColorKind.OPAQUE

    def get_rgb(self) -> tuple[int, int, int]:
        """Return the stored (r, g, b) tuple."""
        return (self.red, self.green, self.blue)

    def set_rgb(self, red: int, green: int, blue: int) -> None:
        """Replace all three channels. Nothing changes if any value is invalid."""
        checked = Color(red=red, green=green, blue=blue)
        self.red = checked.red
        self.green = checked.green
        self.blue = checked.blue

    def set_rgb_hex(self, value: str) -> None:
        """Replace all three channels from a hex string."""
        self.set_rgb(*parse_hex_color(value))

    def set_transparency(self, transparent: bool) -> None:
        self.transparent = transparent

    def to_hex(self, with_number_sign: bool = True) -> str:
        """Convert to an uppercase hex string.

        Example:
            >>> Color.new(1, 128, 255).to_hex()
            '#0180FF'
            >>> Color.new(1, 128, 255).to_hex(with_number_sign=False)
            '0180FF'
        """
        prefix = "#" if with_number_sign else ""
        return f"{prefix}{self.red:02X}{self.green:02X}{self.blue:02X}"

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        context = info.context or {}
        mode = SerializeMode(context.get("color_mode", SerializeMode.STRUCT))

        if mode is SerializeMode.SEQ:
            return [] if self.transparent else [self.red, self.green, self.blue]
        if mode is SerializeMode.HEX:
            return "" if self.transparent else self.to_hex(with_number_sign=False)
        if mode is SerializeMode.HEX_WITH_NUMBER_SIGN:
            return "" if self.transparent else self.to_hex(with_number_sign=True)
        return handler(self)
