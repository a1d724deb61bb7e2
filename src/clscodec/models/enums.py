"""Enums for color set models."""

from enum import Enum


class ColorKind(Enum):
    """The two color representations a .cls file can hold."""

    OPAQUE = "opaque"
    TRANSPARENT = "transparent"


class SerializeMode(Enum):
    """How colors are rendered when a color set is exported."""

    STRUCT = "struct"  # {"red": .., "green": .., "blue": .., "transparent": ..}
    SEQ = "seq"  # [r, g, b], [] when transparent
    HEX = "hex"  # "RRGGBB", "" when transparent
    HEX_WITH_NUMBER_SIGN = "hex_with_number_sign"  # "#RRGGBB", "" when transparent
