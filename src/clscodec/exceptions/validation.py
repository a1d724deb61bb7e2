"""Value validation exceptions.

Raised by model mutators before any state changes:
- NameTooLongError: A ColorName or ColorsetName exceeds a format limit
- UnencodableNameError: A name holds a lone surrogate
- HexParseError: A hex color string could not be parsed
- IndexOutOfRangeError: A segment index does not exist
"""

from .base import ClsCodecError


class NameTooLongError(ClsCodecError):
    """A name string exceeds one of the limits the format imposes."""

    def __init__(self, name_kind: str, limit_kind: str, actual: int, limit: int):
        """
        Initialize name too long error.

        Args:
            name_kind: Which name was rejected ("color_name" or "colorset_name")
            limit_kind: Which rule failed ("utf16_bytes", "utf8_bytes" or "char_count")
            actual: Measured value for the rejected string
            limit: Maximum allowed value
        """
        units = {
            "utf16_bytes": "bytes in UTF-16",
            "utf8_bytes": "bytes in UTF-8",
            "char_count": "characters",
        }[limit_kind]
        label = "Color name" if name_kind == "color_name" else "Colorset name"

        recovery = f"Shorten the name to at most {limit} {units}"
        if limit_kind == "char_count":
            recovery += "\nCharacters outside the Basic Multilingual Plane (emoji etc.) count as two"

        super().__init__(
            user_message=f"{label} is too long: {actual} {units} (max {limit})",
            technical_message=f"{name_kind} rejected: {limit_kind}={actual} > {limit}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.name_kind = name_kind
        self.limit_kind = limit_kind
        self.actual = actual
        self.limit = limit


class UnencodableNameError(ClsCodecError):
    """A name contains a character with no UTF-8 or UTF-16 encoding."""

    def __init__(self, name_kind: str, reason: str):
        label = "Color name" if name_kind == "color_name" else "Colorset name"
        super().__init__(
            user_message=f"{label} contains a character that cannot be stored",
            technical_message=f"{name_kind} rejected: {reason}",
            recoverable=True,
            recovery_hint="Remove unpaired surrogate characters from the name",
        )
        self.name_kind = name_kind


class HexParseError(ClsCodecError):
    """A hex color string could not be parsed."""

    def __init__(self, value: str, reason: str):
        super().__init__(
            user_message=f"Invalid hex color {value!r}: {reason}",
            technical_message=f"Hex color parse failed for {value!r}: {reason}",
            recoverable=True,
            recovery_hint="Use one of #RRGGBB, RRGGBB, #RGB or RGB",
        )
        self.value = value
        self.reason = reason


class InvalidHexFormatError(HexParseError):
    """Hex string has the wrong length or a misplaced number sign."""

    def __init__(self, value: str):
        super().__init__(value, "expected 3 or 6 hex digits with an optional leading '#'")


class InvalidHexDigitError(HexParseError):
    """Hex string contains a character that is not a hex digit."""

    def __init__(self, value: str, digit: str):
        super().__init__(value, f"{digit!r} is not a hex digit")
        self.digit = digit


class IndexOutOfRangeError(ClsCodecError):
    """A segment index is outside the list."""

    def __init__(self, index: int, length: int, operation: str = "access"):
        super().__init__(
            user_message=f"Color segment {index} does not exist",
            technical_message=f"Cannot {operation} index {index}: list has {length} segment(s)",
            recoverable=True,
            recovery_hint=f"Valid indices are 0 to {length - 1}" if length else "The list is empty",
        )
        self.index = index
        self.length = length
