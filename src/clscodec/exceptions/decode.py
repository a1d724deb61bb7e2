"""Decode-related exceptions.

Every failure while reading a .cls byte stream is reported as a subclass of
DecodeError. Each carries the byte offset where the problem was detected so
the technical message can point at the bad record.
"""

from typing import Optional

from .base import ClsCodecError


class DecodeError(ClsCodecError):
    """Input bytes are not a valid .cls color set."""

    def __init__(
        self,
        user_message: str,
        offset: Optional[int] = None,
        technical_message: Optional[str] = None,
        **kwargs
    ):
        if technical_message and offset is not None:
            technical_message = f"{technical_message} (at offset {offset})"
        kwargs.setdefault("recovery_hint", "Check that the file is an unmodified .cls color set")
        super().__init__(user_message, technical_message=technical_message, **kwargs)
        self.offset = offset


class TruncatedInputError(DecodeError):
    """Input ended before a field could be read."""

    def __init__(self, field: str, needed: int, available: int, offset: int):
        super().__init__(
            user_message="Color set data ends unexpectedly",
            offset=offset,
            technical_message=f"Need {needed} byte(s) for {field}, only {available} left",
        )
        self.field = field
        self.needed = needed
        self.available = available


class BadMagicError(DecodeError):
    """File header does not match the .cls magic."""

    def __init__(self, found: bytes, expected: bytes):
        super().__init__(
            user_message="Not a color set file (bad header)",
            offset=0,
            technical_message=f"Expected header {expected.hex(' ')}, found {found.hex(' ')}",
            recovery_hint="Set strict_magic to false in the codec config to read files with a nonstandard header",
        )
        self.found = found
        self.expected = expected


class InvalidUtf16Error(DecodeError):
    """A color name is not valid UTF-16LE."""

    def __init__(self, reason: str, offset: int):
        super().__init__(
            user_message="Color name is not valid UTF-16 text",
            offset=offset,
            technical_message=f"UTF-16LE decode failed: {reason}",
        )


class InvalidUtf8Error(DecodeError):
    """The colorset name is not valid UTF-8."""

    def __init__(self, reason: str, offset: int):
        super().__init__(
            user_message="Colorset name is not valid UTF-8 text",
            offset=offset,
            technical_message=f"UTF-8 decode failed: {reason}",
        )


class InvalidNameLengthError(DecodeError):
    """A decoded name breaks the length rules it must satisfy."""

    def __init__(self, reason: str, offset: int):
        super().__init__(
            user_message="Color set contains a name that is too long",
            offset=offset,
            technical_message=f"Decoded name rejected: {reason}",
        )


class EmptySegmentListError(DecodeError):
    """Segment list decoded to zero segments."""

    def __init__(self, offset: int):
        super().__init__(
            user_message="Color set has no colors",
            offset=offset,
            technical_message="No color segment records could be decoded",
        )


class SegmentCountMismatchError(DecodeError):
    """Declared segment count differs from the records present."""

    def __init__(self, declared: int, decoded: int, offset: int):
        super().__init__(
            user_message="Color set is damaged (color count does not match)",
            offset=offset,
            technical_message=f"Header declares {declared} segment(s), decoded {decoded}",
        )
        self.declared = declared
        self.decoded = decoded
