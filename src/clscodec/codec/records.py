"""
Encoders and decoders for the nested records of a .cls file.

Record Layout
=============

Every record is little-endian. Containers write a size header before their
content; decoders read that header but let the field parsers decide how
many bytes are consumed::

    ColorsetName
      u32 block_size = 8 + sjis_len + utf8_len
      u16 sjis_len, u8[sjis_len]      lossy Shift-JIS copy (never read back)
      u32 0                           delimiter
      u16 utf8_len, u8[utf8_len]      authoritative UTF-8 copy

    ColorSegmentList
      u32 count
      u32 total size of the segment records
      ColorSegment * count

    ColorSegment
      u32 content_size = 8 (+ 2 + name_len if named)
      Color            R G B A  (A == 0 means transparent)
      u32 name flag    1 = ColorName follows
      ColorName        u16 byte_len + UTF-16LE code units

Decoders take a ClsReader positioned at the start of the record and leave
it just past the record. Models are only built once all their fields have
been read, so a failure never produces a partial value.
"""

import logging

from clscodec.exceptions import (
    EmptySegmentListError,
    InvalidNameLengthError,
    InvalidUtf8Error,
    InvalidUtf16Error,
    NameTooLongError,
    SegmentCountMismatchError,
    TruncatedInputError,
)
from clscodec.models import Color, ColorName, ColorSegment, ColorSegmentList, ColorsetName

from .reader import ClsReader
from .shift_jis import encode_shift_jis
from .sizes import (
    COLORSET_NAME_FIXED_SIZE,
    color_segment_content_size,
    segment_list_content_size,
)
from .writer import ClsWriter

logger = logging.getLogger(__name__)

OPAQUE_ALPHA = 0xFF
TRANSPARENT_BYTES = b"\x00\x00\x00\x00"
NAME_DELIMITER = 0
NAME_PRESENT = 1
NAME_ABSENT = 0


# Color

def encode_color(writer: ClsWriter, color: Color) -> None:
    """Write 4 bytes; a transparent color always becomes 00 00 00 00."""
    if color.transparent:
        writer.write_bytes(TRANSPARENT_BYTES)
    else:
        writer.write_bytes(bytes((color.red, color.green, color.blue, OPAQUE_ALPHA)))


def decode_color(reader: ClsReader) -> Color:
    """Read 4 bytes. Only whether alpha is zero matters, not its value."""
    red, green, blue, alpha = reader.read_bytes(4, "color")
    if alpha == 0:
        return Color.transparent_black()
    return Color(red=red, green=green, blue=blue, transparent=False)


# ColorName

def encode_color_name(writer: ClsWriter, name: ColorName) -> None:
    encoded = name.text.encode("utf-16-le")
    writer.write_u16(len(encoded))
    writer.write_bytes(encoded)


def decode_color_name(reader: ClsReader) -> ColorName:
    start = reader.offset
    size = reader.read_u16("color name length")
    raw = reader.read_bytes(size, "color name")

    try:
        text = raw.decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise InvalidUtf16Error(e.reason, start) from e

    try:
        return ColorName.with_str(text)
    except NameTooLongError as e:
        raise InvalidNameLengthError(e.technical_message, start) from e


# ColorSegment

def encode_color_segment(writer: ClsWriter, segment: ColorSegment) -> None:
    writer.write_u32(color_segment_content_size(segment))
    encode_color(writer, segment.color)
    if segment.name is not None:
        writer.write_u32(NAME_PRESENT)
        encode_color_name(writer, segment.name)
    else:
        writer.write_u32(NAME_ABSENT)


def decode_color_segment(reader: ClsReader) -> ColorSegment:
    # The size header is not used to bound the record
    reader.read_u32("segment size")
    color = decode_color(reader)
    flag = reader.read_u32("color name flag")
    name = decode_color_name(reader) if flag == NAME_PRESENT else None
    return ColorSegment(color=color, name=name)


# ColorSegmentList

def encode_color_segment_list(writer: ClsWriter, segments: ColorSegmentList) -> None:
    if not len(segments):
        logger.warning("Encoding a color set with no segments; the result cannot be decoded")
    writer.write_u32(len(segments))
    writer.write_u32(segment_list_content_size(segments))
    for segment in segments:
        encode_color_segment(writer, segment)


def decode_color_segment_list(reader: ClsReader) -> ColorSegmentList:
    """Read segments until the input runs out.

    A segment that is cut short ends the list; the reader is moved back to
    where that segment began. Any other error propagates.

    Raises:
        EmptySegmentListError: No segment could be read
        SegmentCountMismatchError: Decoded count differs from the header
    """
    declared = reader.read_u32("segment count")
    reader.read_u32("segment list size")

    segments: list[ColorSegment] = []
    while reader.remaining:
        start = reader.offset
        try:
            segments.append(decode_color_segment(reader))
        except TruncatedInputError as e:
            logger.debug(f"Segment list ends at offset {start}: {e.technical_message}")
            reader.seek(start)
            break

    if not segments:
        raise EmptySegmentListError(reader.offset)
    if len(segments) != declared:
        raise SegmentCountMismatchError(declared, len(segments), reader.offset)

    return ColorSegmentList(segments=segments)


# ColorsetName

def encode_colorset_name(writer: ClsWriter, name: ColorsetName) -> None:
    sjis = encode_shift_jis(name.text)
    utf8 = name.text.encode("utf-8")

    writer.write_u32(COLORSET_NAME_FIXED_SIZE + len(sjis) + len(utf8))
    writer.write_u16(len(sjis))
    writer.write_bytes(sjis)
    writer.write_u32(NAME_DELIMITER)
    writer.write_u16(len(utf8))
    writer.write_bytes(utf8)


def decode_colorset_name(reader: ClsReader) -> ColorsetName:
    reader.read_u32("colorset name size")
    sjis_len = reader.read_u16("shift-jis name length")
    reader.skip(sjis_len, "shift-jis name")
    reader.skip(4, "name delimiter")

    start = reader.offset
    utf8_len = reader.read_u16("utf-8 name length")
    raw = reader.read_bytes(utf8_len, "utf-8 name")

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(e.reason, start) from e

    try:
        return ColorsetName.with_str(text)
    except NameTooLongError as e:
        raise InvalidNameLengthError(e.technical_message, start) from e
