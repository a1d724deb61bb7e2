"""Top-level .cls encode/decode.

File layout::

    [0..6)  magic 53 4C 43 43 00 01
    ColorsetName block
    u32     reserved, always 4
    ColorSegmentList block

The magic and the reserved value have no known meaning beyond identifying
the format. They are written verbatim and never interpreted.
"""

import logging
from typing import Optional

from clscodec.exceptions import BadMagicError, ErrorContext
from clscodec.models import CodecConfig, Colorset

from .reader import ClsReader
from .records import (
    decode_color_segment_list,
    decode_colorset_name,
    encode_color_segment_list,
    encode_colorset_name,
)
from .sizes import MAGIC_SIZE, colorset_size
from .writer import ClsWriter

logger = logging.getLogger(__name__)

CLS_MAGIC = bytes((0x53, 0x4C, 0x43, 0x43, 0x00, 0x01))
RESERVED_VALUE = 4


def encode_colorset(writer: ClsWriter, colorset: Colorset) -> None:
    writer.write_bytes(CLS_MAGIC)
    encode_colorset_name(writer, colorset.name)
    writer.write_u32(RESERVED_VALUE)
    encode_color_segment_list(writer, colorset.segments)


def decode_colorset(reader: ClsReader, config: CodecConfig) -> Colorset:
    magic = reader.read_bytes(MAGIC_SIZE, "file header")
    if magic != CLS_MAGIC:
        if config.strict_magic:
            raise BadMagicError(magic, CLS_MAGIC)
        logger.warning(f"Ignoring unexpected file header {magic.hex(' ')}")

    name = decode_colorset_name(reader)
    reader.read_u32("reserved field")
    segments = decode_color_segment_list(reader)
    return Colorset(name=name, segments=segments)


def encode(colorset: Colorset) -> bytes:
    """Encode a color set to .cls bytes."""
    with ErrorContext("encode color set", logger_instance=logger):
        writer = ClsWriter()
        encode_colorset(writer, colorset)
        data = writer.getvalue()

    expected = colorset_size(colorset)
    if len(data) != expected:
        logger.error(f"Encoded {len(data)} bytes but size bookkeeping expected {expected}")
    logger.debug(f"Encoded {colorset.name.text!r}: {len(data)} bytes, {len(colorset.segments)} segment(s)")
    return data


def decode(data: bytes, config: Optional[CodecConfig] = None) -> Colorset:
    """Decode .cls bytes into a Colorset.

    Args:
        data: Complete file contents
        config: Codec policy; defaults to strict header checking

    Raises:
        DecodeError: Any subclass, with the byte offset of the problem
    """
    config = config or CodecConfig()
    reader = ClsReader(data)

    with ErrorContext("decode color set", logger_instance=logger):
        colorset = decode_colorset(reader, config)

    if reader.remaining:
        logger.debug(f"Ignoring {reader.remaining} trailing byte(s) after the segment list")
    logger.debug(f"Decoded {colorset.name.text!r}: {len(colorset.segments)} segment(s)")
    return colorset
