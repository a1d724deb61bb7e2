"""Binary encoding and decoding of .cls color set files."""

from .colorset import CLS_MAGIC, RESERVED_VALUE, decode, encode
from .reader import ClsReader
from .records import (
    decode_color,
    decode_color_name,
    decode_color_segment,
    decode_color_segment_list,
    decode_colorset_name,
    encode_color,
    encode_color_name,
    encode_color_segment,
    encode_color_segment_list,
    encode_colorset_name,
)
from .shift_jis import encode_shift_jis
from .writer import ClsWriter

__all__ = [
    "CLS_MAGIC",
    "ClsReader",
    "ClsWriter",
    "RESERVED_VALUE",
    "decode",
    "decode_color",
    "decode_color_name",
    "decode_color_segment",
    "decode_color_segment_list",
    "decode_colorset_name",
    "encode",
    "encode_color",
    "encode_color_name",
    "encode_color_segment",
    "encode_color_segment_list",
    "encode_colorset_name",
    "encode_shift_jis",
]
