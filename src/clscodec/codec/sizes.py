"""On-disk sizes of each record.

``*_content_size`` excludes a record's own size header and ``*_size``
includes it. The size headers written into a file always use the content
size.
"""

from clscodec.models import ColorName, ColorSegment, ColorSegmentList, Colorset, ColorsetName

from .shift_jis import encode_shift_jis

MAGIC_SIZE = 6
RESERVED_SIZE = 4
COLOR_SIZE = 4
NAME_FLAG_SIZE = 4
SEGMENT_HEADER_SIZE = 4
LIST_HEADER_SIZE = 8  # u32 count + u32 total size
COLORSET_NAME_HEADER_SIZE = 4
COLORSET_NAME_FIXED_SIZE = 8  # u16 sjis_len + u32 delimiter + u16 utf8_len


def color_name_size(name: ColorName) -> int:
    return 2 + name.byte_len_utf16


def color_segment_content_size(segment: ColorSegment) -> int:
    size = COLOR_SIZE + NAME_FLAG_SIZE
    if segment.name is not None:
        size += color_name_size(segment.name)
    return size


def color_segment_size(segment: ColorSegment) -> int:
    return SEGMENT_HEADER_SIZE + color_segment_content_size(segment)


def segment_list_content_size(segments: ColorSegmentList) -> int:
    return sum(color_segment_size(segment) for segment in segments)


def segment_list_size(segments: ColorSegmentList) -> int:
    return LIST_HEADER_SIZE + segment_list_content_size(segments)


def colorset_name_content_size(name: ColorsetName) -> int:
    sjis_len = len(encode_shift_jis(name.text))
    utf8_len = len(name.text.encode("utf-8"))
    return COLORSET_NAME_FIXED_SIZE + sjis_len + utf8_len


def colorset_name_size(name: ColorsetName) -> int:
    return COLORSET_NAME_HEADER_SIZE + colorset_name_content_size(name)


def colorset_size(colorset: Colorset) -> int:
    return (
        MAGIC_SIZE
        + colorset_name_size(colorset.name)
        + RESERVED_SIZE
        + segment_list_size(colorset.segments)
    )
