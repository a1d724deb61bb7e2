"""Tests for ColorSegment and ColorSegmentList."""

import pytest

from clscodec.codec import (
    ClsReader,
    decode_color_segment,
    decode_color_segment_list,
    encode_color_segment,
    encode_color_segment_list,
)
from clscodec.codec.sizes import color_segment_size, segment_list_size
from clscodec.exceptions import (
    EmptySegmentListError,
    IndexOutOfRangeError,
    InvalidUtf16Error,
    NameTooLongError,
    SegmentCountMismatchError,
)
from clscodec.models import Color, ColorName, ColorSegment, ColorSegmentList

NAMED_BYTES = (
    b"\x1c\x00\x00\x00"
    + bytes([81, 82, 83, 255])
    + b"\x01\x00\x00\x00"
    + b"\x12\x00" + "TESTCOLOR".encode("utf-16-le")
)
UNNAMED_BYTES = b"\x08\x00\x00\x00" + bytes([1, 128, 255, 255]) + b"\x00\x00\x00\x00"


def list_bytes(count: int, *records: bytes) -> bytes:
    body = b"".join(records)
    return count.to_bytes(4, "little") + len(body).to_bytes(4, "little") + body


class TestColorSegment:
    """Test ColorSegment model."""

    @pytest.mark.unit
    def test_with_values(self):
        segment = ColorSegment.with_values(81, 82, 83, name="TESTCOLOR")
        assert segment.color == Color.new(81, 82, 83)
        assert segment.name == ColorName.with_str("TESTCOLOR")
        assert segment.has_name

    @pytest.mark.unit
    def test_with_values_rejects_long_name(self):
        with pytest.raises(NameTooLongError):
            ColorSegment.with_values(0, 0, 0, name="a" * 65)

    @pytest.mark.unit
    def test_equality(self, named_segment, unnamed_segment):
        assert named_segment == ColorSegment.with_values(81, 82, 83, name="TESTCOLOR")
        assert named_segment != ColorSegment.with_values(81, 82, 83)
        assert named_segment != ColorSegment.with_values(81, 82, 83, name="OTHER")
        assert unnamed_segment == ColorSegment.with_values(1, 128, 255)

    @pytest.mark.unit
    def test_empty_name_differs_from_no_name(self):
        assert ColorSegment.with_values(1, 2, 3, name="") != ColorSegment.with_values(1, 2, 3)

    @pytest.mark.unit
    def test_new_copies_color_and_name(self):
        color = Color.new(1, 2, 3)
        name = ColorName.with_str("sky")
        segment = ColorSegment.new(color, name)
        color.set_rgb(4, 5, 6)
        name.set_str("sea")

        assert segment.color.get_rgb() == (1, 2, 3)
        assert segment.name.text == "sky"

    @pytest.mark.unit
    def test_set_name(self, unnamed_segment):
        unnamed_segment.set_name("sky")
        assert unnamed_segment.name.text == "sky"

        with pytest.raises(NameTooLongError):
            unnamed_segment.set_name("a" * 65)
        assert unnamed_segment.name.text == "sky"

        unnamed_segment.set_name(None)
        assert not unnamed_segment.has_name


class TestColorSegmentRecord:
    """Test the binary segment record."""

    @pytest.mark.unit
    def test_encode_named(self, writer, named_segment):
        encode_color_segment(writer, named_segment)
        assert writer.getvalue() == NAMED_BYTES
        assert color_segment_size(named_segment) == len(NAMED_BYTES)

    @pytest.mark.unit
    def test_encode_unnamed(self, writer, unnamed_segment):
        encode_color_segment(writer, unnamed_segment)
        assert writer.getvalue() == UNNAMED_BYTES
        assert color_segment_size(unnamed_segment) == 12

    @pytest.mark.unit
    def test_decode(self, named_segment, unnamed_segment):
        reader = ClsReader(NAMED_BYTES + UNNAMED_BYTES)
        assert decode_color_segment(reader) == named_segment
        assert decode_color_segment(reader) == unnamed_segment
        assert reader.remaining == 0

    @pytest.mark.unit
    @pytest.mark.parametrize("flag", [0, 2, 0xFFFFFFFF])
    def test_flag_other_than_one_means_unnamed(self, flag):
        data = b"\x08\x00\x00\x00" + bytes([1, 2, 3, 255]) + flag.to_bytes(4, "little")
        segment = decode_color_segment(ClsReader(data))
        assert segment.name is None

    @pytest.mark.unit
    def test_size_header_is_not_trusted(self, unnamed_segment):
        data = b"\xff\x00\x00\x00" + UNNAMED_BYTES[4:]
        assert decode_color_segment(ClsReader(data)) == unnamed_segment


class TestColorSegmentList:
    """Test ColorSegmentList editing."""

    @pytest.mark.unit
    def test_push_and_get(self, named_segment, unnamed_segment):
        segments = ColorSegmentList()
        segments.push(named_segment)
        segments.push(unnamed_segment)
        assert len(segments) == 2
        assert segments.get(1) == unnamed_segment
        assert segments[0] == named_segment
        assert list(segments) == [named_segment, unnamed_segment]

    @pytest.mark.unit
    def test_insert(self, named_segment, unnamed_segment, transparent_segment):
        segments = ColorSegmentList(segments=[named_segment])
        segments.insert(0, unnamed_segment)
        segments.insert(2, transparent_segment)
        assert list(segments) == [unnamed_segment, named_segment, transparent_segment]

        with pytest.raises(IndexOutOfRangeError):
            segments.insert(4, named_segment)

    @pytest.mark.unit
    def test_remove(self, named_segment, unnamed_segment):
        segments = ColorSegmentList(segments=[named_segment, unnamed_segment])
        assert segments.remove(0) == named_segment
        assert list(segments) == [unnamed_segment]

    @pytest.mark.unit
    @pytest.mark.parametrize("index", [1, 5, -1])
    def test_out_of_range(self, named_segment, index):
        segments = ColorSegmentList(segments=[named_segment])
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            segments.remove(index)
        assert exc_info.value.index == index
        assert exc_info.value.length == 1
        with pytest.raises(IndexOutOfRangeError):
            segments.get(index)
        assert len(segments) == 1

    @pytest.mark.unit
    def test_segments_never_share_a_color(self):
        """Test that editing one entry leaves an entry built from the same color alone."""
        shared = Color.new(1, 2, 3)
        segments = ColorSegmentList(segments=[ColorSegment.new(shared), ColorSegment.new(shared)])
        segments[0].color.set_rgb(9, 9, 9)

        assert segments[1].color.get_rgb() == (1, 2, 3)
        assert shared.get_rgb() == (1, 2, 3)

    @pytest.mark.unit
    def test_push_and_insert_store_copies(self, named_segment):
        segments = ColorSegmentList()
        segments.push(named_segment)
        segments.insert(0, named_segment)
        segments[0].set_name("changed")
        segments[1].color.set_transparency(True)

        assert segments[1].name.text == "TESTCOLOR"
        assert segments[0].color.transparent is False
        assert named_segment == ColorSegment.with_values(81, 82, 83, name="TESTCOLOR")

    @pytest.mark.unit
    def test_accepts_plain_list(self, named_segment):
        segments = ColorSegmentList.model_validate([named_segment.model_dump()])
        assert list(segments) == [named_segment]
        assert segments.model_dump() == [{"color": named_segment.color.model_dump(), "name": "TESTCOLOR"}]


class TestColorSegmentListRecord:
    """Test the binary segment list record."""

    @pytest.mark.unit
    def test_encode(self, writer, named_segment, unnamed_segment):
        segments = ColorSegmentList(segments=[named_segment, unnamed_segment])
        encode_color_segment_list(writer, segments)
        assert writer.getvalue() == list_bytes(2, NAMED_BYTES, UNNAMED_BYTES)
        assert segment_list_size(segments) == len(writer.getvalue())

    @pytest.mark.unit
    def test_encode_empty_logs_warning(self, writer, caplog):
        encode_color_segment_list(writer, ColorSegmentList())
        assert writer.getvalue() == list_bytes(0)
        assert "no segments" in caplog.text

    @pytest.mark.unit
    def test_decode(self, named_segment, unnamed_segment):
        reader = ClsReader(list_bytes(2, NAMED_BYTES, UNNAMED_BYTES))
        segments = decode_color_segment_list(reader)
        assert list(segments) == [named_segment, unnamed_segment]
        assert reader.remaining == 0

    @pytest.mark.unit
    def test_decode_empty(self):
        with pytest.raises(EmptySegmentListError):
            decode_color_segment_list(ClsReader(list_bytes(0)))

    @pytest.mark.unit
    def test_decode_only_partial_segment(self):
        with pytest.raises(EmptySegmentListError):
            decode_color_segment_list(ClsReader(list_bytes(1, UNNAMED_BYTES[:6])))

    @pytest.mark.unit
    @pytest.mark.parametrize("declared", [0, 1, 3])
    def test_decode_count_mismatch(self, declared):
        with pytest.raises(SegmentCountMismatchError) as exc_info:
            decode_color_segment_list(ClsReader(list_bytes(declared, NAMED_BYTES, UNNAMED_BYTES)))
        assert exc_info.value.declared == declared
        assert exc_info.value.decoded == 2

    @pytest.mark.unit
    def test_decode_truncated_tail_is_left_unread(self, named_segment):
        """Test that a cut-off final segment ends the list without consuming it."""
        tail = NAMED_BYTES[:10]
        reader = ClsReader(list_bytes(1, NAMED_BYTES, tail))
        segments = decode_color_segment_list(reader)
        assert list(segments) == [named_segment]
        assert reader.rest() == tail

    @pytest.mark.unit
    def test_decode_invalid_name_propagates(self):
        bad = b"\x0b\x00\x00\x00" + bytes([1, 2, 3, 255]) + b"\x01\x00\x00\x00" + b"\x01\x00a"
        with pytest.raises(InvalidUtf16Error):
            decode_color_segment_list(ClsReader(list_bytes(1, bad)))
