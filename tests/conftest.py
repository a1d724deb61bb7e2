"""Pytest fixtures for tests."""

import pytest

from clscodec.codec import ClsWriter
from clscodec.models import Color, ColorName, ColorSegment, Colorset, ColorsetName, ColorSegmentList


@pytest.fixture
def writer():
    """Create an empty writer."""
    return ClsWriter()


@pytest.fixture
def named_segment():
    """Opaque segment with an ASCII name."""
    return ColorSegment.new(Color.new(81, 82, 83), ColorName.with_str("TESTCOLOR"))


@pytest.fixture
def unnamed_segment():
    """Opaque segment without a name."""
    return ColorSegment.new(Color.new(1, 128, 255))


@pytest.fixture
def transparent_segment():
    """Transparent segment as it comes out of a decoder."""
    return ColorSegment.new(Color.transparent_black(), ColorName.with_str("clear"))


@pytest.fixture
def sample_colorset(named_segment, unnamed_segment, transparent_segment):
    """Color set with a mixed-script title and three entries."""
    return Colorset(
        name=ColorsetName.with_str("㐀test\U0001f5ffsetД"),
        segments=ColorSegmentList(segments=[named_segment, unnamed_segment, transparent_segment]),
    )


@pytest.fixture
def new_colorset_bytes():
    """Encoded form of Colorset.new() with the default config."""
    name = b"NewColorset"
    return (
        b"\x53\x4c\x43\x43\x00\x01"
        # colorset name block: 8 + 11 + 11
        + b"\x1e\x00\x00\x00"
        + b"\x0b\x00" + name
        + b"\x00\x00\x00\x00"
        + b"\x0b\x00" + name
        # reserved
        + b"\x04\x00\x00\x00"
        # segment list: 1 segment, 12 bytes
        + b"\x01\x00\x00\x00"
        + b"\x0c\x00\x00\x00"
        + b"\x08\x00\x00\x00"
        + b"\x00\x00\x00\x00"
        + b"\x00\x00\x00\x00"
    )
