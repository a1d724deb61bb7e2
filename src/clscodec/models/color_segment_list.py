"""ColorSegmentList model: the ordered entries of a color set."""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator

from clscodec.exceptions import IndexOutOfRangeError

from .color_segment import ColorSegment


class ColorSegmentList(BaseModel):
    """Ordered sequence of color segments.

    List order is the on-disk order and the display order. Indexing is
    bounds checked and negative indices are rejected rather than wrapped.
    Segments are copied on the way in, so the list never shares one with
    another list or with the caller.
    """

    model_config = ConfigDict(revalidate_instances="always")

    segments: list[ColorSegment] = Field(default_factory=list, description="Entries in file order")

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"segments": data}
        return data

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> Any:
        return handler(self)["segments"]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[ColorSegment]:  # type: ignore[override]
        return iter(self.segments)

    def __getitem__(self, index: int) -> ColorSegment:
        return self.get(index)

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < len(self.segments):
            raise IndexOutOfRangeError(index, len(self.segments), operation)

    def get(self, index: int) -> ColorSegment:
        """Return the segment at index.

        Raises:
            IndexOutOfRangeError: If index is negative or past the end
        """
        self._check_index(index, "access")
        return self.segments[index]

    def push(self, segment: ColorSegment) -> None:
        """Append a copy of segment to the end of the list."""
        self.segments.append(segment.model_copy(deep=True))

    def insert(self, index: int, segment: ColorSegment) -> None:
        """Insert a copy of segment before index. index == len appends."""
        if not 0 <= index <= len(self.segments):
            raise IndexOutOfRangeError(index, len(self.segments), "insert at")
        self.segments.insert(index, segment.model_copy(deep=True))

    def remove(self, index: int) -> ColorSegment:
        """Remove and return the segment at index.

        Raises:
            IndexOutOfRangeError: If index >= len (or negative)
        """
        self._check_index(index, "remove")
        return self.segments.pop(index)
