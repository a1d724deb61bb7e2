"""Bounded little-endian reader over an immutable byte string."""

import struct

from clscodec.exceptions import TruncatedInputError

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ClsReader:
    """Forward-only cursor over .cls bytes.

    Every read checks the remaining length first and raises
    TruncatedInputError naming the field that could not be satisfied.
    The underlying bytes are never modified.
    """

    def __init__(self, data: bytes, offset: int = 0):
        self._data = bytes(data)
        self.offset = offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self.offset

    def _require(self, size: int, field: str) -> None:
        if size > self.remaining:
            raise TruncatedInputError(field, size, max(self.remaining, 0), self.offset)

    def read_u16(self, field: str) -> int:
        self._require(_U16.size, field)
        (value,) = _U16.unpack_from(self._data, self.offset)
        self.offset += _U16.size
        return value

    def read_u32(self, field: str) -> int:
        self._require(_U32.size, field)
        (value,) = _U32.unpack_from(self._data, self.offset)
        self.offset += _U32.size
        return value

    def read_bytes(self, size: int, field: str) -> bytes:
        self._require(size, field)
        value = self._data[self.offset : self.offset + size]
        self.offset += size
        return value

    def skip(self, size: int, field: str) -> None:
        self._require(size, field)
        self.offset += size

    def seek(self, offset: int) -> None:
        """Move back to an offset obtained earlier from this reader."""
        if not 0 <= offset <= len(self._data):
            raise ValueError(f"offset {offset} outside 0..{len(self._data)}")
        self.offset = offset

    def rest(self) -> bytes:
        """Bytes not yet consumed."""
        return self._data[self.offset :]
