"""Little-endian byte builder."""

import struct

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ClsWriter:
    """Accumulates encoded records into one buffer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def write_u16(self, value: int) -> None:
        self._buf += _U16.pack(value)

    def write_u32(self, value: int) -> None:
        self._buf += _U32.pack(value)

    def write_bytes(self, data: bytes) -> None:
        self._buf += data

    def getvalue(self) -> bytes:
        return bytes(self._buf)
