"""
Lossy Shift-JIS encoder for colorset names.

Why Two Copies of the Name?
===========================

A .cls file stores the colorset name twice: once in UTF-8 and once in
Shift-JIS for older readers. Only the UTF-8 copy is read back; the
Shift-JIS copy must still be written byte for byte the way the format
expects.

Unmappable Characters
---------------------

Characters with no Shift-JIS form are not replaced by '?'. Each one
becomes spaces, and the number of spaces depends on the character's UTF-8
width::

    "aßb"        ß is 2 bytes in UTF-8  ->  61 20 62
    "a\U0001f5ffb"    🗿 is 4 bytes in UTF-8  ->  61 20 20 62

Mapping Table
-------------

The output follows the WHATWG Shift_JIS encoder. Its double-byte table is
the Windows-31J table, which Python ships as the ``cp932`` codec, so the
table is built by decoding every cp932 double-byte code, lowest code first
(the first code wins when several decode to the same character). It then
differs from a plain ``str.encode("cp932")`` as follows:

- lead bytes 0xED and 0xEE (NEC-selected IBM extensions) are never
  produced; those characters use their 0xFA-0xFC codes
- user-defined rows decode into the Private Use Area and are left out
- 0x8160 and 0x8161 encode U+301C WAVE DASH and U+2016 DOUBLE VERTICAL
  LINE; U+FF5E and U+2225 have no code
- U+00A2, U+00A3 and U+00AC have no code
- single bytes are ASCII, U+0080, U+00A5 -> 0x5C, U+203E -> 0x7E and
  half-width katakana U+FF61-U+FF9F -> 0xA1-0xDF
- U+2212 MINUS SIGN encodes as 0x817C
"""

from functools import lru_cache

from clscodec.models.text import utf8_char_len

SHIFT_JIS_CODEC = "cp932"
SUBSTITUTE = b"\x20"

_SINGLE_BYTE: dict[str, bytes] = {
    "\u0080": b"\x80",
    "¥": b"\x5c",
    "‾": b"\x7e",
}
_EXTRA: dict[str, bytes] = {
    "−": b"\x81\x7c",
}
# cp932 decodes these to U+FF5E / U+2225
_REASSIGNED: dict[bytes, str] = {
    b"\x81\x60": "〜",
    b"\x81\x61": "‖",
}
_SKIPPED_LEADS = (0xED, 0xEE)
_KATAKANA_FIRST = 0xFF61
_KATAKANA_LAST = 0xFF9F


def _is_private_use(ch: str) -> bool:
    return 0xE000 <= ord(ch) <= 0xF8FF


@lru_cache(maxsize=None)
def _double_byte_table() -> dict[str, bytes]:
    """Map each character to its lowest double-byte code."""
    table: dict[str, bytes] = {}
    leads = [*range(0x81, 0xA0), *range(0xE0, 0xFD)]
    trails = [*range(0x40, 0x7F), *range(0x80, 0xFD)]

    for lead in leads:
        if lead in _SKIPPED_LEADS:
            continue
        for trail in trails:
            code = bytes((lead, trail))
            if code in _REASSIGNED:
                ch = _REASSIGNED[code]
            else:
                try:
                    ch = code.decode(SHIFT_JIS_CODEC)
                except UnicodeDecodeError:
                    continue
            if len(ch) != 1 or _is_private_use(ch):
                continue
            table.setdefault(ch, code)

    table.update(_EXTRA)
    return table


def encode_char(ch: str) -> bytes | None:
    """Shift-JIS bytes for one character, or None if it has no mapping."""
    cp = ord(ch)
    if cp < 0x80:
        return bytes((cp,))
    if ch in _SINGLE_BYTE:
        return _SINGLE_BYTE[ch]
    if _KATAKANA_FIRST <= cp <= _KATAKANA_LAST:
        return bytes((cp - _KATAKANA_FIRST + 0xA1,))
    return _double_byte_table().get(ch)


def substitute_for(ch: str) -> bytes:
    """Spaces written in place of an unmappable character."""
    return SUBSTITUTE * (2 if utf8_char_len(ch) == 4 else 1)


def encode_shift_jis(text: str) -> bytes:
    """Encode text character by character, substituting spaces as needed.

    Example:
        >>> encode_shift_jis("a\\U0001f5ffb")
        b'a  b'
    """
    out = bytearray()
    for ch in text:
        encoded = encode_char(ch)
        out += encoded if encoded is not None else substitute_for(ch)
    return bytes(out)
