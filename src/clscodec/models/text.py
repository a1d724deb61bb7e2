"""Length metrics shared by the name models.

All helpers work on code points and never encode, so they are safe to run
on any str before it has been validated.
"""


def utf8_char_len(ch: str) -> int:
    """Number of bytes one character takes in UTF-8."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def utf8_byte_len(text: str) -> int:
    return sum(utf8_char_len(ch) for ch in text)


def utf16_byte_len(text: str) -> int:
    """Bytes needed for text in UTF-16; astral characters take a surrogate pair."""
    return sum(4 if ord(ch) > 0xFFFF else 2 for ch in text)


def weighted_char_count(text: str) -> int:
    """Character count where each 4-byte UTF-8 character counts as two."""
    return sum(2 if utf8_char_len(ch) == 4 else 1 for ch in text)


def check_encodable(text: str) -> str:
    """Reject lone surrogates, which have no UTF-8 or UTF-16 encoding."""
    for ch in text:
        if 0xD800 <= ord(ch) <= 0xDFFF:
            raise ValueError(f"lone surrogate U+{ord(ch):04X} cannot be encoded")
    return text
