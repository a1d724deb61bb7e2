"""Tests for the lossy Shift-JIS encoder."""

import pytest

from clscodec.codec import encode_shift_jis
from clscodec.codec.shift_jis import encode_char, substitute_for


class TestShiftJis:
    """Test character mapping and substitution."""

    @pytest.mark.unit
    def test_ascii_passthrough(self):
        assert encode_shift_jis("NewColorset") == b"NewColorset"

    @pytest.mark.unit
    def test_empty(self):
        assert encode_shift_jis("") == b""

    @pytest.mark.unit
    def test_double_byte(self):
        assert encode_shift_jis("あ") == b"\x82\xa0"
        assert encode_shift_jis("色") == "色".encode("cp932")

    @pytest.mark.unit
    def test_half_width_katakana(self):
        assert encode_shift_jis("ｱ") == b"\xb1"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("aßb", b"a b"),
            ("a가b", b"a b"),
            ("a\U0001f5ffb", b"a  b"),
            ("\U0001f5ff\U0001f5ff", b"    "),
        ],
    )
    def test_unmappable_become_spaces(self, text, expected):
        assert encode_shift_jis(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "ch,expected",
        [
            ("\u0080", b"\x80"),
            ("¥", b"\x5c"),
            ("‾", b"\x7e"),
            ("−", b"\x81\x7c"),
            ("〜", b"\x81\x60"),
            ("‖", b"\x81\x61"),
        ],
    )
    def test_table_overrides(self, ch, expected):
        assert encode_char(ch) == expected

    @pytest.mark.unit
    def test_private_use_area_unmappable(self):
        assert encode_char("\ue000") is None
        assert encode_shift_jis("\ue000") == b" "

    @pytest.mark.unit
    def test_substitute_width(self):
        assert substitute_for("ß") == b" "
        assert substitute_for("가") == b" "
        assert substitute_for("\U0001f5ff") == b"  "


class TestShiftJisTable:
    """Test where the encode table departs from str.encode("cp932")."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "ch,expected",
        [
            ("ⅰ", b"\xfa\x40"),
            ("丨", b"\xfa\x68"),
            ("Ⅰ", b"\x87\x54"),
            ("≒", b"\x81\xe0"),
        ],
    )
    def test_lowest_code_wins(self, ch, expected):
        assert encode_char(ch) == expected

    @pytest.mark.unit
    def test_ibm_extension_leads_never_written(self):
        for ch in "ⅰⅱⅹ丨仡仼":
            assert encode_char(ch)[0] not in (0xED, 0xEE)

    @pytest.mark.unit
    @pytest.mark.parametrize("ch", ["¢", "£", "¬"])
    def test_latin_signs_unmappable(self, ch):
        assert encode_char(ch) is None
        assert encode_shift_jis(f"a{ch}b") == b"a b"

    @pytest.mark.unit
    def test_fullwidth_forms_still_mapped(self):
        assert encode_char("￠") == b"\x81\x91"
        assert encode_char("￢") == b"\x81\xca"

    @pytest.mark.unit
    def test_shared_codes_belong_to_one_character(self):
        assert encode_char("〜") == b"\x81\x60"
        assert encode_char("～") is None
        assert encode_char("‖") == b"\x81\x61"
        assert encode_char("∥") is None
        assert encode_shift_jis("〜～") == b"\x81\x60 "

    @pytest.mark.unit
    def test_half_width_katakana_range(self):
        assert encode_char("｡") == b"\xa1"
        assert encode_char("ﾟ") == b"\xdf"
