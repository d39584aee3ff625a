import pytest

from secolor.codec.hex_codec import (
    extract_channel, assemble_hex, is_valid_hex, parse_hex_byte,
    make_color, color_from_hex, byte_to_hex, color_to_hex,
)
from secolor.types.channel_types import Channel
from secolor.types.color_types import Rgb
from tests.samples import samples_hex_argb


def test_extract_channel():
    assert extract_channel("#FF112233", Channel.ALPHA) == "FF"
    assert extract_channel("#FF112233", Channel.RED) == "11"
    assert extract_channel("#FF112233", Channel.GREEN) == "22"
    assert extract_channel("#FF112233", Channel.BLUE) == "33"


def test_extract_channel_tags_are_case_insensitive():
    for tag, expected in (("a", "FF"), ("R", "11"), ("g", "22"), ("B", "33")):
        assert extract_channel("#FF112233", tag) == expected


def test_extract_channel_fallback():
    for bad in ("bad", "", "         ", "#FF11223", "#FF1122334", None):
        assert extract_channel(bad, Channel.ALPHA) == "00"


def test_extract_channel_does_not_check_digits():
    assert extract_channel("xZZ112233", "a") == "ZZ"


def test_extract_channel_unknown_tag():
    with pytest.raises(ValueError):
        extract_channel("#FF112233", "x")


def test_assemble_hex():
    assert assemble_hex("FF", "11", "22", "33") == "#FF112233"
    # fragments pass through unchecked
    assert assemble_hex("F", "zz", "", "123") == "#Fzz123"


def test_is_valid_hex():
    assert is_valid_hex("")
    assert is_valid_hex("0123456789abcdefABCDEF")
    assert not is_valid_hex("zz")
    assert not is_valid_hex("0x1F")
    assert not is_valid_hex(" 1")


def test_parse_hex_byte():
    assert parse_hex_byte("FF") == 255
    assert parse_hex_byte("ff") == 255
    assert parse_hex_byte("0a") == 10
    assert parse_hex_byte("zz") == 0
    assert parse_hex_byte("") == 0
    assert parse_hex_byte("-1") == 0


def test_make_color():
    assert make_color(255, 1, 2, 3) == Rgb(1, 2, 3, 255)
    assert make_color(0, 0, 0, 0) == Rgb(0, 0, 0, 0)
    # any out-of-range channel discards the whole color
    assert make_color(255, 256, 2, 3) == Rgb(0, 0, 0, 0)
    assert make_color(-1, 1, 2, 3) == Rgb(0, 0, 0, 0)


def test_color_from_hex():
    for text, (a, r, g, b) in samples_hex_argb.items():
        assert color_from_hex(text) == Rgb(r, g, b, a)


def test_color_from_hex_is_lenient():
    assert color_from_hex("") == Rgb(0, 0, 0, 0)
    assert color_from_hex("red") == Rgb(0, 0, 0, 0)
    # a bad pair only zeroes its own channel
    assert color_from_hex("#FFzz2233") == Rgb(0, 0x22, 0x33, 255)


def test_byte_to_hex():
    assert byte_to_hex(0) == "00"
    assert byte_to_hex(10) == "0A"
    assert byte_to_hex(255) == "FF"
    assert byte_to_hex(127.9) == "7F"
    assert byte_to_hex(-0.9) == "00"


def test_byte_to_hex_clamps():
    assert byte_to_hex(256) == "FF"
    assert byte_to_hex(4096) == "FF"
    assert byte_to_hex(-5) == "00"


def test_color_to_hex():
    assert color_to_hex(Rgb(0x11, 0x22, 0x33)) == "#FF112233"
    for text in samples_hex_argb:
        assert color_to_hex(color_from_hex(text)) == text.upper()


def test_byte_to_hex_non_finite():
    assert byte_to_hex(float("nan")) == "00"
    assert byte_to_hex(float("inf")) == "FF"
    assert byte_to_hex(float("-inf")) == "00"
