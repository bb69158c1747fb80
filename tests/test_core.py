# codec-level tests
import pytest

from textconv import core
from textconv.errors import (
    InvalidBase64,
    InvalidCharacter,
    InvalidFormat,
    InvalidGroupLength,
    OddLength,
    UnknownCode,
    ValueOutOfRange,
)
from textconv.tables import EMOJI_PRESETS, MORSE, REV_MORSE

PRINTABLE = ''.join(chr(i) for i in range(32, 127))


# ---------- Binary ----------
def test_binary_encode_hi() -> None:
    assert core.binary_encode("Hi", 8) == "01001000 01101001"


def test_binary_encode_seven_bit() -> None:
    assert core.binary_encode("Hi", 7) == "1001000 1101001"


def test_binary_encode_overflow_keeps_all_digits() -> None:
    assert core.binary_encode("\xe9", 7) == "11101001"
    assert core.binary_encode("€", 8) == "10000010101100"


def test_binary_encode_rejects_other_widths() -> None:
    with pytest.raises(ValueError):
        core.binary_encode("A", 6)


def test_binary_decode_boundaries() -> None:
    assert core.binary_decode("1111111") == chr(127)
    assert core.binary_decode("10000000") == chr(128)
    with pytest.raises(ValueOutOfRange) as exc:
        core.binary_decode("10000000", bit_width=7)
    assert exc.value.token == "10000000"


def test_binary_decode_collapses_whitespace() -> None:
    assert core.binary_decode("  01001000 \n\t 01101001 ") == "Hi"


def test_binary_decode_mixed_group_widths() -> None:
    assert core.binary_decode("1001000 01101001") == "Hi"


@pytest.mark.parametrize("bad", ["0102", "01001000,01101001", "01 2"])
def test_binary_decode_invalid_character(bad) -> None:
    with pytest.raises(InvalidCharacter):
        core.binary_decode(bad)


def test_binary_decode_group_length() -> None:
    with pytest.raises(InvalidGroupLength) as exc:
        core.binary_decode("01001000 101")
    assert exc.value.token == "101"
    assert "101" in str(exc.value)


def test_binary_round_trip() -> None:
    assert core.binary_decode(core.binary_encode(PRINTABLE, 8)) == PRINTABLE


# ---------- Base64 ----------
def test_base64_examples() -> None:
    assert core.base64_encode("Hello") == "SGVsbG8="
    assert core.base64_decode("SGVsbG8=") == "Hello"
    assert core.base64_encode("") == ""


def test_base64_padding_optional() -> None:
    assert core.base64_decode("SGVsbG8") == "Hello"
    assert core.base64_decode("QQ") == "A"


@pytest.mark.parametrize("text", ["h\xe9llo w\xf6rld", "✓ 中文", "\U0001f600 ok", PRINTABLE])
def test_base64_round_trip_multibyte(text) -> None:
    assert core.base64_decode(core.base64_encode(text)) == text


@pytest.mark.parametrize("bad", ["SGV sbG8=", "SGVsbG8===", "SGVs=bG8", "SGVsbG8-"])
def test_base64_invalid_format(bad) -> None:
    with pytest.raises(InvalidFormat):
        core.base64_decode(bad)


@pytest.mark.parametrize("bad", ["SGVsb", "SGVsbG8h=", "=", "/w=="])
def test_base64_invalid_content(bad) -> None:
    with pytest.raises(InvalidBase64):
        core.base64_decode(bad)


# ---------- Morse ----------
def test_morse_table_is_bijective() -> None:
    assert len(REV_MORSE) == len(MORSE)
    assert all(MORSE[REV_MORSE[code]] == code for code in REV_MORSE)


def test_morse_encode_sos() -> None:
    assert core.morse_encode("SOS") == "... --- ..."
    assert core.morse_encode("sos help") == "... --- ... / .... . .-.. .--."


def test_morse_encode_passes_unmapped_through() -> None:
    assert core.morse_encode("a#b") == ".- # -..."
    assert core.morse_encode(" a\n") == "/ .-"


def test_morse_decode() -> None:
    assert core.morse_decode("... --- ...") == "SOS"
    assert core.morse_decode("...   ---  /  ...") == "SO S"


def test_morse_decode_unknown_code() -> None:
    with pytest.raises(UnknownCode) as exc:
        core.morse_decode(".......")
    assert exc.value.token == "......."


def test_morse_decode_invalid_character() -> None:
    with pytest.raises(InvalidCharacter):
        core.morse_decode("... abc")


@pytest.mark.parametrize("text", ["Hello, World! 123", "a  b", "(x+y)=z @ $5 / \"q\""])
def test_morse_round_trip(text) -> None:
    assert core.morse_decode(core.morse_encode(text)) == text.upper()


# ---------- ASCII ----------
def test_ascii_encode() -> None:
    assert core.ascii_encode("Hi") == "72 105"
    assert core.ascii_encode("€") == "8364"


def test_ascii_decode() -> None:
    assert core.ascii_decode(" 72\t105\n") == "Hi"
    assert core.ascii_decode("0 127") == "\x00\x7f"


@pytest.mark.parametrize("bad", ["128", "abc", "-1", "72 1e2", "12abc"])
def test_ascii_decode_out_of_range(bad) -> None:
    with pytest.raises(ValueOutOfRange) as exc:
        core.ascii_decode(bad)
    assert exc.value.token in bad


def test_ascii_round_trip() -> None:
    assert core.ascii_decode(core.ascii_encode(PRINTABLE)) == PRINTABLE


# ---------- Hex ----------
def test_hex_encode_cases() -> None:
    assert core.hex_encode("AB", "lower") == "41 42"
    assert core.hex_encode("AB", "upper") == "41 42"
    assert core.hex_encode("a", "upper") == "61"
    assert core.hex_encode("\xab", "lower") == "ab"
    assert core.hex_encode("\xab", "upper") == "AB"


def test_hex_encode_minimal_width() -> None:
    assert core.hex_encode("\n€") == "a 20ac"


def test_hex_decode() -> None:
    assert core.hex_decode("48 69") == "Hi"
    assert core.hex_decode("4869") == "Hi"
    assert core.hex_decode("4 8\n6 9") == "Hi"
    assert core.hex_decode("ff") == "\xff"


def test_hex_decode_odd_length() -> None:
    with pytest.raises(OddLength):
        core.hex_decode("41 4")


def test_hex_decode_invalid_character() -> None:
    with pytest.raises(InvalidCharacter):
        core.hex_decode("4G")


def test_hex_round_trip() -> None:
    for case in ("lower", "upper"):
        assert core.hex_decode(core.hex_encode(PRINTABLE, case)) == PRINTABLE


# ---------- Emoji ----------
LETTERS = EMOJI_PRESETS['letters']
WORDS = EMOJI_PRESETS['words']
CUSTOM = EMOJI_PRESETS['custom']


def test_emoji_letters_encode() -> None:
    assert core.emoji_encode("abc", "letters") == LETTERS['A'] + LETTERS['B'] + LETTERS['C']
    assert core.emoji_encode("Hi!", "letters") == LETTERS['H'] + LETTERS['I'] + "!"
    assert core.emoji_encode("a 1", "letters") == LETTERS['A'] + " 1"


def test_emoji_words_encode_whole_words_only() -> None:
    assert core.emoji_encode("I LOVE Pizza", "words") == f"I {WORDS['love']} {WORDS['pizza']}"
    assert core.emoji_encode("lovely catalog", "words") == "lovely catalog"
    assert core.emoji_encode("cat,dog.", "words") == f"{WORDS['cat']},{WORDS['dog']}."


def test_emoji_custom_encode() -> None:
    assert core.emoji_encode("Hello, good day", "custom") == f"{CUSTOM['hello']}, {CUSTOM['good']} day"
    assert core.emoji_encode("goodbye", "custom") == CUSTOM['goodbye']


def test_emoji_decode_last_declared_key_wins() -> None:
    assert core.emoji_decode(CUSTOM['hello'], "custom") == "goodbye"
    assert core.emoji_decode(CUSTOM['good'], "custom") == "thumb"
    assert core.emoji_decode(WORDS['food'], "words") == "pizza"


def test_emoji_letters_round_trip() -> None:
    encoded = core.emoji_encode("Hello World", "letters")
    assert core.emoji_decode(encoded, "letters") == "HELLO WORLD"


def test_emoji_decode_leaves_other_text() -> None:
    assert core.emoji_decode(f"I {WORDS['love']} you", "words") == "I love you"


def test_emoji_unknown_preset() -> None:
    with pytest.raises(ValueError):
        core.emoji_encode("hi", "flags")
    with pytest.raises(ValueError):
        core.emoji_decode("hi", "flags")


@pytest.mark.parametrize("decode", [
    core.binary_decode,
    core.base64_decode,
    core.morse_decode,
    core.ascii_decode,
    core.hex_decode,
])
@pytest.mark.parametrize("blank", ["", "   ", " \n\t "])
def test_decoders_map_blank_input_to_empty(decode, blank) -> None:
    assert decode(blank) == ""
