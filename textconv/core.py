"""Encode/decode routines, one pair per representation.

All functions are pure: they take a string (plus the option they need) and
return a string, or raise a ``ConversionError`` before producing any output.
The validating decoders (binary, base64, morse, ascii, hex) map empty or
whitespace-only input to an empty string.
"""
import base64
import binascii
import re

from .errors import (
    InvalidBase64,
    InvalidCharacter,
    InvalidFormat,
    InvalidGroupLength,
    OddLength,
    UnknownCode,
    ValueOutOfRange,
)
from .tables import (
    B64_ALPHABET,
    EMOJI_PRESETS,
    MORSE,
    MORSE_WORD_SEPARATOR,
    REV_EMOJI_PRESETS,
    REV_MORSE,
)

BIT_WIDTHS = (7, 8)
HEX_CASES = ('lower', 'upper')

_WHITESPACE = re.compile(r'\s+')
_B64_FORMAT = re.compile('[' + re.escape(B64_ALPHABET) + ']*={0,2}')


# ---------- Helpers ----------
def chunk(iterable, size):
    for i in range(0, len(iterable), size):
        yield iterable[i:i+size]

def collapse_whitespace(s: str) -> str:
    return _WHITESPACE.sub(' ', s).strip()


# ---------- Binary ----------
def binary_encode(text: str, bit_width: int = 8) -> str:
    # code points wider than bit_width keep all their digits
    if bit_width not in BIT_WIDTHS:
        raise ValueError(f"bit width must be 7 or 8, got {bit_width!r}")
    return ' '.join(f"{ord(ch):0{bit_width}b}" for ch in text)

def binary_decode(binary: str, bit_width: int = None) -> str:
    if not binary.strip():
        return ''
    clean = collapse_whitespace(binary)
    if not re.fullmatch(r'[01 ]+', clean):
        raise InvalidCharacter("Invalid binary string. Only 0s, 1s, and spaces are allowed.")

    chars = []
    for group in clean.split(' '):
        if len(group) not in BIT_WIDTHS:
            raise InvalidGroupLength(
                f"Invalid binary group length: {group}. Expected 7 or 8 bits.", token=group)
        value = int(group, 2)
        if value > 127 and (len(group) == 7 or bit_width == 7):
            raise ValueOutOfRange(
                f"Invalid 7-bit binary: {group}. Value {value} exceeds 127.", token=group)
        chars.append(chr(value))
    return ''.join(chars)


# ---------- Base64 ----------
def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode('utf-8')).decode('ascii')

def base64_decode(data: str) -> str:
    if not data.strip():
        return ''
    if not _B64_FORMAT.fullmatch(data):
        raise InvalidFormat("Invalid Base64 format")

    body = data.rstrip('=')
    # padding is optional, but when present the whole string must be padded
    if len(body) % 4 == 1 or (len(body) != len(data) and len(data) % 4):
        raise InvalidBase64("Invalid Base64 string", token=data)
    try:
        raw = base64.b64decode(body + '=' * (-len(body) % 4), validate=True)
        return raw.decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidBase64("Invalid Base64 string", token=data) from e


# ---------- Morse ----------
def morse_encode(text: str) -> str:
    tokens = (MORSE_WORD_SEPARATOR if ch == ' ' else MORSE.get(ch, ch) for ch in text.upper())
    return collapse_whitespace(' '.join(tokens))

def morse_decode(code: str) -> str:
    if not code.strip():
        return ''
    if not re.fullmatch(r'[.\-\s/]+', code):
        raise InvalidCharacter(
            "Invalid Morse code. Use only dots (.), dashes (-), spaces, and forward slashes (/).")

    words = []
    for word in code.split(MORSE_WORD_SEPARATOR):
        chars = []
        for tok in word.split():
            if tok not in REV_MORSE:
                raise UnknownCode(f"Unknown Morse code: {tok}", token=tok)
            chars.append(REV_MORSE[tok])
        words.append(''.join(chars))
    return ' '.join(words)


# ---------- ASCII ----------
def ascii_encode(text: str) -> str:
    return ' '.join(str(ord(ch)) for ch in text)

def ascii_decode(data: str) -> str:
    chars = []
    for tok in data.split():
        if not re.fullmatch(r'[+-]?[0-9]+', tok) or not 0 <= int(tok) <= 127:
            raise ValueOutOfRange(
                f"Invalid ASCII code: {tok}. Must be between 0 and 127.", token=tok)
        chars.append(chr(int(tok)))
    return ''.join(chars)


# ---------- Hex ----------
def hex_encode(text: str, case: str = 'lower') -> str:
    if case not in HEX_CASES:
        raise ValueError(f"hex case must be 'lower' or 'upper', got {case!r}")
    fmt = 'X' if case == 'upper' else 'x'
    return ' '.join(format(ord(ch), fmt) for ch in text)

def hex_decode(data: str) -> str:
    # pairs are single bytes, so code points above 0xFF do not survive
    clean = _WHITESPACE.sub('', data)
    if not re.fullmatch(r'[0-9A-Fa-f]*', clean):
        raise InvalidCharacter("Invalid hexadecimal string. Use only 0-9, A-F, a-f.")
    if len(clean) % 2:
        raise OddLength(
            "Invalid hex length. Hex string must have even number of characters.", token=clean)
    return ''.join(chr(int(pair, 16)) for pair in chunk(clean, 2))


# ---------- Emoji ----------
def _word_pattern(keys):
    # alternation order is declaration order: the first key that matches wins
    alts = '|'.join(re.escape(k) for k in keys)
    return re.compile(rf'\b(?:{alts})\b', re.IGNORECASE | re.ASCII)

def _glyph_pattern(glyphs):
    # longest first so a glyph is never cut short by one of its prefixes
    alts = '|'.join(re.escape(g) for g in sorted(glyphs, key=len, reverse=True))
    return re.compile(alts)

_EMOJI_WORDS = {
    preset: (_word_pattern(mapping), {k.lower(): v for k, v in mapping.items()})
    for preset, mapping in EMOJI_PRESETS.items()
}
_EMOJI_GLYPHS = {preset: _glyph_pattern(rev) for preset, rev in REV_EMOJI_PRESETS.items()}

def _check_preset(preset: str):
    if preset not in EMOJI_PRESETS:
        raise ValueError(f"unknown emoji preset {preset!r}; expected one of {', '.join(EMOJI_PRESETS)}")

def emoji_encode(text: str, preset: str = 'letters') -> str:
    _check_preset(preset)
    pattern, words = _EMOJI_WORDS[preset]
    letters = EMOJI_PRESETS['letters'] if preset == 'letters' else {}

    def leftover(s):
        if not letters:
            return s
        return ''.join(letters.get(ch.upper(), ch) for ch in s)

    out = []
    pos = 0
    for m in pattern.finditer(text):
        out.append(leftover(text[pos:m.start()]))
        out.append(words[m.group(0).lower()])
        pos = m.end()
    out.append(leftover(text[pos:]))
    return ''.join(out)

def emoji_decode(text: str, preset: str = 'letters') -> str:
    _check_preset(preset)
    reverse = REV_EMOJI_PRESETS[preset]
    return _EMOJI_GLYPHS[preset].sub(lambda m: reverse[m.group(0)], text)
