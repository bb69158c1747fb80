"""Text Conversion & Encoding Suite: binary, Base64, Morse, ASCII, hex and emoji codecs."""
from .config import ConversionOptions, load_options
from .core import (
    ascii_decode,
    ascii_encode,
    base64_decode,
    base64_encode,
    binary_decode,
    binary_encode,
    emoji_decode,
    emoji_encode,
    hex_decode,
    hex_encode,
    morse_decode,
    morse_encode,
)
from .errors import (
    ConversionError,
    InvalidBase64,
    InvalidCharacter,
    InvalidFormat,
    InvalidGroupLength,
    OddLength,
    UnknownCode,
    UnknownMode,
    ValueOutOfRange,
)
from .modes import CodecMode, convert, swap

__version__ = "0.1.0"
