from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .core import BIT_WIDTHS, HEX_CASES
from .tables import EMOJI_PRESETS

LARGE_INPUT_CHARS = 10_000
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class ConversionOptions:
    binary_bit_width: int = 8
    hex_case: str = 'lower'
    emoji_preset: str = 'letters'

    def __post_init__(self):
        if self.binary_bit_width not in BIT_WIDTHS:
            raise ValueError(f"binary_bit_width must be 7 or 8, got {self.binary_bit_width!r}")
        if self.hex_case not in HEX_CASES:
            raise ValueError(f"hex_case must be 'lower' or 'upper', got {self.hex_case!r}")
        if self.emoji_preset not in EMOJI_PRESETS:
            raise ValueError(f"emoji_preset must be one of {', '.join(EMOJI_PRESETS)}, got {self.emoji_preset!r}")


def load_env(env_path: Optional[str] = None) -> None:
    # without an explicit path, look for .env from the working directory up
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv(find_dotenv(usecwd=True))


def load_options(env_path: Optional[str] = None) -> ConversionOptions:
    """Default options, overridable through TEXTCONV_* variables or a .env file."""
    load_env(env_path)
    bits = os.getenv("TEXTCONV_BINARY_BITS", "8").strip()
    try:
        bit_width = int(bits)
    except ValueError:
        raise ValueError(f"TEXTCONV_BINARY_BITS must be 7 or 8, got {bits!r}") from None
    return ConversionOptions(
        binary_bit_width=bit_width,
        hex_case=os.getenv("TEXTCONV_HEX_CASE", "lower").strip().lower(),
        emoji_preset=os.getenv("TEXTCONV_EMOJI_PRESET", "letters").strip().lower(),
    )


def setup_logging(verbose: bool = False) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        name = os.getenv("TEXTCONV_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, name, None)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
