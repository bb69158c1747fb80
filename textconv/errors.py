"""Errors raised by the codecs and by mode dispatch.

Every failure is a ``ConversionError`` (itself a ``ValueError``), so callers
can catch one type and show ``str(err)`` to the user.
"""
from typing import Optional


class ConversionError(ValueError):
    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token


class InvalidCharacter(ConversionError):
    pass


class InvalidGroupLength(ConversionError):
    pass


class ValueOutOfRange(ConversionError):
    pass


class OddLength(ConversionError):
    pass


class InvalidFormat(ConversionError):
    pass


class InvalidBase64(ConversionError):
    pass


class UnknownCode(ConversionError):
    pass


class UnknownMode(ConversionError):
    pass
