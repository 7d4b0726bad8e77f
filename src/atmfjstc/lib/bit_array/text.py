"""
Conversions between byte-oriented text and bit strings.

Each character is treated as a single byte, so only code points 0-255 can be represented. Text in other encodings
should be encoded to `bytes` first; `text_to_binary` accepts those directly.
"""

from typing import Union

from .errors import InvalidBitCharacterError, NonByteCharacterError


def text_to_binary(text: Union[str, bytes]) -> str:
    """
    Converts text to a bit string, each character becoming its 8-bit big-endian binary encoding.

    E.g. ``'A'`` becomes ``'01000001'``.

    Raises:
        NonByteCharacterError: If a character in the text has a code point above 255.
    """
    if isinstance(text, str):
        for position, char in enumerate(text):
            if ord(char) > 255:
                raise NonByteCharacterError(position, char)

        codes = [ord(char) for char in text]
    elif isinstance(text, (bytes, bytearray)):
        codes = list(text)
    else:
        raise TypeError(f"Expected str or bytes, got {text.__class__.__name__}")

    return ''.join(format(code, '08b') for code in codes)


def binary_to_text(bit_string: str) -> str:
    """
    Converts a bit string back to text, reading it in chunks of 8 bits (most significant first).

    All whitespace is removed before decoding, so the input may be formatted e.g. as ``'01000001 01000010'``. If the
    number of bits is not a multiple of 8, the incomplete chunk at the end is silently dropped.

    Raises:
        InvalidBitCharacterError: If anything but '0', '1' or whitespace is present. The reported position refers to
            the string with the whitespace already removed.
    """
    if not isinstance(bit_string, str):
        raise TypeError(f"Expected a bit string, got {bit_string.__class__.__name__}")

    compact = ''.join(bit_string.split())

    for position, char in enumerate(compact):
        if char not in '01':
            raise InvalidBitCharacterError(position, char)

    return ''.join(chr(int(compact[base:base+8], 2)) for base in range(0, len(compact) - 7, 8))
