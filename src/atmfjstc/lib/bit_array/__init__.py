"""
Utilities for manipulating bit arrays, i.e. explicit lists of 0/1 values with the most significant bit first.

Bit arrays can be converted to and from strings of '0'/'1' characters, hexadecimal strings and non-negative integers,
and can be combined with the usual logical, shift and rotate operations. All functions are pure: they validate their
input up front and always return a new list, never modifying the one they were given.

Note that owing to the interpreted nature of Python, these cannot possibly achieve any degree of efficiency. They are
meant for small values such as flags, masks or teaching examples. For processing large amounts of data, it's better to
use native ints, `numpy` or some other library.
"""

from collections.abc import Sequence
from functools import singledispatch
from typing import List, Optional, Union

from .errors import BitArrayError, InvalidBitValueError, InvalidBitCharacterError, InvalidShiftAmountError, \
    NegativeNumberError, EmptyBitArrayError, NonByteCharacterError
from .text import text_to_binary, binary_to_text


__version__ = '1.0.0'


BitArray = List[int]

"""
Any of the representations accepted by the rotate and hex functions: a bit array (list or tuple of 0/1 values), a
string of '0'/'1' characters, or a non-negative integer (converted at its natural width, see `number_to_bit_array`).
"""
BitValue = Union[Sequence, str, int]


HEX_DIGITS = '0123456789ABCDEF'


def check_bit_array(bits: Sequence, value_name: str = 'bits') -> BitArray:
    """
    Checks that a value is a valid bit array and returns a copy of it as a list.

    Args:
        bits: The value to check. Any sequence (list, tuple etc.) other than a string is accepted.
        value_name: The name of the value, used in the text of any `TypeError` thrown.

    Returns:
        A new list containing the same bits.

    Raises:
        TypeError: If `bits` is not a sequence.
        InvalidBitValueError: If any element is not 0 or 1.
    """
    if isinstance(bits, (str, bytes)) or not isinstance(bits, Sequence):
        raise TypeError(f"{value_name} must be a sequence of 0/1 values, got {bits.__class__.__name__}")

    for index, bit in enumerate(bits):
        if not isinstance(bit, int) or bit not in (0, 1):
            raise InvalidBitValueError(index, bit)

    return [int(bit) for bit in bits]


def bit_array_to_str(bits: Sequence) -> str:
    """
    Converts a bit array to its string representation, e.g. ``[1, 0, 1, 0]`` becomes ``'1010'``.
    """
    return ''.join('1' if bit == 1 else '0' for bit in check_bit_array(bits))


def bit_array_from_str(text: str) -> BitArray:
    """
    Converts a string of '0' and '1' characters to a bit array, e.g. ``'1010'`` becomes ``[1, 0, 1, 0]``.

    Raises:
        InvalidBitCharacterError: If the string contains any other character (whitespace included).
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a bit string, got {text.__class__.__name__}")

    for position, char in enumerate(text):
        if char not in '01':
            raise InvalidBitCharacterError(position, char)

    return [1 if char == '1' else 0 for char in text]


def bit_not(bits: Sequence) -> BitArray:
    return [1 - bit for bit in check_bit_array(bits)]


def bit_and(bits1: Sequence, bits2: Sequence) -> BitArray:
    """
    Performs a bitwise AND on two bit arrays.

    If the arrays differ in length, only the shared prefix is processed and the result is as long as the shorter
    array. The same goes for `bit_or` and `bit_xor`.
    """
    return [a * b for a, b in zip(check_bit_array(bits1, 'bits1'), check_bit_array(bits2, 'bits2'))]


def bit_or(bits1: Sequence, bits2: Sequence) -> BitArray:
    return [1 if a + b > 0 else 0 for a, b in zip(check_bit_array(bits1, 'bits1'), check_bit_array(bits2, 'bits2'))]


def bit_xor(bits1: Sequence, bits2: Sequence) -> BitArray:
    return [(a + b) % 2 for a, b in zip(check_bit_array(bits1, 'bits1'), check_bit_array(bits2, 'bits2'))]


def _check_shift_amount(n: int) -> int:
    if not isinstance(n, int) or n < 0:
        raise InvalidShiftAmountError(n)

    return n


def shift_left(bits: Sequence, n: int) -> BitArray:
    """
    Performs a logical left shift on a bit array.

    The length of the array is preserved: the `n` most significant bits are discarded and `n` zero bits are added at
    the low end.

    Raises:
        InvalidShiftAmountError: If `n` is negative or not an integer.
    """
    bits = check_bit_array(bits)
    n = _check_shift_amount(n)

    return [bits[i + n] if i + n < len(bits) else 0 for i in range(len(bits))]


def shift_right(bits: Sequence, n: int) -> BitArray:
    """
    Performs a logical right shift on a bit array. Like `shift_left`, this preserves the length of the array.
    """
    bits = check_bit_array(bits)
    n = _check_shift_amount(n)

    return [bits[i - n] if i - n >= 0 else 0 for i in range(len(bits))]


def number_to_bit_array(num: int, length: Optional[int] = None) -> BitArray:
    """
    Converts a non-negative integer to a bit array.

    Args:
        num: The number to convert.
        length: The length of the result. If the number needs fewer bits, it is padded with zeroes at the high end. If
            it needs more, the high-order bits that do not fit are discarded.

            If omitted, the length is computed as ``max(1, floor(log2(num + 1)))``. Note that this is one bit too few
            for any positive number not of the form ``2**n - 1``, e.g. 8 will be converted to ``[0, 0, 0]`` and 5 to
            ``[0, 1]``. This is the established behavior of the function and is preserved for compatibility; pass an
            explicit length if you need all the bits.

    Returns:
        A bit array exactly `length` bits long, most significant bit first.

    Raises:
        NegativeNumberError: If `num` is negative.
    """
    if not isinstance(num, int):
        raise TypeError(f"Expected an integer, got {num.__class__.__name__}")
    if num < 0:
        raise NegativeNumberError(num)

    if length is None:
        length = max(1, (num + 1).bit_length() - 1)
    elif length < 0:
        raise ValueError(f"Bit array length cannot be negative, got {length}")

    result = [0] * length
    for i in range(length - 1, -1, -1):
        if num == 0:
            break

        result[i] = num % 2
        num //= 2

    return result


@singledispatch
def to_bit_array(value: BitValue) -> BitArray:
    """
    Converts any of the representations in `BitValue` to a bit array. To support other types, use::

        @to_bit_array.register
        def _(value: MyType) -> BitArray:
            ...conversion code here...
    """
    raise TypeError(f"Cannot convert value of type {value.__class__.__name__} to a bit array")


@to_bit_array.register
def _(value: int) -> BitArray:
    return number_to_bit_array(value)


@to_bit_array.register
def _(value: str) -> BitArray:
    return bit_array_from_str(value)


@to_bit_array.register(list)
@to_bit_array.register(tuple)
def _(value) -> BitArray:
    return check_bit_array(value, 'value')


def _rotate(value: BitValue, shift_count: int, direction: int, operation: str) -> BitArray:
    bits = to_bit_array(value)

    if not isinstance(shift_count, int):
        raise InvalidShiftAmountError(shift_count)
    if len(bits) == 0:
        raise EmptyBitArrayError(operation)

    shift_count %= len(bits)
    if shift_count == 0:
        return bits

    return [bits[(i + direction * shift_count) % len(bits)] for i in range(len(bits))]


def rotate_right(value: BitValue, shift_count: int) -> BitArray:
    """
    Rotates a bit array (given in any `BitValue` representation) to the right, i.e. towards the least significant
    end, with the bits shifted out at the low end reappearing at the high end.

    Negative shift counts rotate in the opposite direction.

    Raises:
        EmptyBitArrayError: If the bit array is empty.
    """
    return _rotate(value, shift_count, -1, 'rotate right')


def rotate_left(value: BitValue, shift_count: int) -> BitArray:
    """
    Rotates a bit array (given in any `BitValue` representation) to the left. See `rotate_right`.
    """
    return _rotate(value, shift_count, 1, 'rotate left')


def to_hex(value: BitValue, characters: Optional[int] = None) -> str:
    """
    Converts a bit array (given in any `BitValue` representation) to an uppercase hexadecimal string.

    The bit array is first padded with zero bits at the high end until its length is a multiple of 4, so that each
    group of 4 bits becomes one hex digit.

    Args:
        value: The bit array, bit string or non-negative integer to convert.
        characters: The exact number of characters desired in the result. Shorter results are padded with '0' on the
            left. Longer results are truncated *from the left*, i.e. only the last `characters` characters (the least
            significant digits) are kept. If omitted, the result is returned as-is.

    Returns:
        A string over ``0-9A-F``, e.g. ``'AF'`` for ``[1, 0, 1, 0, 1, 1, 1, 1]``.
    """
    bits = to_bit_array(value)

    if (characters is not None) and (not isinstance(characters, int) or characters < 0):
        raise ValueError(f"Number of hex characters must be a non-negative integer, got {characters!r}")

    bits = [0] * (-len(bits) % 4) + bits

    hex_str = ''.join(
        HEX_DIGITS[8 * bits[i] + 4 * bits[i + 1] + 2 * bits[i + 2] + bits[i + 3]]
        for i in range(0, len(bits), 4)
    )

    if characters is None:
        return hex_str
    if characters == 0:
        return ''

    return hex_str.rjust(characters, '0')[-characters:]


