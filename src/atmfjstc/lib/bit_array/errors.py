class BitArrayError(ValueError):
    """
    Base class for all exceptions thrown when a bit array operation receives bad data.
    """


class InvalidBitValueError(BitArrayError):
    index: int
    value: object

    def __init__(self, index: int, value: object):
        super().__init__(f"Element #{index} of bit array must be 0 or 1, got {value!r}")

        self.index = index
        self.value = value


class InvalidBitCharacterError(BitArrayError):
    position: int
    character: str

    def __init__(self, position: int, character: str):
        super().__init__(f"Bit string may contain only '0' and '1', got {character!r} at position {position}")

        self.position = position
        self.character = character


class InvalidShiftAmountError(BitArrayError):
    amount: object

    def __init__(self, amount: object):
        super().__init__(f"Shift amount must be a non-negative integer, got {amount!r}")

        self.amount = amount


class NegativeNumberError(BitArrayError):
    number: int

    def __init__(self, number: int):
        super().__init__(f"Cannot convert negative number {number} to a bit array")

        self.number = number


class EmptyBitArrayError(BitArrayError):
    operation: str

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation} an empty bit array")

        self.operation = operation


class NonByteCharacterError(BitArrayError):
    position: int
    character: str

    def __init__(self, position: int, character: str):
        super().__init__(
            f"Character {character!r} at position {position} does not fit in a byte (code point {ord(character)})"
        )

        self.position = position
        self.character = character
