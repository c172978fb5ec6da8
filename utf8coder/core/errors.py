"""Error taxonomy for malformed transcoder input."""

from typing import Optional


class TranscodeError(ValueError):
    """Base class for every malformed-input condition."""


class InvalidSurrogatePair(TranscodeError):
    """A high surrogate is not followed by a low surrogate."""

    def __init__(self, index: int, unit: int, following: Optional[int] = None) -> None:
        self.index = index
        self.unit = unit
        self.following = following
        if following is None:
            detail = "input ends after it"
        else:
            detail = f"followed by 0x{following:04X}"
        super().__init__(f"high surrogate 0x{unit:04X} at index {index} is {detail}")


class UnexpectedLowSurrogate(TranscodeError):
    """A low surrogate appears without a preceding high surrogate."""

    def __init__(self, index: int, unit: int) -> None:
        self.index = index
        self.unit = unit
        super().__init__(f"low surrogate 0x{unit:04X} at index {index} has no high surrogate")


class CodePointOutOfRange(TranscodeError):
    """A value that is not a Unicode scalar value reached the encoder."""

    def __init__(self, value: int, index: Optional[int] = None) -> None:
        self.value = value
        self.index = index
        where = "" if index is None else f" at index {index}"
        shown = f"-0x{-value:X}" if value < 0 else f"0x{value:X}"
        super().__init__(f"code point {shown}{where} is not a Unicode scalar value")
