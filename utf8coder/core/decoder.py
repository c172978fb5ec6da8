"""Decode UTF-16 code units into Unicode code points (RFC 2781)."""

import logging
from typing import List

from .errors import InvalidSurrogatePair, UnexpectedLowSurrogate
from .units import UnitBuffer

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF

_logger = logging.getLogger(__name__)


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def combine_surrogates(high: int, low: int) -> int:
    """Return the supplementary code point encoded by a surrogate pair."""
    return (((high & 0x3FF) << 10) | (low & 0x3FF)) + 0x10000


def decode(buffer: UnitBuffer) -> List[int]:
    """Decode ``buffer`` into code points.

    A single forward cursor walks the units. A high surrogate consumes the
    following low surrogate; any other surrogate placement raises.
    """
    code_points: List[int] = []
    length = len(buffer)
    i = 0
    while i < length:
        w1 = buffer[i]
        if not HIGH_SURROGATE_MIN <= w1 <= LOW_SURROGATE_MAX:
            code_points.append(w1)
            i += 1
        elif is_high_surrogate(w1):
            if i + 1 >= length:
                raise InvalidSurrogatePair(i, w1)
            w2 = buffer[i + 1]
            if not is_low_surrogate(w2):
                raise InvalidSurrogatePair(i, w1, w2)
            code_points.append(combine_surrogates(w1, w2))
            i += 2
        else:
            raise UnexpectedLowSurrogate(i, w1)

    _logger.debug("decoded %d code units into %d code points", length, len(code_points))
    return code_points
