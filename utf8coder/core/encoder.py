"""Encode Unicode code points as UTF-8 (RFC 3629, section 3).

    Char. number range  |        UTF-8 octet sequence
       (hexadecimal)    |              (binary)
    --------------------+---------------------------------------------
    0000 0000-0000 007F | 0xxxxxxx
    0000 0080-0000 07FF | 110xxxxx 10xxxxxx
    0000 0800-0000 FFFF | 1110xxxx 10xxxxxx 10xxxxxx
    0001 0000-0010 FFFF | 11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
"""

import logging
from typing import Iterable, Optional

from .errors import CodePointOutOfRange

MAX_CODE_POINT = 0x10FFFF

_CONT_LEAD = 0x80
_CONT_MASK = 0x3F

_logger = logging.getLogger(__name__)


def _check_scalar(code_point: int, index: Optional[int] = None) -> None:
    if not 0 <= code_point <= MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        raise CodePointOutOfRange(code_point, index)


def utf8_length(code_point: int) -> int:
    """Return how many bytes ``code_point`` takes in UTF-8."""
    _check_scalar(code_point)
    if code_point <= 0x7F:
        return 1
    if code_point <= 0x7FF:
        return 2
    if code_point <= 0xFFFF:
        return 3
    return 4


def to_utf8_bytes(code_points: Iterable[int]) -> bytes:
    out = bytearray()
    count = 0
    for index, c in enumerate(code_points):
        _check_scalar(c, index)
        if c <= 0x7F:
            out.append(c)
        elif c <= 0x7FF:
            out.append(0xC0 | (c >> 6))
            out.append(_CONT_LEAD | (c & _CONT_MASK))
        elif c <= 0xFFFF:
            out.append(0xE0 | (c >> 12))
            out.append(_CONT_LEAD | ((c >> 6) & _CONT_MASK))
            out.append(_CONT_LEAD | (c & _CONT_MASK))
        else:
            out.append(0xF0 | (c >> 18))
            out.append(_CONT_LEAD | ((c >> 12) & _CONT_MASK))
            out.append(_CONT_LEAD | ((c >> 6) & _CONT_MASK))
            out.append(_CONT_LEAD | (c & _CONT_MASK))
        count = index + 1

    _logger.debug("encoded %d code points into %d bytes", count, len(out))
    return bytes(out)
