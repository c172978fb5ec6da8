"""UTF-16 to UTF-8 transcoding pipeline."""

from typing import Iterable

from .decoder import decode
from .encoder import to_utf8_bytes
from .units import UnitBuffer, units_from_string


def transcode(text: str) -> bytes:
    """Return the UTF-8 encoding of ``text``.

    The string is first expanded into its UTF-16 code units, which are decoded
    into code points and then encoded as UTF-8. Malformed surrogates raise a
    :class:`~utf8coder.core.errors.TranscodeError` and no bytes are returned.
    """
    return to_utf8_bytes(decode(units_from_string(text)))


def transcode_units(units: Iterable[int]) -> bytes:
    """Same as :func:`transcode`, starting from raw UTF-16 code units."""
    return to_utf8_bytes(decode(UnitBuffer.from_units(units)))
