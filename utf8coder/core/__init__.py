"""Core modules for the UTF-16 to UTF-8 transcoder."""

from .conformance import DEFAULT_SAMPLES, ConformanceRunner, SampleSpec, load_samples  # noqa: F401
from .decoder import decode  # noqa: F401
from .encoder import to_utf8_bytes, utf8_length  # noqa: F401
from .errors import (  # noqa: F401
    CodePointOutOfRange,
    InvalidSurrogatePair,
    TranscodeError,
    UnexpectedLowSurrogate,
)
from .formatting import ByteFormatter  # noqa: F401
from .trace import TraceLog  # noqa: F401
from .transcoder import transcode, transcode_units  # noqa: F401
from .units import UnitBuffer, units_from_string  # noqa: F401
