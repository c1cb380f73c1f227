"""
AZAMCODEC - compact, case-insensitive text encoding for byte arrays and integers

Each value becomes one "section": its nibbles, most significant first, with
leading zero nibbles dropped. Every nibble but the last is written from the
high alphabet (ghjkmnpqrstvwxyz) and the last from the low alphabet
(0123456789abcdef), so sections concatenate without any separator.

    >>> encode_bytes(b"\\x01\\x00", b"\\xff")
    'hg0zf'
    >>> decode_bytes("hg0zf")
    [b'\\x01\\x00', b'\\xff']
"""

from .main import (
    AzamDecodeError,
    Continuation,
    EmptyInputError,
    IllegalLeadingNibbleError,
    InvalidCharacterError,
    SymbolCursor,
    Terminal,
    UnterminatedSectionError,
    ValueOutOfRangeError,
    azamcodec,
    cli,
    main,
)
from .api_bytes import *
from .api_numbers import *
from .api_streams import *
from .version import __version__
