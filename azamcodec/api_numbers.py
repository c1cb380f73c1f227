"""Integer projections over the byte-array codec."""

from .main import azamcodec


def encode_ints(values):
    return azamcodec.encode_ints(values)


def encode_longs(values):
    return azamcodec.encode_longs(values)


def encode_numbers(*values):
    return azamcodec.encode_numbers(*values)


def decode_ints(string: str, signed: bool = False):
    return azamcodec.decode_ints(string, signed=signed)


def decode_longs(string: str, signed: bool = False):
    return azamcodec.decode_longs(string, signed=signed)


def decode_numbers(string: str):
    return azamcodec.decode_numbers(string)


__all__ = [
    "decode_ints",
    "decode_longs",
    "decode_numbers",
    "encode_ints",
    "encode_longs",
    "encode_numbers",
]
