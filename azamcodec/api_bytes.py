"""Byte-array codec convenience wrappers."""

from .main import azamcodec


def encode_bytes(*values):
    return azamcodec.encode_sections(*values)


def decode_bytes(string: str):
    return azamcodec.decode_all_sections(string)


def encode_section(data):
    return azamcodec.encode_section(data)


def decode_section(source):
    return azamcodec.decode_section(source)


__all__ = [
    "decode_bytes",
    "decode_section",
    "encode_bytes",
    "encode_section",
]
