"""File-like channel wrappers."""

from .main import azamcodec


def encode_stream(output, source, chunk_size: int | None = None):
    return azamcodec.encode_stream(output, source, chunk_size=chunk_size)


def encode_streams(output, *sources, chunk_size: int | None = None):
    return azamcodec.encode_streams(output, *sources, chunk_size=chunk_size)


def decode_stream_section(source, output):
    return azamcodec.decode_stream_section(source, output)


def iter_stream_sections(source):
    return azamcodec.iter_stream_sections(source)


__all__ = [
    "decode_stream_section",
    "encode_stream",
    "encode_streams",
    "iter_stream_sections",
]
