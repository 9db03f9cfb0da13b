"""
A byte source is a function taking no arguments that returns the next byte
of the stream, or b"" when the stream is exhausted. It is the only way the
tokenizer reads its input.
"""

import io

from _yamllex.tokenizer.errors import WrongFileModeError


def stream_source(stream):
    """
    Byte source reading one byte at a time from a binary stream.

    :param stream: Any stream opened in binary mode.
    """
    if isinstance(stream.read(0), str):
        raise WrongFileModeError("Yaml stream was opened in text mode!")

    def read_byte():
        return stream.read(1)

    return read_byte


def make_byte_source(source):
    """
    :param source: Either bytes-like contents, a binary stream or a byte
        source function. A byte source function may also return ints in
        range(256) and None for exhaustion.
    :returns: A byte source for the given source.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return stream_source(io.BytesIO(source))
    if hasattr(source, "read"):
        return stream_source(source)
    if callable(source):
        return source
    raise TypeError(
        "Expected bytes, a binary stream or a byte source function, "
        f"got {type(source).__name__}"
    )
