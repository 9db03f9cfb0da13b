from _yamllex.tokenizer.errors import SourceError


class PushbackCursor:
    """
    Reads single bytes from a byte source with the possibility of putting
    bytes back to be read again.

    Bytes that are pushed back are read before any new byte is taken from
    the source, last pushed is first read. This makes it possible to look
    ahead any number of bytes and wind back exactly, see consume().

    >>> from _yamllex.tokenizer.byte_source import make_byte_source
    >>> cursor = PushbackCursor(make_byte_source(b"-a"))
    >>> cursor.consume(b"--")
    False
    >>> cursor.pop()
    b'-'

    """

    def __init__(self, read_byte):
        """
        :param read_byte: A byte source, see _yamllex.tokenizer.byte_source.
        """
        self._read_byte = read_byte
        self._pushback = []
        self._num_read = 0

    def tell(self):
        """
        :returns: The offset in the stream of the next byte returned by pop().
        """
        return self._num_read - len(self._pushback)

    def pop(self):
        """
        :returns: The next byte in the stream, or b"" if the stream
            is exhausted.
        """
        if self._pushback:
            return self._pushback.pop()
        return self._read_from_source()

    def peek(self):
        """
        :returns: The next byte in the stream without taking it, or b""
            if the stream is exhausted.
        """
        read_char = self.pop()
        self.push_back(read_char)
        return read_char

    def push_back(self, read_char):
        """
        Put back a byte so that it is returned by the next pop().
        Pushing back b"" (end of stream) does nothing.
        """
        if read_char:
            self._pushback.append(read_char)

    def consume(self, literal):
        """
        Take the given literal from the start of the stream if it is there.

        If the stream does not start with literal, all bytes read while
        matching are put back so the stream is left as it was before
        the call.

        :param literal: The bytes expected next in the stream.
        :returns: Whether the literal was taken from the stream.
        """
        popped = []
        for i in range(len(literal)):
            read_char = self.pop()
            if read_char:
                popped.append(read_char)
            if read_char != literal[i : i + 1]:
                for char in reversed(popped):
                    self.push_back(char)
                return False
        return True

    def _read_from_source(self):
        try:
            read_char = self._read_byte()
        except StopIteration:
            # Sources backed by an iterator, ie. lambda: next(it)
            return b""
        except OSError as err:
            raise SourceError(
                f"Could not read from yaml stream at {self._num_read}",
                self._num_read,
            ) from err

        if read_char is None or read_char == b"":
            return b""
        if isinstance(read_char, int) and 0 <= read_char < 256:
            read_char = bytes((read_char,))
        if not isinstance(read_char, bytes) or len(read_char) != 1:
            raise SourceError(
                f"Expected a single byte from yaml stream at {self._num_read},"
                f" got {read_char!r}",
                self._num_read,
            )
        self._num_read += 1
        return read_char
