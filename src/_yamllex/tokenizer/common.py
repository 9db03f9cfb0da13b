from _yamllex.tokenizer.errors import InvalidLexemeError

WHITESPACE = (b" ", b"\t", b"\n", b"\r")


def is_scalar_char(read_char):
    """
    Scalars consist of ascii letters and digits. bytes.isalnum
    only accepts ascii.
    """
    return read_char.isalnum()


def is_anchor_char(read_char):
    return read_char.isalnum() or read_char in (b"-", b"_")


def take_while(cursor, predicate, prefix=b""):
    """
    Takes bytes from the cursor as long as they satisfy predicate.
    Ends with the first byte not satisfying predicate as the next
    byte of the cursor.

    :param prefix: Bytes already taken that start the lexeme.
    :returns: The bytes taken, following prefix.
    """
    lexeme = bytearray(prefix)
    read_char = cursor.pop()
    while read_char and predicate(read_char):
        lexeme += read_char
        read_char = cursor.pop()
    cursor.push_back(read_char)
    return bytes(lexeme)


def take_unsigned(cursor):
    """
    Takes a decimal number from the start of the cursor.

    :returns: The number, or None if the cursor did not start with a digit.
    """
    value = None
    read_char = cursor.pop()
    while read_char and read_char.isdigit():
        value = (value or 0) * 10 + int(read_char)
        read_char = cursor.pop()
    cursor.push_back(read_char)
    return value


def drop_whitespace(cursor):
    """
    Takes any number of whitespace from the cursor.
    Ends with the first non-whitespace byte as the next byte of the cursor.
    """
    while cursor.peek() in WHITESPACE:
        cursor.pop()


def drop_comment(cursor):
    """
    Takes the rest of the line from the cursor, including the newline.
    """
    read_char = cursor.pop()
    while read_char and read_char != b"\n":
        read_char = cursor.pop()


def decode_lexeme(raw, start):
    """
    :param raw: The bytes of a lexeme.
    :param start: The position of the lexeme, used for error messages.
    :returns: raw decoded as utf-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidLexemeError(
            f"Lexeme {raw!r} at {start} is not valid utf-8", start
        ) from err
