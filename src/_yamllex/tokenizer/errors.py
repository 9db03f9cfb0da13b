class TokenizationError(Exception):
    """
    The tokenizer throws a TokenizationError when the stream contains
    something that cannot be turned into a token. position is the byte offset
    where the offending lexeme started, when known.
    """

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class InvalidLexemeError(TokenizationError):
    """
    Thrown when a scalar, anchor or alias name is empty where a name is
    required, or its bytes are not valid utf-8.
    """

    pass


class DirectiveError(TokenizationError):
    """
    Thrown when a %YAML directive is not followed by a major.minor version.
    The bytes of the directive read up to the error are consumed.
    """

    pass


class SourceError(TokenizationError):
    """
    Thrown when the byte source fails, as opposed to simply running out of
    bytes.
    """

    pass


class WrongFileModeError(Exception):
    """
    Thrown when a yaml stream is opened in text mode, the tokenizer
    only reads bytes.
    """

    pass


class TokenizationWarning(UserWarning):
    """
    Warning for input that the tokenizer skipped instead of failing on.
    """

    pass
