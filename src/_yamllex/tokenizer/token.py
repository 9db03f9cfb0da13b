from dataclasses import dataclass, field

from _yamllex.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class YamlVersion:
    """
    The version given in a %YAML directive, ie. YamlVersion(1, 2) for
    "%YAML 1.2".
    """

    major: int
    minor: int

    def __str__(self):
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token in a yaml stream.

    The value is only set for kinds in TokenKind.payload_kinds(): the name of
    an anchor or alias, the text of a scalar, the YamlVersion of a directive
    or the unrecognized byte of an OTHER token. The value is owned by the
    token and does not refer back into the stream.

    start and end are the byte offsets of the lexeme in the stream, they are
    not compared, so Token(TokenKind.SCALAR, "a") equals a scalar token "a"
    found anywhere in the stream.
    """

    kind: TokenKind
    value: object = None
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)

    def get_value(self, data):
        """
        :param data: The bytes that were tokenized.
        :returns: The raw bytes of the lexeme, ie. b"---" for a token with
            kind=TokenKind.DOCUMENT_START, or b"&anchor" for a token with
            kind=TokenKind.ANCHOR.
        """
        return bytes(data[self.start : self.end])
