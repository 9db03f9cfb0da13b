import logging
import warnings

from _yamllex.tokenizer.byte_source import make_byte_source
from _yamllex.tokenizer.common import (
    WHITESPACE,
    decode_lexeme,
    drop_comment,
    drop_whitespace,
    is_anchor_char,
    is_scalar_char,
    take_unsigned,
    take_while,
)
from _yamllex.tokenizer.cursor import PushbackCursor
from _yamllex.tokenizer.errors import (
    DirectiveError,
    InvalidLexemeError,
    TokenizationWarning,
)
from _yamllex.tokenizer.token import Token, YamlVersion
from _yamllex.tokenizer.token_kind import TokenKind

logger = logging.getLogger(__name__)


class YamlTokenizer:
    """
    Iterator of the tokens in a yaml stream.

    >>> list(YamlTokenizer(b"--- [a, *b]"))  # doctest: +NORMALIZE_WHITESPACE
    [Token(kind=<TokenKind.DOCUMENT_START: 19>, value=None, start=0, end=3),
     Token(kind=<TokenKind.SEQUENCE_START: 1>, value=None, start=4, end=5),
     Token(kind=<TokenKind.SCALAR: 21>, value='a', start=5, end=6),
     Token(kind=<TokenKind.COLLECTION_SEPARATOR: 7>, value=None, start=6, end=7),
     Token(kind=<TokenKind.ALIAS: 11>, value='b', start=8, end=10),
     Token(kind=<TokenKind.SEQUENCE_END: 2>, value=None, start=10, end=11)]

    Whitespace and comments are skipped and do not give tokens.
    """

    def __init__(self, source, strict=True):
        """
        :param source: The yaml stream, see
            _yamllex.tokenizer.byte_source.make_byte_source.
        :param strict: When True, malformed anchors, aliases and %YAML
            directives raise a TokenizationError. When False, a
            TokenizationWarning is emitted and tokenization continues.
        """
        self.cursor = PushbackCursor(make_byte_source(source))
        self.strict = strict

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self):
        """
        :returns: The next token in the stream, or None if the stream is
            exhausted. Once None has been returned, every following
            call returns None.
        """
        while True:
            start = self.cursor.tell()
            read_char = self.cursor.pop()
            if not read_char:
                logger.debug("Yaml stream exhausted at %d", start)
                return None
            if read_char in WHITESPACE:
                drop_whitespace(self.cursor)
                continue
            if read_char == b"#":
                drop_comment(self.cursor)
                continue
            token = self.tokenize_char(read_char, start)
            if token is not None:
                return token

    def tokenize_char(self, read_char, start):
        """
        Tokenize the lexeme starting with read_char, which has already
        been taken from the cursor.

        :returns: The token, or None if the lexeme was skipped.
        """
        indicators = TokenKind.indicators()
        if read_char in indicators:
            return self.make_token(indicators[read_char], start)
        if read_char == b"-":
            if self.cursor.consume(b"--"):
                return self.make_token(TokenKind.DOCUMENT_START, start)
            return self.make_token(TokenKind.SEQUENCE_ENTRY, start)
        if read_char == b".":
            if self.cursor.consume(b".."):
                return self.make_token(TokenKind.DOCUMENT_END, start)
            return self.tokenize_scalar(start, prefix=read_char)
        if read_char == b"&":
            return self.tokenize_anchor(TokenKind.ANCHOR, start)
        if read_char == b"*":
            return self.tokenize_anchor(TokenKind.ALIAS, start)
        if read_char == b"%":
            return self.tokenize_directive(start)
        if is_scalar_char(read_char):
            self.cursor.push_back(read_char)
            return self.tokenize_scalar(start)
        if read_char in TokenKind.reserved():
            return self.make_token(TokenKind.RESERVED, start)
        return self.make_token(TokenKind.OTHER, start, read_char)

    def make_token(self, kind, start, value=None):
        return Token(kind, value, start, self.cursor.tell())

    def tokenize_scalar(self, start, prefix=b""):
        raw = take_while(self.cursor, is_scalar_char, prefix)
        return self.make_token(TokenKind.SCALAR, start, decode_lexeme(raw, start))

    def tokenize_anchor(self, kind, start):
        """
        Tokenize the name following an anchor (&) or alias (*) indicator.
        """
        raw = take_while(self.cursor, is_anchor_char)
        if not raw:
            self.malformed(
                InvalidLexemeError(f"Expected name of {kind.name} at {start}", start)
            )
        return self.make_token(kind, start, decode_lexeme(raw, start))

    def tokenize_directive(self, start):
        """
        Tokenize a directive, the % indicator has already been taken.

        Only the %YAML directive is supported, other directives are skipped
        with a warning. A malformed %YAML directive is consumed up to
        the error.
        """
        if not self.cursor.consume(b"YAML "):
            drop_comment(self.cursor)
            logger.debug("Skipped directive at %d", start)
            warnings.warn(
                f"Skipped unsupported directive at {start}",
                TokenizationWarning,
                stacklevel=2,
            )
            return None

        major = take_unsigned(self.cursor)
        if major is None:
            return self.malformed(
                DirectiveError(f"Expected major version of %YAML at {start}", start)
            )
        if not self.cursor.consume(b"."):
            return self.malformed(
                DirectiveError(
                    f"Expected '.' after major version of %YAML at {start}", start
                )
            )
        minor = take_unsigned(self.cursor)
        if minor is None:
            return self.malformed(
                DirectiveError(f"Expected minor version of %YAML at {start}", start)
            )
        return self.make_token(
            TokenKind.YAML_DIRECTIVE, start, YamlVersion(major, minor)
        )

    def malformed(self, error):
        """
        Raise the given error in strict mode, otherwise warn about it.
        """
        if self.strict:
            raise error
        warnings.warn(str(error), TokenizationWarning, stacklevel=3)
