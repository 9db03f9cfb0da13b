import yamllex.version
from _yamllex.reading import lazy_tokenize, tokenize
from _yamllex.tokenizer import Token, TokenKind, YamlTokenizer, YamlVersion
from _yamllex.tokenizer.errors import (
    DirectiveError,
    InvalidLexemeError,
    SourceError,
    TokenizationError,
    TokenizationWarning,
    WrongFileModeError,
)

__version__ = yamllex.version.version

__all__ = [
    "DirectiveError",
    "InvalidLexemeError",
    "SourceError",
    "Token",
    "TokenKind",
    "TokenizationError",
    "TokenizationWarning",
    "WrongFileModeError",
    "YamlTokenizer",
    "YamlVersion",
    "lazy_tokenize",
    "tokenize",
]
