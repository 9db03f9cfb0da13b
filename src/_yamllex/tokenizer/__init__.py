"""
In this module, a tokenizer takes a yaml byte stream and generates lexical
tokens for the indicators, document markers, directives, anchors, aliases and
scalars in the stream. Whitespace and comments are skipped.

Bytes are read one at a time through a PushbackCursor. Some indicators are
prefixes of others ('-' of '---' and '.' of '...'), these are resolved by
reading ahead and, if the longer indicator does not match, pushing the bytes
back onto the cursor. Lookahead is bounded by the longest literal matched
("YAML " of the %YAML directive), so there is no bookkeeping of backtracking
points.

The tokenizer only reads bytes: give it bytes, a stream opened in binary
mode, or a function returning one byte at a time.
"""

from .token import Token, YamlVersion
from .token_kind import TokenKind
from .yaml_tokenizer import YamlTokenizer

__all__ = ["Token", "TokenKind", "YamlTokenizer", "YamlVersion"]
