from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    SEQUENCE_START = auto()
    SEQUENCE_END = auto()
    MAPPING_START = auto()
    MAPPING_END = auto()
    SEQUENCE_ENTRY = auto()
    MAPPING_SEPARATOR = auto()
    COLLECTION_SEPARATOR = auto()
    COMPLEX_KEY = auto()
    TAG = auto()
    ANCHOR = auto()
    ALIAS = auto()
    LITERAL = auto()
    FOLDED = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()
    COMMENT = auto()
    YAML_DIRECTIVE = auto()
    RESERVED = auto()
    DOCUMENT_START = auto()
    DOCUMENT_END = auto()
    SCALAR = auto()
    OTHER = auto()

    @classmethod
    def indicators(cls):
        return {
            b"[": cls.SEQUENCE_START,
            b"]": cls.SEQUENCE_END,
            b"{": cls.MAPPING_START,
            b"}": cls.MAPPING_END,
            b":": cls.MAPPING_SEPARATOR,
            b",": cls.COLLECTION_SEPARATOR,
            b"?": cls.COMPLEX_KEY,
            b"!": cls.TAG,
            b"|": cls.LITERAL,
            b">": cls.FOLDED,
            b"'": cls.SINGLE_QUOTE,
            b'"': cls.DOUBLE_QUOTE,
        }

    @classmethod
    def reserved(cls):
        return {
            b"@": cls.RESERVED,
            b"`": cls.RESERVED,
        }

    @classmethod
    def document_markers(cls):
        return {
            cls.DOCUMENT_START: b"---",
            cls.DOCUMENT_END: b"...",
        }

    @classmethod
    def payload_kinds(cls):
        return (
            cls.ANCHOR,
            cls.ALIAS,
            cls.SCALAR,
            cls.YAML_DIRECTIVE,
            cls.OTHER,
        )
