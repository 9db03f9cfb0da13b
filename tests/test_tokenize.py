import io

import pytest

import yamllex
from yamllex import Token, TokenKind, YamlVersion

contents = b"%YAML 1.2\n--- # first document\n- &a hallo\n- *a\n...\n"

expected_tokens = [
    Token(TokenKind.YAML_DIRECTIVE, YamlVersion(1, 2)),
    Token(TokenKind.DOCUMENT_START),
    Token(TokenKind.SEQUENCE_ENTRY),
    Token(TokenKind.ANCHOR, "a"),
    Token(TokenKind.SCALAR, "hallo"),
    Token(TokenKind.SEQUENCE_ENTRY),
    Token(TokenKind.ALIAS, "a"),
    Token(TokenKind.DOCUMENT_END),
]


@pytest.fixture
def yaml_file(tmp_path):
    path = tmp_path / "test.yaml"
    path.write_bytes(contents)
    return path


def test_tokenize_bytes():
    assert yamllex.tokenize(contents) == expected_tokens


def test_tokenize_stream():
    assert yamllex.tokenize(io.BytesIO(contents)) == expected_tokens


@pytest.mark.parametrize("as_str", [True, False])
def test_tokenize_path(yaml_file, as_str):
    filelike = str(yaml_file) if as_str else yaml_file
    assert yamllex.tokenize(filelike) == expected_tokens


def test_lazy_tokenize_closes_file(yaml_file, monkeypatch):
    opened = []
    real_open = open

    def recording_open(*args, **kwargs):
        stream = real_open(*args, **kwargs)
        opened.append(stream)
        return stream

    monkeypatch.setattr("builtins.open", recording_open)

    with yamllex.lazy_tokenize(yaml_file) as tokens:
        assert next(tokens) == expected_tokens[0]
        assert not opened[0].closed

    assert opened[0].closed
    assert opened[0].mode == "rb"


def test_lazy_tokenize_leaves_stream_open():
    stream = io.BytesIO(contents)
    with yamllex.lazy_tokenize(stream) as tokens:
        assert list(tokens) == expected_tokens
    assert not stream.closed


def test_lazy_tokenize_closes_file_on_error(tmp_path, monkeypatch):
    path = tmp_path / "bad.yaml"
    path.write_bytes(b"%YAML x")
    opened = []
    real_open = open

    def recording_open(*args, **kwargs):
        stream = real_open(*args, **kwargs)
        opened.append(stream)
        return stream

    monkeypatch.setattr("builtins.open", recording_open)

    with pytest.raises(yamllex.DirectiveError):
        yamllex.tokenize(path)
    assert opened[0].closed


def test_tokenize_lenient():
    with pytest.warns(yamllex.TokenizationWarning):
        tokens = yamllex.tokenize(b"%YAML x\n*", strict=False)
    assert tokens == [
        Token(TokenKind.SCALAR, "x"),
        Token(TokenKind.ALIAS, ""),
    ]


def test_text_stream_is_rejected():
    with pytest.raises(yamllex.WrongFileModeError):
        yamllex.tokenize(io.StringIO(contents.decode("ascii")))


def test_version():
    assert isinstance(yamllex.__version__, str)
