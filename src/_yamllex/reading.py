import pathlib
from contextlib import contextmanager

import _yamllex.tokenizer as yamltok


def tokenize(filelike, strict=True):
    """
    Tokenizes a yaml file and returns the list of tokens,
    ie. tokens = tokenize("/my/file.yaml")

    :param filelike: A path to a yaml file, a stream opened in binary mode,
        the bytes of a yaml file or a byte source function.
    :param strict: See YamlTokenizer.
    """
    with lazy_tokenize(filelike, strict=strict) as tokens:
        return list(tokens)


@contextmanager
def lazy_tokenize(filelike, strict=True):
    """
    Context manager giving an iterator of the tokens of a yaml file,
    which is read as the iterator is consumed. If given a path, the file
    is opened and closed by the context manager.

    >>> with lazy_tokenize("/my/file.yaml") as tokens:
    ...     first_token = next(tokens)

    """
    file_stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        file_stream = open(filelike, "rb")

    try:
        yield yamltok.YamlTokenizer(file_stream, strict=strict)
    finally:
        if did_open:
            file_stream.close()
