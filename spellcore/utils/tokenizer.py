"""
Lossless tokenization of text into word and non-word runs.
"""
from dataclasses import dataclass
from itertools import groupby
from typing import List


@dataclass(frozen=True)
class Token:
    """A maximal run of alphabetic or non-alphabetic characters."""

    text: str
    start: int
    is_word: bool

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def tokenize(text: str) -> List[Token]:
    """
    Split text into alternating word and non-word tokens.

    A word is a run of characters for which str.isalpha() holds, so letters of
    any script count (č, ß, й) while digits, apostrophes and hyphens split words.
    Concatenating the token texts in order reproduces the input exactly.

    Args:
        text: Text to tokenize

    Returns:
        Tokens in original order, with original casing and offsets

    Example:
        >>> [t.text for t in tokenize("Hi, there")]
        ['Hi', ', ', 'there']
    """
    tokens: List[Token] = []
    position = 0
    for is_word, chars in groupby(text, key=str.isalpha):
        chunk = "".join(chars)
        tokens.append(Token(text=chunk, start=position, is_word=is_word))
        position += len(chunk)
    return tokens
