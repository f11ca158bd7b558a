"""
TermTip Segmenter
Splits text into alternating word and non-word atoms
"""

import re
from typing import Iterator, List, NamedTuple

# Letters and digits, joined by a single apostrophe or hyphen when one sits
# between two of them ("don't", "a-line", "trompe-l'œil").
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")


class Atom(NamedTuple):
    """A maximal run of word or non-word characters"""
    text: str
    is_word: bool
    start: int
    end: int


def tokenize(text: str) -> Iterator[Atom]:
    """
    Tokenize text into atoms

    Concatenating the text of every atom yields the input unchanged.
    Word and non-word atoms alternate and none is empty.

    Args:
        text: Input text

    Yields:
        Atoms in order of appearance
    """
    position = 0
    for match in WORD_PATTERN.finditer(text):
        start, end = match.span()
        if start > position:
            yield Atom(text[position:start], False, position, start)
        yield Atom(match.group(0), True, start, end)
        position = end

    if position < len(text):
        yield Atom(text[position:], False, position, len(text))


def word_atoms(text: str) -> List[Atom]:
    """Return only the word atoms of text"""
    return [atom for atom in tokenize(text) if atom.is_word]
