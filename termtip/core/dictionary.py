"""
TermTip Term Dictionary
Immutable mapping from normalized glossary keys to definitions
"""

import re
import logging
import warnings
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .exceptions import DuplicateTermWarning
from .segmenter import tokenize

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

TermEntries = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def normalize_term(raw_term: str) -> str:
    """Lowercase, collapse whitespace runs to one space and trim"""
    return _WHITESPACE.sub(" ", raw_term.lower()).strip()


def _phrase_length(term: str) -> int:
    """
    Count the word atoms of a term that the matcher can reach

    Counted on the term before lowercasing, the same casing the matcher
    tokenizes; lowercasing can add combining marks ('İ' -> 'i̇'). Returns 0
    when the term holds anything other than words separated by whitespace,
    since such a term never lines up with a run of word atoms.
    """
    words = 0
    for atom in tokenize(term):
        if atom.is_word:
            words += 1
        elif not atom.text.isspace():
            return 0
    return words


class TermDictionary:
    """
    Read-only glossary keyed by normalized term

    Build instances with TermDictionary.build(); the mapping is never
    changed afterwards, so one instance can be shared across threads.
    """

    def __init__(self,
                 terms: Dict[str, str],
                 duplicates: Optional[List[DuplicateTermWarning]] = None,
                 phrase_lengths: Optional[Dict[str, int]] = None):
        self._terms = MappingProxyType(dict(terms))
        self.duplicates: Tuple[DuplicateTermWarning, ...] = tuple(duplicates or ())
        self._max_phrase_length = 0

        phrase_lengths = phrase_lengths or {}
        for key in self._terms:
            length = phrase_lengths[key] if key in phrase_lengths else _phrase_length(key)
            if length == 0:
                logger.debug(f"Term {key!r} contains punctuation between words and will not be matched in text")
            self._max_phrase_length = max(self._max_phrase_length, length)

    @classmethod
    def build(cls, entries: TermEntries) -> "TermDictionary":
        """
        Build a dictionary from raw terms

        Args:
            entries: Mapping or sequence of (raw_term, definition) pairs

        Returns:
            New TermDictionary. Terms colliding after normalization are
            reported as DuplicateTermWarning and the later one wins.
        """
        if isinstance(entries, Mapping):
            entries = entries.items()

        terms: Dict[str, str] = {}
        duplicates: List[DuplicateTermWarning] = []
        phrase_lengths: Dict[str, int] = {}

        for raw_term, definition in entries:
            key = normalize_term(raw_term)
            if not key:
                logger.warning(f"Skipping blank glossary term {raw_term!r}")
                continue

            if key in terms:
                duplicate = DuplicateTermWarning(key, terms[key], definition, raw_term)
                logger.warning(str(duplicate))
                warnings.warn(duplicate, stacklevel=2)
                duplicates.append(duplicate)

            terms[key] = definition
            phrase_lengths[key] = _phrase_length(_WHITESPACE.sub(" ", raw_term).strip())

        return cls(terms, duplicates, phrase_lengths)

    def lookup(self, key: str) -> Optional[str]:
        """Exact lookup of an already normalized key"""
        return self._terms.get(key)

    def max_phrase_length(self) -> int:
        """Largest number of word atoms in any matchable key"""
        return self._max_phrase_length

    def items(self):
        return self._terms.items()

    def __contains__(self, key: object) -> bool:
        return key in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"TermDictionary({len(self)} terms, max_phrase_length={self._max_phrase_length})"
