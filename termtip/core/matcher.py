"""
TermTip Matcher
Greedy longest-match segmentation of text into plain and term segments
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union

from .dictionary import TermDictionary
from .segmenter import word_atoms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainSegment:
    """Unannotated span of the input"""
    text: str
    kind: str = field(default="plain", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class TermSegment:
    """Span of the input that matched a glossary term"""
    text: str
    definition: str
    key: str = ""
    kind: str = field(default="term", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "definition": self.definition,
            "key": self.key,
        }


Segment = Union[PlainSegment, TermSegment]


def reconstruct(segments: Iterable[Segment]) -> str:
    """Join segment texts back into the original string"""
    return "".join(segment.text for segment in segments)


class Matcher:
    """
    Segments text against a fixed TermDictionary
    """

    def __init__(self, dictionary: TermDictionary):
        self.dictionary = dictionary

    def segment(self, text: str) -> List[Segment]:
        """
        Split text into plain and term segments

        Phrases are matched on whole words only, case-insensitively, with
        exactly one space between words. At each word the longest
        matching phrase wins. Text between terms is merged into a single
        plain segment.

        Args:
            text: Input text

        Returns:
            Segments whose texts concatenate to the input
        """
        segments: List[Segment] = []
        words = word_atoms(text)
        max_length = self.dictionary.max_phrase_length()
        emitted = 0  # offset of the first character not yet emitted
        i = 0

        while i < len(words):
            # How many words from i can form one phrase (single-space gaps)
            reach = 1
            while (reach < max_length and i + reach < len(words)
                   and text[words[i + reach - 1].end:words[i + reach].start] == " "):
                reach += 1

            matched = 0
            for width in range(min(reach, max_length), 0, -1):
                key = " ".join(atom.text.lower() for atom in words[i:i + width])
                definition = self.dictionary.lookup(key)
                if definition is not None:
                    start, end = words[i].start, words[i + width - 1].end
                    if start > emitted:
                        segments.append(PlainSegment(text[emitted:start]))
                    segments.append(TermSegment(text[start:end], definition, key))
                    emitted = end
                    matched = width
                    break

            i += matched or 1

        if emitted < len(text):
            segments.append(PlainSegment(text[emitted:]))

        logger.debug(f"Segmented {len(text)} chars into {len(segments)} segments")
        return segments

    def find_terms(self, text: str) -> List[TermSegment]:
        """Return only the term segments of text, in order"""
        return [segment for segment in self.segment(text) if isinstance(segment, TermSegment)]


def segment(text: str, dictionary: TermDictionary) -> List[Segment]:
    """Segment text against dictionary"""
    return Matcher(dictionary).segment(text)
