from .dictionary import TermDictionary, normalize_term
from .exceptions import DuplicateTermWarning, GlossaryLoadError, TermTipError
from .matcher import Matcher, PlainSegment, Segment, TermSegment, reconstruct, segment
from .segmenter import Atom, tokenize, word_atoms
