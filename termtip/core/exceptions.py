"""
TermTip Exceptions
Errors and warnings raised by the glossary layer
"""


class TermTipError(Exception):
    """Base class for termtip errors"""


class GlossaryLoadError(TermTipError):
    """A glossary source could not be read or parsed"""


class DuplicateTermWarning(UserWarning):
    """
    Two raw terms normalized to the same dictionary key.

    Reported while a dictionary is built; the later definition wins.
    """

    def __init__(self, key: str, previous: str, replacement: str, raw_term: str = ""):
        self.key = key
        self.previous = previous
        self.replacement = replacement
        self.raw_term = raw_term or key
        super().__init__(
            f"Duplicate glossary term {self.raw_term!r} (key {key!r}): "
            f"replacing earlier definition"
        )
