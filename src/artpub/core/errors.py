"""Error taxonomy for the parse -> normalize -> render pipeline"""


class ArtpubError(Exception):
    """Base class for every error that aborts a render run."""


class InputUnreadable(ArtpubError):
    """The input path does not exist or cannot be read."""


class MalformedInput(ArtpubError, ValueError):
    """The input does not match the paragraph record shape."""


class MalformedHref(MalformedInput):
    """An archive-wrapped href has no separator after the archive prefix."""


class MissingRequiredAssociation(ArtpubError):
    """An IMG paragraph without metadata, or an A markup without an href."""


class UnsupportedMarkupKind(ArtpubError):
    """A kind used where it cannot render: IMG as markup, A as a paragraph."""


class CrossingMarkup(ArtpubError):
    """Two markup ranges partially overlap (only raised in strict mode)."""
