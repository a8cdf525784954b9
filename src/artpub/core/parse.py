"""Input reading and validation of article JSON into Paragraph models"""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from artpub.core.errors import InputUnreadable, MalformedInput
from artpub.core.models import Paragraph


_ARTICLE = TypeAdapter(list[Paragraph])


def parse_article(raw: str) -> list[Paragraph]:
    """Validate a JSON array of paragraph records; any shape error is MalformedInput."""
    try:
        return _ARTICLE.validate_json(raw)
    except ValidationError as e:
        raise MalformedInput(f"Invalid article JSON: {e}") from e


def read_article(path: Path) -> list[Paragraph]:
    """Read and parse the article file at path."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadable(f"error reading file {path}: {e}") from e
    return parse_article(raw)
