"""Pipeline step functions: read, normalize, render, and assemble"""

from pathlib import Path

from artpub.config import Settings
from artpub.core.assemble import assemble_body, group_lists, render_page
from artpub.core.models import Fragment, Paragraph
from artpub.core.normalize import normalize_article
from artpub.core.parse import read_article
from artpub.core.render.spans import render_paragraph
from artpub.core.render.tags import block_kind


def render_fragments(paragraphs: list[Paragraph], settings: Settings) -> list[Fragment]:
    """Render each paragraph independently, tagged with its block kind."""
    return [
        Fragment(
            kind=block_kind(p.type),
            html=render_paragraph(p, settings.image_base_url, strict=settings.strict_nesting),
        )
        for p in paragraphs
    ]


def run_body(paragraphs: list[Paragraph], settings: Settings) -> str:
    """Normalize in place, render, and fold list items into the document body."""
    normalize_article(paragraphs, settings.image_ref_prefix, settings.archive_prefix)
    return assemble_body(group_lists(render_fragments(paragraphs, settings)))


def run_render(path: Path, settings: Settings, body_only: bool = False) -> str:
    """Read path and return the full HTML page (or just the body)."""
    body = run_body(read_article(path), settings)
    if body_only:
        return body
    return render_page(body, settings.title)
