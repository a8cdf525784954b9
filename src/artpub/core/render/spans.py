"""Span resolution: turn a paragraph's markup ranges into nested inline HTML

Markups are expected to be properly nested or disjoint. Tags are ordered by
offset only, with ties kept in the order the markups were listed, so crossing
ranges (or ranges sharing an offset listed in the wrong order) produce
non-nested output. Pass strict=True to reject any plan that would not nest.
"""

from enum import Enum
from typing import NamedTuple

from artpub.core.errors import CrossingMarkup
from artpub.core.models import Markup, Paragraph
from artpub.core.render.tags import markup_tags, paragraph_tags


class Role(str, Enum):
    OPEN  = "open"
    CLOSE = "close"


class Insertion(NamedTuple):
    offset: int     # codepoint offset into the paragraph text
    tag:    str
    role:   Role
    owner:  int     # index of the markup this tag belongs to


def check_nesting(plan: list[Insertion], markups: list[Markup]) -> None:
    """Raise CrossingMarkup if a close tag in plan does not match the innermost open tag."""
    stack: list[int] = []
    for ins in plan:
        if ins.role is Role.OPEN:
            stack.append(ins.owner)
            continue
        inner = stack.pop()
        if inner != ins.owner:
            a, b = markups[inner], markups[ins.owner]
            raise CrossingMarkup(
                f"markup [{a.start}, {a.end}) crosses markup [{b.start}, {b.end})"
            )


def insertion_plan(markups: list[Markup]) -> list[Insertion]:
    """One open and one close insertion per markup, sorted by offset (stable)."""
    plan = []
    for i, markup in enumerate(markups):
        open_tag, close_tag = markup_tags(markup)
        plan.append(Insertion(markup.start, open_tag, Role.OPEN, i))
        plan.append(Insertion(markup.end, close_tag, Role.CLOSE, i))
    plan.sort(key=lambda ins: ins.offset)
    return plan


def apply_insertions(text: str, plan: list[Insertion]) -> str:
    """Insert tags from the highest offset down so lower offsets stay valid."""
    buf = text
    for ins in reversed(plan):
        buf = buf[:ins.offset] + ins.tag + buf[ins.offset:]
    return buf


def render_paragraph(paragraph: Paragraph, image_base_url: str, strict: bool = False) -> str:
    """Render one paragraph to a single HTML fragment."""
    open_tag, close_tag = paragraph_tags(paragraph, image_base_url)
    if not paragraph.markups:
        return f"{open_tag}{paragraph.text}{close_tag}"

    plan = insertion_plan(paragraph.markups)
    if strict:
        check_nesting(plan, paragraph.markups)
    body = apply_insertions(paragraph.text, plan)
    return f"{open_tag}{body}{close_tag}"
