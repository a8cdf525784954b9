"""Kind -> HTML tag pair mapping for paragraphs and inline markups"""

from artpub.core.errors import MissingRequiredAssociation, UnsupportedMarkupKind
from artpub.core.models import BlockKind, InlineKind, Kind, Markup, Paragraph


TagPair = tuple[str, str]

# Element names shared by the block and inline kinds.
ELEMENTS = {
    "P":    "p",
    "H3":   "h3",
    "H4":   "h4",
    "CODE": "code",
    "PRE":  "pre",
    "ULI":  "li",
    "BQ":   "blockquote",
}

LIST_OPEN = "<ul>"
LIST_CLOSE = "</ul>"


def element(name: str) -> TagPair:
    return f"<{name}>", f"</{name}>"


def block_kind(kind: Kind) -> BlockKind:
    """Narrow a wire kind to a paragraph kind; A cannot be a paragraph."""
    try:
        return BlockKind(kind.value)
    except ValueError:
        raise UnsupportedMarkupKind(f"{kind.value} cannot be used as a paragraph type") from None


def inline_kind(kind: Kind) -> InlineKind:
    """Narrow a wire kind to a markup kind; IMG cannot be a markup."""
    try:
        return InlineKind(kind.value)
    except ValueError:
        raise UnsupportedMarkupKind(f"{kind.value} cannot be used as a markup type") from None


def image_tags(src: str) -> TagPair:
    """Figure wrapper whose caption region holds the paragraph text."""
    return f'<figure><img src="{src}"><figcaption>', "</figcaption></figure>"


def link_tags(href: str) -> TagPair:
    return f'<a href="{href}">', "</a>"


def paragraph_tags(paragraph: Paragraph, image_base_url: str) -> TagPair:
    """Open/close pair wrapping the whole paragraph."""
    kind = block_kind(paragraph.type)
    if kind is BlockKind.IMG:
        if paragraph.metadata is None or not paragraph.metadata.image_ref:
            raise MissingRequiredAssociation("an image ref should be provided if the paragraph type is IMG")
        return image_tags(f"{image_base_url}{paragraph.metadata.image_ref}")
    return element(ELEMENTS[kind.value])


def markup_tags(markup: Markup) -> TagPair:
    """Open/close pair for one inline markup span."""
    kind = inline_kind(markup.type)
    if kind is InlineKind.A:
        if not markup.href:
            raise MissingRequiredAssociation("an href should be provided if the markup type is A")
        return link_tags(markup.href)
    return element(ELEMENTS[kind.value])
