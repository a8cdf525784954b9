"""Pre-render pass that compacts image refs and archive-wrapped link targets"""

from artpub.core.errors import MalformedHref
from artpub.core.models import Paragraph


def strip_image_ref(image_ref: str, prefix: str) -> str:
    """'ImageMetadata:abc123' -> 'abc123'; refs without the prefix are unchanged."""
    if image_ref.startswith(prefix):
        return image_ref[len(prefix):]
    return image_ref


def unwrap_archive_href(href: str, prefix: str) -> str:
    """Collapse '<prefix><snapshot>/<target>' down to '<target>'.

    The snapshot segment (e.g. '20200101000000') is dropped along with the
    first '/' after it. Hrefs that do not start with prefix are unchanged.
    """
    if not href.startswith(prefix):
        return href
    rest = href[len(prefix):]
    sep = rest.find("/")
    if sep < 0:
        raise MalformedHref(f"archive href has no target after snapshot: {href!r}")
    return rest[sep + 1:]


def normalize_article(paragraphs: list[Paragraph], image_ref_prefix: str, archive_prefix: str) -> None:
    """Rewrite image refs and markup hrefs in place."""
    for paragraph in paragraphs:
        if paragraph.metadata is not None:
            paragraph.metadata.image_ref = strip_image_ref(paragraph.metadata.image_ref, image_ref_prefix)
        for markup in paragraph.markups:
            if markup.href is not None:
                markup.href = unwrap_archive_href(markup.href, archive_prefix)
