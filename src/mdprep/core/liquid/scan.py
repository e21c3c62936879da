"""Liquid tag detection with code fence and block/inline awareness"""

from typing import Optional

from mdprep.core.liquid.tags import BLOCK_TAG_RE, INLINE_TAG_RE, is_cross_post_safe, is_end_tag
from mdprep.core.models import LiquidTagMatch, LiquidTagReport
from mdprep.core.utils.fences import fence_ranges, in_ranges


def _line_number(text: str, offset: int) -> int:
    """1-based line of the character at offset."""
    return text.count('\n', 0, offset) + 1


def _to_match(text: str, m, has_end_tag: bool) -> LiquidTagMatch:
    tag = m.group(1).lower()
    return LiquidTagMatch(
        tag=tag,
        argument=m.group(2).strip(),
        full_match=m.group(0),
        line_number=_line_number(text, m.start()),
        cross_post_safe=is_cross_post_safe(tag),
        has_end_tag=has_end_tag,
    )


def detect_liquid_tags(markdown: Optional[str]) -> LiquidTagReport:
    """Find all liquid tags outside fenced code, sorted by line.

    Block tags ({% x %}...{% endx %}) are reported once with has_end_tag set;
    inline occurrences inside a block span and stray end markers are skipped.
    """
    if not markdown:
        return LiquidTagReport()

    fences = fence_ranges(markdown)
    tags: list[LiquidTagMatch] = []
    spans: list[tuple[int, int]] = []

    for m in BLOCK_TAG_RE.finditer(markdown):
        if in_ranges(m.start(), fences):
            continue
        spans.append(m.span())
        tags.append(_to_match(markdown, m, has_end_tag=True))

    for m in INLINE_TAG_RE.finditer(markdown):
        if in_ranges(m.start(), fences) or is_end_tag(m.group(1)):
            continue
        if in_ranges(m.start(), spans):
            continue
        tags.append(_to_match(markdown, m, has_end_tag=False))

    tags.sort(key=lambda t: t.line_number)
    return LiquidTagReport(tags=tags)
