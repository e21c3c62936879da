"""Liquid tag conversion to portable markdown/HTML equivalents"""

import logging
from typing import Optional

from mdprep.core.liquid.tags import BLOCK_TAG_RE, INLINE_TAG_RE, TAG_DEFS, is_end_tag
from mdprep.core.models import LiquidTagMatch
from mdprep.core.utils.fences import fence_ranges, in_ranges


logger = logging.getLogger(__name__)


def convert_liquid_tag(match: LiquidTagMatch, content: Optional[str] = None) -> str:
    """Return the closest standard equivalent of a tag; unknown tags reduce to their argument."""
    tag_def = TAG_DEFS.get(match.tag)
    if tag_def is None:
        return match.argument or ''
    return tag_def.convert(match.argument, content)


def _replace_blocks(text: str) -> str:
    fences = fence_ranges(text)

    def _sub(m) -> str:
        if in_ranges(m.start(), fences):
            return m.group(0)
        name, argument, content = m.group(1).lower(), m.group(2).strip(), m.group(3).strip()
        tag_def = TAG_DEFS.get(name)
        if tag_def is None:
            return content or argument
        return tag_def.convert(argument, content)

    return BLOCK_TAG_RE.sub(_sub, text)


def _replace_inline(text: str) -> str:
    fences = fence_ranges(text)

    def _sub(m) -> str:
        if is_end_tag(m.group(1)) or in_ranges(m.start(), fences):
            return m.group(0)
        tag_def = TAG_DEFS.get(m.group(1).lower())
        argument = m.group(2).strip()
        if tag_def is None:
            return argument
        return tag_def.convert(argument, None)

    return INLINE_TAG_RE.sub(_sub, text)


def strip_liquid_tags(markdown: Optional[str]) -> str:
    """Replace every liquid tag outside fenced code with its converted form.

    Block tags are substituted first (their content is not rescanned), then
    inline tags. Fence regions are recomputed on the text each pass works on.
    """
    if not markdown:
        return ''
    result = _replace_inline(_replace_blocks(markdown))
    if result != markdown:
        logger.debug("Converted liquid tags (%d -> %d chars)", len(markdown), len(result))
    return result
