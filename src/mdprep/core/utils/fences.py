"""Fenced code block regions as character offset ranges"""

FENCE_MARKER = "```"


def fence_ranges(text: str) -> list[tuple[int, int]]:
    """Return half-open (start, end) offsets of fenced regions in text.

    A line whose stripped content starts with ``` toggles the fenced state.
    A fence still open at the end of text extends to len(text).
    """
    ranges: list[tuple[int, int]] = []
    offset = 0
    start = None

    for line in text.split("\n"):
        if line.strip().startswith(FENCE_MARKER):
            if start is None:
                start = offset
            else:
                ranges.append((start, offset + len(line)))
                start = None
        offset += len(line) + 1

    if start is not None:
        ranges.append((start, len(text)))
    return ranges


def in_ranges(offset: int, ranges: list[tuple[int, int]]) -> bool:
    """True if offset falls inside any half-open range."""
    return any(start <= offset < end for start, end in ranges)
