"""Article tag normalization"""

from typing import Any


def join_tags(tags: Any) -> str:
    """Collapse a tag list into a ', '-joined string; strings pass through unchanged."""
    if isinstance(tags, (list, tuple)):
        return ", ".join(str(t) for t in tags)
    if isinstance(tags, str):
        return tags
    return "" if tags is None else str(tags)


def tag_list(tags: str | list[str]) -> list[str]:
    """Split tags into a trimmed, lowercased list (comma-separated string or list)."""
    if isinstance(tags, (list, tuple)):
        return [str(t).strip().lower() for t in tags]
    return [t.strip().lower() for t in tags.split(",") if t.strip()]
