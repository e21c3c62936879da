"""URL classification"""

import re


ABSOLUTE_URL_RE = re.compile(r'^https?://', re.IGNORECASE)


def is_absolute_url(url: str | None) -> bool:
    """True iff url starts with an http:// or https:// scheme."""
    return bool(url) and ABSOLUTE_URL_RE.match(url) is not None
