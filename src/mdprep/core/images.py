"""Image reference extraction from markdown and inline HTML"""

import re
from typing import Optional

from mdprep.core.models import ImageReference
from mdprep.core.utils.urls import is_absolute_url


MD_IMAGE_RE = re.compile(r'!\[.*?\]\((.*?)\)')
HTML_IMAGE_RE = re.compile(r'<img[^>]+src=["\'](.*?)["\'][^>]*>', re.IGNORECASE)


def extract_image_urls(markdown: Optional[str]) -> list[ImageReference]:
    """Return every image URL by line: markdown images first, then <img> tags."""
    if not markdown:
        return []

    images: list[ImageReference] = []
    for line_number, line in enumerate(markdown.split('\n'), start=1):
        for pattern in (MD_IMAGE_RE, HTML_IMAGE_RE):
            for m in pattern.finditer(line):
                url = m.group(1).strip()
                images.append(ImageReference(url=url, line_number=line_number, is_absolute=is_absolute_url(url)))
    return images
