"""Prose density heuristic for article bodies"""

import re
from typing import Optional


MIN_WORDS = 10

# Applied in order; each entry is (pattern, replacement).
_STRIP_STEPS: list[tuple[re.Pattern, str]] = [
    (re.compile(r'```.*?```', re.DOTALL), ''),     # fenced code
    (re.compile(r'`[^`]+`'), ''),                  # inline code
    (re.compile(r'!\[.*?\]\(.*?\)'), ''),          # images
    (re.compile(r'\[([^\]]*)\]\(.*?\)'), r'\1'),   # links -> label
    (re.compile(r'<[^>]+>'), ''),                  # html tags
    (re.compile(r'[#*_~>-]'), ''),                 # markdown punctuation
]


def word_count(markdown: Optional[str]) -> int:
    """Count prose words left after code, images, link targets, HTML, and markup are removed."""
    if not markdown or not markdown.strip():
        return 0
    text = markdown
    for pattern, repl in _STRIP_STEPS:
        text = pattern.sub(repl, text)
    return len(text.split())


def is_substantial_content(markdown: Optional[str]) -> bool:
    """True iff the body carries at least MIN_WORDS words of prose."""
    return word_count(markdown) >= MIN_WORDS
