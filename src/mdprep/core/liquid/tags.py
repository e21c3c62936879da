"""Known liquid tags: cross-post safety and portable markdown/HTML conversions"""

import re
from dataclasses import dataclass
from typing import Callable, Optional


# {% name arg %}...{% endname %}; first closing marker wins. Tag names are ASCII word characters.
BLOCK_TAG_RE = re.compile(r'\{%\s*(\w+)\s*([^\r\n]*?)\s*%\}(.*?)\{%\s*end\1\s*%\}', re.DOTALL | re.ASCII)
INLINE_TAG_RE = re.compile(r'\{%\s*(\w+)\s*(.*?)\s*%\}', re.ASCII)

END_PREFIX = 'end'


@dataclass(frozen=True)
class TagDef:
    cross_post_safe: bool
    convert: Callable[[str, Optional[str]], str]


def _details(summary: str, content: Optional[str]) -> str:
    return f"<details>\n<summary>{summary}</summary>\n\n{content or ''}\n</details>"


def _katex(_arg: str, content: Optional[str]) -> str:
    return f"$$\n{content or ''}\n$$"


TAG_DEFS: dict[str, TagDef] = {
    'embed':       TagDef(False, lambda arg, _=None: arg),
    'link':        TagDef(False, lambda arg, _=None: f"[{arg}]({arg})"),
    'user':        TagDef(False, lambda arg, _=None: f"@{arg}"),
    'tag':         TagDef(False, lambda arg, _=None: f"#{arg}"),
    'github':      TagDef(False, lambda arg, _=None: f"[{arg}](https://github.com/{arg})"),
    'youtube':     TagDef(False, lambda arg, _=None: f"https://www.youtube.com/watch?v={arg}"),
    'twitter':     TagDef(False, lambda arg, _=None: f"https://twitter.com/i/status/{arg}"),
    'codepen':     TagDef(False, lambda arg, _=None: arg),
    'codesandbox': TagDef(False, lambda arg, _=None: f"https://codesandbox.io/s/{arg}"),
    'details':     TagDef(False, _details),
    'katex':       TagDef(False, _katex),
}


def is_cross_post_safe(tag: str) -> bool:
    """Unknown tags are never safe to cross-post."""
    tag_def = TAG_DEFS.get(tag.lower())
    return tag_def.cross_post_safe if tag_def else False


def is_end_tag(tag: str) -> bool:
    return tag.lower().startswith(END_PREFIX)
