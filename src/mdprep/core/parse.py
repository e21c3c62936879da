"""File discovery and YAML front matter extraction"""

import logging
import re
from pathlib import Path
from typing import Any, Optional

import yaml

from mdprep.core.models import FrontMatterResult


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|$)', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}

BOOL_TAG = 'tag:yaml.org,2002:bool'


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that only reads true/false as booleans; yes/no/on/off stay strings."""


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_implicit_resolver(
    BOOL_TAG, re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'), list('tTfF'),
)


def _load_block(block: str) -> Optional[dict[str, Any]]:
    """Parse a front matter block into a mapping; None if it is not a usable mapping."""
    try:
        data = yaml.load(block, Loader=FrontMatterLoader) if block.strip() else {}
    except (yaml.YAMLError, ValueError) as e:
        # impossible timestamps such as 2024-02-30 raise a plain ValueError
        logger.debug("Ignoring unparseable front matter: %s", e)
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring front matter of type %s", type(data).__name__)
        return None
    return {str(k): v for k, v in data.items()}


def parse_front_matter(body: Optional[str]) -> FrontMatterResult:
    """Return the body with its leading front matter block removed, plus the parsed values.

    Anything that is not a well-formed leading block of YAML key/value pairs is
    reported as "no front matter" with the body returned untouched.
    """
    if not body or not body.strip():
        return FrontMatterResult(clean_body=body or '')

    m = FRONTMATTER_RE.match(body)
    if not m:
        return FrontMatterResult(clean_body=body)

    values = _load_block(m.group(1) or '')
    if values is None:
        return FrontMatterResult(clean_body=body)
    return FrontMatterResult(clean_body=body[m.end():], extracted_values=values)


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)
