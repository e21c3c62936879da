"""Pipeline step functions: cross-post preparation and per-file orchestration"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from mdprep.core.liquid.scan import detect_liquid_tags
from mdprep.core.liquid.strip import strip_liquid_tags
from mdprep.core.merge import merge_and_normalize
from mdprep.core.models import CrosspostResult, MergeResult, ValidationResult
from mdprep.core.parse import discover_files
from mdprep.core.validate import validate_article


logger = logging.getLogger(__name__)


def prepare_crosspost(body: str, canonical_url: str, strip_tags: bool = True) -> CrosspostResult:
    """Convert liquid tags for another platform and attach the canonical URL.

    The tag report always describes the body as given, before conversion.
    """
    report = detect_liquid_tags(body)
    processed = strip_liquid_tags(body) if strip_tags else (body or '')
    return CrosspostResult(body=processed, canonical_url=canonical_url, liquid_tag_report=report)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e


def validate_file(path: Path, params: Optional[Mapping[str, Any]] = None) -> ValidationResult:
    """Validate a markdown file as the body of an article with the given params."""
    data = dict(params or {})
    data['body_markdown'] = _read(path)
    return validate_article(data)


def normalize_file(path: Path, params: Optional[Mapping[str, Any]] = None) -> MergeResult:
    """Strip a file's front matter and merge it under the explicit params."""
    return merge_and_normalize(_read(path), dict(params or {}))


def prepare_file(path: Path, canonical_url: str, strip_tags: bool = True) -> CrosspostResult:
    return prepare_crosspost(_read(path), canonical_url, strip_tags)


def run_validate(
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    ) -> list[tuple[Path, ValidationResult]]:
    """Validate every .md/.mdx file under path. Returns (file, result) pairs in sorted order."""
    results = []
    for p in discover_files(Path(path)):
        result = validate_file(p, params)
        logger.info("%s: %s", p, "valid" if result.valid else "invalid")
        results.append((p, result))
    return results
