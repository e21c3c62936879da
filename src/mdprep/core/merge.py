"""Front matter / explicit parameter reconciliation

Explicit parameters always win over values embedded in the body's front
matter. The publishing platform applies the opposite precedence, so a body
that still carries front matter would otherwise silently override an update.
Stripping the block and merging here keeps the explicit value authoritative
and reports every disagreement as a Conflict.
"""

import logging
from typing import Any, Mapping, Optional

from mdprep.core.models import Conflict, MergeResult
from mdprep.core.parse import parse_front_matter
from mdprep.core.utils.tags import join_tags
from mdprep.core.utils.values import is_scalar, stringify


logger = logging.getLogger(__name__)

# front matter key -> parameter name
KNOWN_FIELDS: dict[str, str] = {
    'title':         'title',
    'published':     'published',
    'description':   'description',
    'tags':          'tags',
    'series':        'series',
    'canonical_url': 'canonical_url',
    'cover_image':   'main_image',
}

MISSING = object()


def front_matter_key(field: str) -> str:
    """Front matter key holding the value for a parameter field."""
    return 'cover_image' if field == 'main_image' else field


def front_matter_value(values: Mapping[str, Any], field: str) -> Any:
    """Look up the front matter value for a parameter field, or MISSING.

    Only `tags` may carry a list; non-scalar values for other fields are ignored.
    """
    value = values.get(front_matter_key(field), MISSING)
    if value is MISSING:
        value = values.get(field, MISSING)
    if value is MISSING or field == 'tags' or is_scalar(value):
        return value
    return MISSING


def values_differ(field: str, fm_value: Any, value: Any) -> bool:
    """Compare by string form, collapsing tag lists on both sides for `tags`."""
    if field == 'tags':
        return join_tags(fm_value) != join_tags(value)
    return stringify(fm_value) != stringify(value)


def _seed(values: Mapping[str, Any]) -> dict[str, Any]:
    """Build the working parameter map from recognized front matter keys."""
    seeded: dict[str, Any] = {}
    for key, field in KNOWN_FIELDS.items():
        if key not in values:
            continue
        value = values[key]
        if field == 'tags':
            seeded[field] = join_tags(value)
        elif is_scalar(value):
            seeded[field] = value
    return seeded


def merge_and_normalize(body: Optional[str], params: Mapping[str, Any]) -> MergeResult:
    """Strip front matter from body and merge its values under the explicit params.

    A key missing from params is "absent" and never touches the front matter
    value; a key mapped to None is an explicit null and overwrites it.
    """
    if not body:
        return MergeResult(body='', params=dict(params))

    parsed = parse_front_matter(body)
    if not parsed.has_front_matter:
        return MergeResult(body=parsed.clean_body, params=dict(params))

    values = parsed.extracted_values
    merged = _seed(values)
    conflicts: list[Conflict] = []

    for field, value in params.items():
        fm_value = front_matter_value(values, field)
        if fm_value is not MISSING:
            fm_norm = join_tags(fm_value) if field == 'tags' else fm_value
            json_norm = join_tags(value) if field == 'tags' else value
            if values_differ(field, fm_norm, json_norm):
                logger.debug("Front matter value for %r overridden by explicit parameter", field)
                conflicts.append(Conflict(field=field, front_matter_value=fm_norm, json_value=json_norm))
        merged[field] = value

    return MergeResult(body=parsed.clean_body, params=merged, conflicts=conflicts)
