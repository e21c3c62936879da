"""Pre-submission article validation

Every check runs regardless of earlier failures so a caller sees the whole
report in one pass. Only error-severity issues make the result invalid.
"""

import logging
import re
from typing import Any, Mapping, Union

from pydantic import ValidationError

from mdprep.core.images import extract_image_urls
from mdprep.core.liquid.scan import detect_liquid_tags
from mdprep.core.merge import MISSING, front_matter_key, front_matter_value, values_differ
from mdprep.core.models import ArticleParams, IssueCode, Severity, ValidationIssue, ValidationResult
from mdprep.core.parse import parse_front_matter
from mdprep.core.substance import is_substantial_content
from mdprep.core.utils.tags import tag_list
from mdprep.core.utils.urls import is_absolute_url
from mdprep.core.utils.values import stringify


logger = logging.getLogger(__name__)

MAX_TAGS = 4
TAG_RE = re.compile(r'^[a-z0-9_]+$')
CONFLICT_FIELDS = ('title', 'tags', 'description', 'main_image')


def _error(code: IssueCode, message: str, line: int = None) -> ValidationIssue:
    return ValidationIssue(severity=Severity.error, code=code, message=message, line=line)


def _invalid_param(err: dict) -> ValidationIssue:
    field = ".".join(str(p) for p in err["loc"])
    return _error(IssueCode.invalid_request, f"Invalid parameter \"{field}\": {err['msg']}")


def _check_presence(params: ArticleParams) -> list[ValidationIssue]:
    if params.title or params.body_markdown:
        return []
    return [_error(IssueCode.validation_failed, "Article must have a title or body_markdown.")]


def _check_tags(params: ArticleParams) -> list[ValidationIssue]:
    if not params.tags:
        return []
    tags = tag_list(params.tags)
    issues = []
    if len(tags) > MAX_TAGS:
        issues.append(_error(
            IssueCode.validation_failed,
            f"Too many tags ({len(tags)}). Maximum is {MAX_TAGS}.",
        ))
    for tag in tags:
        if not TAG_RE.match(tag):
            issues.append(_error(
                IssueCode.validation_failed,
                f'Invalid tag "{tag}". Tags must be lowercase alphanumeric with underscores only.',
            ))
    return issues


def _check_images(params: ArticleParams) -> list[ValidationIssue]:
    issues = []
    if params.main_image and not is_absolute_url(params.main_image):
        issues.append(_error(
            IssueCode.image_not_absolute,
            f'Cover image URL must be absolute: "{params.main_image}"',
        ))
    for image in extract_image_urls(params.body_markdown):
        if not image.is_absolute:
            issues.append(_error(
                IssueCode.image_not_absolute,
                f'Image on line {image.line_number} uses non-absolute URL: "{image.url}"',
                line=image.line_number,
            ))
    return issues


def _check_front_matter(params: ArticleParams) -> list[ValidationIssue]:
    if not params.body_markdown:
        return []
    parsed = parse_front_matter(params.body_markdown)
    if not parsed.has_front_matter:
        return []

    explicit = params.explicit()
    issues = []
    for field in CONFLICT_FIELDS:
        if field not in explicit:
            continue
        value = explicit[field]
        fm_value = front_matter_value(parsed.extracted_values, field)
        if fm_value is MISSING or not values_differ(field, fm_value, value):
            continue
        issues.append(ValidationIssue(
            severity=Severity.warning,
            code=IssueCode.front_matter_conflict,
            message=(
                f'Front matter "{front_matter_key(field)}" value "{stringify(fm_value)}" conflicts '
                f'with parameter "{stringify(value)}". Parameter value will be used.'
            ),
        ))
    return issues


def _check_liquid_tags(params: ArticleParams) -> list[ValidationIssue]:
    issues = []
    for tag in detect_liquid_tags(params.body_markdown).tags:
        note = '' if tag.cross_post_safe else ' (not cross-post safe)'
        issues.append(ValidationIssue(
            severity=Severity.info,
            code=IssueCode.liquid_tag_detected,
            message=f"Liquid tag {{% {tag.tag} {tag.argument} %}} on line {tag.line_number}{note}",
            line=tag.line_number,
        ))
    return issues


def _check_content(params: ArticleParams) -> list[ValidationIssue]:
    if not params.body_markdown or is_substantial_content(params.body_markdown):
        return []
    return [ValidationIssue(
        severity=Severity.warning,
        code=IssueCode.validation_failed,
        message="Article body appears to lack substantial content.",
    )]


CHECKS = (
    _check_presence,
    _check_tags,
    _check_images,
    _check_front_matter,
    _check_liquid_tags,
    _check_content,
)


def validate_article(params: Union[ArticleParams, Mapping[str, Any]]) -> ValidationResult:
    """Run every article check and collect the issues in check order."""
    if not isinstance(params, ArticleParams):
        try:
            params = ArticleParams.model_validate(dict(params))
        except ValidationError as e:
            return ValidationResult(issues=[_invalid_param(err) for err in e.errors()])
    issues = [issue for check in CHECKS for issue in check(params)]
    result = ValidationResult(issues=issues)
    logger.debug(
        "Validated article: %d error(s), %d warning(s), %d info",
        len(result.errors), len(result.warnings), len(result.infos),
    )
    return result
