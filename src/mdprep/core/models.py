"""Value models for front matter, liquid tags, images, and validation reports"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from mdprep.core.utils.values import stringify


class Severity(str, Enum):
    """How strongly a validation issue blocks a write."""
    error = "error"
    warning = "warning"
    info = "info"


class IssueCode(str, Enum):
    validation_failed = "validation_failed"
    front_matter_conflict = "front_matter_conflict"
    liquid_tag_detected = "liquid_tag_detected"
    image_not_absolute = "image_not_absolute"
    invalid_request = "invalid_request"
    api_error = "api_error"


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


class FrontMatterResult(_Value):
    """Body with the leading metadata block removed, plus the parsed values."""
    clean_body: str
    extracted_values: dict[str, Any] = Field(default_factory=dict)

    @computed_field
    @property
    def has_front_matter(self) -> bool:
        return bool(self.extracted_values)


class Conflict(_Value):
    field: str
    front_matter_value: Any
    json_value: Any


class MergeResult(_Value):
    body: str
    params: dict[str, Any] = Field(default_factory=dict)
    conflicts: list[Conflict] = Field(default_factory=list)


class LiquidTagMatch(_Value):
    tag: str                        # lowercased tag name
    argument: str = ""              # trimmed
    full_match: str = ""
    line_number: int = 1            # 1-based
    cross_post_safe: bool = False
    has_end_tag: bool = False


class LiquidTagReport(_Value):
    tags: list[LiquidTagMatch] = Field(default_factory=list)

    @computed_field
    @property
    def has_cross_post_unsafe(self) -> bool:
        return any(not t.cross_post_safe for t in self.tags)


class ImageReference(_Value):
    url: str
    line_number: int
    is_absolute: bool


class ValidationIssue(_Value):
    severity: Severity
    code: IssueCode
    message: str
    line: Optional[int] = None


class ValidationResult(_Value):
    """Ordered issue report; valid iff no issue has error severity."""
    issues: list[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.error]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.warning]

    @property
    def infos(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.info]


class CrosspostResult(_Value):
    body: str
    canonical_url: str
    liquid_tag_report: LiquidTagReport


class ArticleParams(BaseModel):
    """Explicit article parameters; unset fields stay distinct from explicit nulls."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    title:           Optional[str] = None
    body_markdown:   Optional[str] = None
    tags:            Optional[Union[str, list[str]]] = None
    main_image:      Optional[str] = None
    canonical_url:   Optional[str] = None
    description:     Optional[str] = None
    published:       Optional[bool] = None
    series:          Optional[str] = None
    organization_id: Optional[int] = None

    def explicit(self) -> dict[str, Any]:
        """Return only the fields the caller actually set, in declaration order."""
        return self.model_dump(exclude_unset=True)

    @field_validator('title', 'body_markdown', 'main_image', 'canonical_url', 'description', 'series', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        return v if v is None or isinstance(v, str) else stringify(v)

    @field_validator('tags', mode='before')
    @classmethod
    def coerce_tags(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [stringify(t) for t in v]
        return v if v is None or isinstance(v, str) else stringify(v)
