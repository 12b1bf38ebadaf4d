"""Frontmatter validation against the Frontmatter schema"""

from typing import Any, Mapping, Union

from pydantic import ValidationError

from blogpub.config import DEFAULT_AUTHOR
from blogpub.core.errors import FieldIssue, FrontmatterValidationError
from blogpub.core.models import DocumentMeta, DocumentSource, Frontmatter


def _issues(error: ValidationError) -> list[FieldIssue]:
    """Flatten pydantic errors into one FieldIssue per violation, dotted field paths."""
    return [
        FieldIssue(".".join(str(p) for p in err["loc"]) or "frontmatter", err["msg"])
        for err in error.errors()
    ]


def validate_frontmatter(data: Any, default_author: str = DEFAULT_AUTHOR) -> Frontmatter:
    """Validate a raw frontmatter mapping; raise FrontmatterValidationError listing every issue.

    A missing (or null) author falls back to default_author. Pure: data is not modified.
    """
    if not isinstance(data, Mapping):
        raise FrontmatterValidationError(
            [FieldIssue("frontmatter", f"expected a mapping, got {type(data).__name__}")]
        )
    values = {k: v for k, v in data.items() if v is not None}
    values.setdefault("author", default_author)
    try:
        return Frontmatter.model_validate(values)
    except ValidationError as e:
        raise FrontmatterValidationError(_issues(e)) from e


def is_community(item: Union[Frontmatter, DocumentMeta]) -> bool:
    """True for synced YouTube community posts."""
    return item.source is DocumentSource.community


def is_markdown(item: Union[Frontmatter, DocumentMeta]) -> bool:
    """True for authored markdown articles."""
    return item.source is DocumentSource.markdown
