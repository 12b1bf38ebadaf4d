"""Content data models: validated frontmatter, TOC structures, and processed documents"""

from datetime import date
from enum import Enum
from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from blogpub.config import DEFAULT_AUTHOR
from blogpub.core.utils.dates import parse_date


class CamelModel(BaseModel):
    """snake_case attributes, camelCase keys in frontmatter input and JSON output."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Status(str, Enum):
    draft = "draft"
    published = "published"


class DocumentSource(str, Enum):
    """Where a document came from: authored markdown or a synced YouTube community post"""
    markdown = "markdown"
    community = "community"


class Frontmatter(CamelModel):
    """Validated, defaulted document metadata."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title:           str = Field(min_length=1, max_length=200)
    description:     str = Field(min_length=1, max_length=500)
    published_at:    date
    tags:            list[str] = Field(min_length=1, max_length=10)
    updated_at:      Optional[date] = None
    author:          str = DEFAULT_AUTHOR
    category:        Optional[str] = None
    featured:        bool = False
    status:          Status = Status.draft     # undeclared documents stay unpublished
    hero_image:      Optional[str] = None
    video_id:        Optional[str] = None
    related_posts:   Optional[list[str]] = None
    youtube_post_id: Optional[str] = None
    youtube_url:     Optional[str] = None

    @field_validator("published_at", "updated_at", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return None if value is None else parse_date(value)

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, tags: list[str]) -> list[str]:
        if any(not t.strip() for t in tags):
            raise ValueError("tags must be non-empty strings")
        dupes = sorted({t for t in tags if tags.count(t) > 1})
        if dupes:
            raise ValueError(f"duplicate tags: {', '.join(dupes)}")
        return tags

    @field_validator("youtube_url")
    @classmethod
    def _check_url(cls, url: Optional[str]) -> Optional[str]:
        if url is None:
            return url
        parts = urlparse(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return url

    @property
    def source(self) -> DocumentSource:
        return DocumentSource.community if self.youtube_post_id else DocumentSource.markdown


class TocHeading(CamelModel):
    """A TOC entry; id is unique within its document."""
    id:    str
    text:  str
    level: Literal[2, 3, 4]


class TocTree(CamelModel):
    heading:  TocHeading
    children: list["TocTree"] = Field(default_factory=list)


class ReadingTime(CamelModel):
    minutes: int = Field(ge=1)
    text:    str
    words:   int = Field(ge=0)


class DocumentMeta(CamelModel):
    """Listing-weight document: no HTML, headings, or TOC."""
    slug:         str
    frontmatter:  Frontmatter
    excerpt:      str
    reading_time: ReadingTime

    @computed_field
    @property
    def source(self) -> DocumentSource:
        return self.frontmatter.source


class ProcessedDocument(DocumentMeta):
    """Fully rendered document for detail pages."""
    html:     str
    headings: list[TocHeading] = Field(default_factory=list)
    toc_tree: list[TocTree] = Field(default_factory=list)

    def to_meta(self) -> DocumentMeta:
        return DocumentMeta(
            slug=self.slug,
            frontmatter=self.frontmatter,
            excerpt=self.excerpt,
            reading_time=self.reading_time,
        )


class QueryOptions(BaseModel):
    """Listing filters; status None means published-only (plus drafts outside production)."""
    status:   Optional[Literal["draft", "published", "all"]] = None
    tag:      Optional[str] = None
    category: Optional[str] = None
    featured: Optional[bool] = None
    source:   Optional[DocumentSource] = None
    offset:   int = Field(default=0, ge=0)
    limit:    Optional[int] = Field(default=None, ge=0)


class Adjacent(CamelModel):
    """Neighbours of a document in the listing order (prev is newer, next is older)."""
    prev: Optional[DocumentMeta] = None
    next: Optional[DocumentMeta] = None
