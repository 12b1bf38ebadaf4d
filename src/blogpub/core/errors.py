"""Typed content errors and the Result wrapper returned by public operations"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to page-rendering callers"""
    validation = "validation"
    parse = "parse"
    not_found = "not_found"
    unexpected = "unexpected"


@dataclass(frozen=True)
class FieldIssue:
    """One violated frontmatter field and the reason."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ContentError(Exception):
    """Base class for every error the content pipeline reports."""
    kind: ErrorKind = ErrorKind.unexpected

    @property
    def message(self) -> str:
        return str(self)


class FrontmatterValidationError(ContentError):
    """Frontmatter failed the schema; carries one issue per violated field."""
    kind = ErrorKind.validation

    def __init__(self, issues: list[FieldIssue]):
        self.issues = list(issues)
        super().__init__("Invalid frontmatter: " + "; ".join(str(i) for i in self.issues))


class MarkdownParseError(ContentError):
    kind = ErrorKind.parse


class DocumentNotFoundError(ContentError):
    kind = ErrorKind.not_found

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")


class UnexpectedContentError(ContentError):
    kind = ErrorKind.unexpected


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success/failure outcome of a public operation; exactly one of data/error is meaningful."""
    data: Optional[T] = None
    error: Optional[ContentError] = field(default=None)

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        return cls(data=data)

    @classmethod
    def fail(cls, error: ContentError) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return data, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.data
