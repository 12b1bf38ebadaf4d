"""File-backed document repository: discovery, filtering, slug lookup, adjacency"""

import logging
from pathlib import Path, PurePosixPath

from blogpub.config import Settings
from blogpub.core.errors import (
    ContentError,
    DocumentNotFoundError,
    FieldIssue,
    FrontmatterValidationError,
    Result,
    UnexpectedContentError,
)
from blogpub.core.models import Adjacent, DocumentMeta, DocumentSource, ProcessedDocument, QueryOptions, Status
from blogpub.core.parse import MD_EXTENSIONS, discover_files, path_to_slug
from blogpub.core.processor import process_document, process_document_meta


logger = logging.getLogger(__name__)


class DocumentRepo:
    """Read-only view over a content directory; every call re-reads and reprocesses files."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.root = Path(settings.content_dir)
        self.community_root = self.root / settings.community_dir

    @property
    def community_prefix(self) -> str:
        return f"{self.settings.community_dir}/"

    def _sources(self) -> list[tuple[str, Path]]:
        """(slug, path) for every document: regular tree first, then community posts."""
        regular = [
            (path_to_slug(p, self.root), p)
            for p in discover_files(self.root, exclude=(self.settings.community_dir,))
        ]
        community = [
            (self.community_prefix + path_to_slug(p, self.community_root), p)
            for p in discover_files(self.community_root)
        ]
        return regular + community

    def _check_community(self, slug: str, doc: DocumentMeta) -> None:
        """Community-directory files must carry youtubePostId so source stays derivable."""
        if slug.startswith(self.community_prefix) and doc.source is not DocumentSource.community:
            raise FrontmatterValidationError(
                [FieldIssue("youtubePostId", "required for documents in the community directory")]
            )

    def _load_meta(self, slug: str, path: Path) -> Result[DocumentMeta]:
        try:
            raw = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            return Result.fail(UnexpectedContentError(f"Failed to read {path}: {e}"))
        result = process_document_meta(
            raw, slug=slug,
            default_author=self.settings.site_author,
            excerpt_length=self.settings.excerpt_length,
        )
        if result.success:
            try:
                self._check_community(slug, result.data)
            except ContentError as e:
                return Result.fail(e)
        return result

    def _all_meta(self) -> list[DocumentMeta]:
        """Metadata for every valid document; invalid ones are logged and skipped."""
        docs = []
        for slug, path in self._sources():
            result = self._load_meta(slug, path)
            if not result.success:
                logger.warning("Skipping %s: %s", path, result.error.message)
                continue
            docs.append(result.data)
        return docs

    def _status_ok(self, doc: DocumentMeta, status: str | None) -> bool:
        if status == "all":
            return True
        if status is not None:
            return doc.frontmatter.status.value == status
        return doc.frontmatter.status is Status.published or self.settings.include_drafts

    def _filter(self, docs: list[DocumentMeta], options: QueryOptions) -> list[DocumentMeta]:
        tag = options.tag.lower() if options.tag else None
        category = options.category.lower() if options.category else None
        out = []
        for doc in docs:
            fm = doc.frontmatter
            if not self._status_ok(doc, options.status):
                continue
            if options.source is not None and doc.source is not options.source:
                continue
            if tag and not any(t.lower() == tag for t in fm.tags):
                continue
            if category and (fm.category or '').lower() != category:
                continue
            if options.featured is not None and fm.featured != options.featured:
                continue
            out.append(doc)
        return out

    def list_documents(self, options: QueryOptions | None = None) -> Result[list[DocumentMeta]]:
        """Filter, sort newest first, then paginate."""
        options = options or QueryOptions()
        try:
            docs = self._filter(self._all_meta(), options)
            docs.sort(key=lambda d: d.frontmatter.published_at, reverse=True)
            end = None if options.limit is None else options.offset + options.limit
            return Result.ok(docs[options.offset:end])
        except Exception as e:
            logger.exception("Error loading blog posts")
            return Result.fail(UnexpectedContentError(str(e) or "Unknown error loading posts"))

    def _resolve(self, slug: str) -> Path | None:
        """Map a public slug to its file, or None (including slugs escaping the content root)."""
        rel = PurePosixPath(slug)
        if not slug or rel.is_absolute() or '..' in rel.parts:
            return None
        if slug.startswith(self.community_prefix):
            base, rel = self.community_root, PurePosixPath(slug[len(self.community_prefix):])
        elif rel.parts and rel.parts[0] == self.settings.community_dir:
            return None
        else:
            base = self.root
        if not rel.parts:
            return None
        for ext in MD_EXTENSIONS:
            candidate = base.joinpath(*rel.parts).with_name(rel.name + ext)
            if candidate.is_file():
                return candidate
        return None

    def get_by_slug(self, slug: str) -> Result[ProcessedDocument]:
        """Fully processed document; drafts are not found in production."""
        try:
            path = self._resolve(slug)
            if path is None:
                return Result.fail(DocumentNotFoundError(slug))

            result = process_document(
                path.read_text(encoding='utf-8'), slug=slug,
                default_author=self.settings.site_author,
                parser_config=self.settings.parser_config,
                excerpt_length=self.settings.excerpt_length,
            )
            if not result.success:
                return result
            self._check_community(slug, result.data)

            if result.data.frontmatter.status is Status.draft and not self.settings.include_drafts:
                return Result.fail(DocumentNotFoundError(slug))
            return result
        except ContentError as e:
            return Result.fail(e)
        except Exception as e:
            logger.exception("Error loading post %s", slug)
            return Result.fail(UnexpectedContentError(str(e) or "Unknown error loading post"))

    def list_all_slugs(self) -> Result[list[str]]:
        result = self.list_documents(QueryOptions(status="all"))
        if not result.success:
            return result
        return Result.ok([d.slug for d in result.data])

    def list_all_tags(self) -> Result[list[str]]:
        """Sorted unique tags across published documents."""
        result = self.list_documents(QueryOptions(status="published"))
        if not result.success:
            return result
        return Result.ok(sorted({t for d in result.data for t in d.frontmatter.tags}))

    def list_all_categories(self) -> Result[list[str]]:
        result = self.list_documents(QueryOptions(status="published"))
        if not result.success:
            return result
        return Result.ok(sorted({d.frontmatter.category for d in result.data if d.frontmatter.category}))

    def get_featured(self, limit: int | None = None) -> Result[list[DocumentMeta]]:
        return self.list_documents(QueryOptions(featured=True, limit=limit))

    def get_recent(self, limit: int = 5) -> Result[list[DocumentMeta]]:
        return self.list_documents(QueryOptions(status="published", limit=limit))

    def get_adjacent(self, slug: str) -> Result[Adjacent]:
        """prev/next around slug in the default listing; unknown slugs have no neighbours."""
        result = self.list_documents()
        if not result.success:
            return Result.fail(result.error)
        docs = result.data
        index = next((i for i, d in enumerate(docs) if d.slug == slug), None)
        if index is None:
            return Result.ok(Adjacent())
        return Result.ok(Adjacent(
            prev=docs[index - 1] if index > 0 else None,
            next=docs[index + 1] if index < len(docs) - 1 else None,
        ))

    def validate_all(self) -> list[tuple[Path, ContentError]]:
        """Every document that fails metadata processing, with its error."""
        failures = []
        for slug, path in self._sources():
            result = self._load_meta(slug, path)
            if not result.success:
                failures.append((path, result.error))
        return failures
