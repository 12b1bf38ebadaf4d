"""Document processing: full (HTML + TOC) and metadata-only paths

Both entry points return a Result and never raise. Validation and parse
failures come back as typed errors; anything unexpected is logged and
normalized to UnexpectedContentError.
"""

import logging

from blogpub.config import DEFAULT_AUTHOR
from blogpub.core.errors import ContentError, MarkdownParseError, Result, UnexpectedContentError
from blogpub.core.frontmatter import validate_frontmatter
from blogpub.core.headings import build_toc_tree, extract_headings
from blogpub.core.models import DocumentMeta, Frontmatter, ProcessedDocument
from blogpub.core.parse import parse_tree, split_frontmatter
from blogpub.core.reading_time import calculate_reading_time, generate_excerpt
from blogpub.core.render import make_renderer, render_html
from blogpub.core.utils.slug import slugify


logger = logging.getLogger(__name__)


def _validated(raw: str, default_author: str) -> tuple[Frontmatter, str]:
    """Split and validate the header; raises FrontmatterValidationError."""
    data, body = split_frontmatter(raw)
    return validate_frontmatter(data, default_author), body


def process_document(
    raw: str,
    slug: str | None = None,
    default_author: str = DEFAULT_AUTHOR,
    parser_config: str = 'gfm-like',
    excerpt_length: int = 160,
    ) -> Result[ProcessedDocument]:
    """Validate, parse, measure, and render one document.

    Stops at the first failing stage; slug defaults to the slugified title.
    """
    try:
        frontmatter, body = _validated(raw, default_author)

        md = make_renderer(parser_config)
        try:
            tokens = md.parse(body)
            headings = extract_headings(parse_tree(tokens))
        except Exception as e:
            raise MarkdownParseError(f"Failed to parse markdown: {e}") from e
        toc_tree = build_toc_tree(headings)

        reading_time = calculate_reading_time(body)
        excerpt = generate_excerpt(body, excerpt_length)

        try:
            html = render_html(md, tokens, headings)
        except Exception as e:
            raise MarkdownParseError(f"Failed to render markdown: {e}") from e

        return Result.ok(ProcessedDocument(
            slug=slug if slug is not None else slugify(frontmatter.title),
            frontmatter=frontmatter,
            html=html,
            excerpt=excerpt,
            headings=headings,
            toc_tree=toc_tree,
            reading_time=reading_time,
        ))
    except ContentError as e:
        return Result.fail(e)
    except Exception as e:
        logger.exception("Markdown processing error")
        return Result.fail(UnexpectedContentError(str(e) or "Unknown error processing markdown"))


def process_document_meta(
    raw: str,
    slug: str | None = None,
    default_author: str = DEFAULT_AUTHOR,
    excerpt_length: int = 160,
    ) -> Result[DocumentMeta]:
    """Listing fast path: frontmatter, reading time, and excerpt only. No parsing or highlighting."""
    try:
        frontmatter, body = _validated(raw, default_author)
        return Result.ok(DocumentMeta(
            slug=slug if slug is not None else slugify(frontmatter.title),
            frontmatter=frontmatter,
            excerpt=generate_excerpt(body, excerpt_length),
            reading_time=calculate_reading_time(body),
        ))
    except ContentError as e:
        return Result.fail(e)
    except Exception as e:
        logger.exception("Markdown metadata error")
        return Result.fail(UnexpectedContentError(f"Failed to parse markdown: {e}"))
