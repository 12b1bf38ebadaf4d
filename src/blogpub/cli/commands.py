"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from blogpub.config import Settings, load_config
from blogpub.core.errors import ContentError, Result
from blogpub.core.export import write_doc
from blogpub.core.models import DocumentSource, QueryOptions, TocTree
from blogpub.crud.documents import DocumentRepo


ContentDir = Annotated[Optional[str], typer.Option("--content-dir", help="Content root directory")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    return settings


def _repo(content_dir: Optional[str]) -> DocumentRepo:
    return DocumentRepo(_settings(overrides={"content_dir": content_dir}))


def _unwrap(result: Result):
    try:
        return result.unwrap()
    except ContentError as e:
        _fail(e.message)


def _echo_toc(nodes: list[TocTree], depth: int = 0) -> None:
    for node in nodes:
        typer.echo(f"{'  ' * depth}- {node.heading.text} (#{node.heading.id})")
        _echo_toc(node.children, depth + 1)


def list_cmd(
    content_dir: ContentDir = None,
    status: Annotated[Optional[str], typer.Option("--status", help="published, draft, or all")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only documents with this tag")] = None,
    category: Annotated[Optional[str], typer.Option("--category", help="Only documents in this category")] = None,
    featured: Annotated[Optional[bool], typer.Option("--featured/--not-featured", help="Filter on the featured flag")] = None,
    source: Annotated[Optional[DocumentSource], typer.Option("--source", help="markdown or community")] = None,
    offset: Annotated[int, typer.Option("--offset", min=0)] = 0,
    limit: Annotated[Optional[int], typer.Option("--limit", min=0)] = None,
    ):
    """List documents, newest first."""
    repo = _repo(content_dir)
    try:
        options = QueryOptions(status=status, tag=tag, category=category, featured=featured,
                               source=source, offset=offset, limit=limit)
    except ValueError as e:
        _fail("Invalid filter", e)
    docs = _unwrap(repo.list_documents(options))
    if not docs:
        typer.echo("No documents found.")
        raise typer.Exit(1)
    for doc in docs:
        fm = doc.frontmatter
        typer.echo(f"{fm.published_at.isoformat()}  {doc.slug}  {fm.title}  ({doc.reading_time.text})")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Document slug, e.g. my-post or community/abc")],
    content_dir: ContentDir = None,
    html: Annotated[bool, typer.Option("--html", help="Print the rendered HTML instead of a summary")] = False,
    ):
    """Show one document's metadata and table of contents."""
    doc = _unwrap(_repo(content_dir).get_by_slug(slug))
    if html:
        typer.echo(doc.html)
        return
    fm = doc.frontmatter
    typer.echo(f"{fm.title}")
    typer.echo(f"  {fm.published_at.isoformat()} by {fm.author} | {doc.reading_time.text} | {doc.source.value}")
    typer.echo(f"  tags: {', '.join(fm.tags)}")
    typer.echo(f"  {doc.excerpt}")
    if doc.toc_tree:
        typer.echo("Contents:")
        _echo_toc(doc.toc_tree, 1)


def tags_cmd(content_dir: ContentDir = None):
    """List tags used by published documents."""
    for tag in _unwrap(_repo(content_dir).list_all_tags()):
        typer.echo(tag)


def categories_cmd(content_dir: ContentDir = None):
    """List categories used by published documents."""
    for category in _unwrap(_repo(content_dir).list_all_categories()):
        typer.echo(category)


def slugs_cmd(content_dir: ContentDir = None):
    """List every document slug, drafts included."""
    for slug in _unwrap(_repo(content_dir).list_all_slugs()):
        typer.echo(slug)


def check_cmd(content_dir: ContentDir = None):
    """Validate every document; exit 1 if any fails."""
    failures = _repo(content_dir).validate_all()
    for path, error in failures:
        typer.echo(f"  {path}: {error.message}")
    if failures:
        _fail(f"{len(failures)} invalid document(s)")
    typer.echo("All documents valid.")


def export_cmd(
    content_dir: ContentDir = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Write rendered HTML + sidecar JSON for every listed document."""
    settings = _settings(overrides={"content_dir": content_dir, "output_dir": out})
    repo = DocumentRepo(settings)
    output_dir = Path(settings.output_dir)

    results = []
    for meta in _unwrap(repo.list_documents()):
        doc = repo.get_by_slug(meta.slug)
        if not doc.success:
            typer.echo(f"  skipped {meta.slug}: {doc.error.message}", err=True)
            continue
        try:
            html_path, _ = write_doc(doc.data, output_dir)
        except OSError as e:
            _fail("Export failed", e)
        results.append((meta.slug, html_path))

    for slug, html_path in results:
        typer.echo(f"  {slug} -> {html_path}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")
