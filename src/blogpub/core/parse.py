"""File discovery, frontmatter splitting, and markdown-it tokenization"""

import re
from pathlib import Path, PurePosixPath
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from blogpub.core.errors import FieldIssue, FrontmatterValidationError


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
MD_EXTENSIONS = ('.md', '.mdx')


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name; raw HTML is escaped."""
    return MarkdownIt(preset, options_update={"linkify": False, "html": False})


def strip_frontmatter(text: str) -> str:
    """Return text with a leading frontmatter block removed (if any)."""
    m = FRONTMATTER_RE.match(text)
    return text[m.end():] if m else text


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise FrontmatterValidationError([FieldIssue("frontmatter", f"invalid YAML: {e}")]) from e
    if not isinstance(fm, dict):
        raise FrontmatterValidationError(
            [FieldIssue("frontmatter", f"expected a mapping, got {type(fm).__name__}")]
        )
    return fm, text[m.end():]


def parse_tree(tokens: list) -> SyntaxTreeNode:
    """Wrap a token stream in a nested syntax tree (headings own their inline children)."""
    return SyntaxTreeNode(tokens)


def discover_files(root: Path, exclude: tuple[str, ...] = ()) -> list[Path]:
    """Return sorted .md/.mdx files under root, skipping top-level subdirectories named in exclude."""
    if not root.is_dir():
        return []
    files = []
    for p in root.rglob('*'):
        rel = p.relative_to(root)
        if len(rel.parts) > 1 and rel.parts[0] in exclude:
            continue
        if p.is_file() and p.suffix in MD_EXTENSIONS:
            files.append(p)
    return sorted(files)


def path_to_slug(path: Path, base: Path) -> str:
    """Slug from a path relative to base: extension dropped, forward slashes."""
    rel = path.relative_to(base).with_suffix('')
    return PurePosixPath(*rel.parts).as_posix()
