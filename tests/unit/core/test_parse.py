"""Unit tests for core/parse.py"""

import pytest

from blogpub.core.errors import FrontmatterValidationError
from blogpub.core.parse import discover_files, path_to_slug, split_frontmatter, strip_frontmatter


def test_split_frontmatter_with_yaml():
    """split_frontmatter extracts the YAML header and returns the body."""
    fm, body = split_frontmatter("---\ntitle: Hello\n---\n# Body\n")
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_split_frontmatter_no_frontmatter():
    """Text without a header yields an empty dict and the full text."""
    text = "# No frontmatter\n"
    assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_empty_block():
    """An empty header block parses to an empty mapping."""
    assert split_frontmatter("---\n---\nBody") == ({}, "Body")


def test_split_frontmatter_invalid_yaml():
    """Unparseable YAML is a validation error naming the frontmatter."""
    with pytest.raises(FrontmatterValidationError, match="invalid YAML"):
        split_frontmatter("---\ntags: [unclosed\n---\nBody")


def test_split_frontmatter_non_mapping():
    """A YAML list header is rejected."""
    with pytest.raises(FrontmatterValidationError, match="expected a mapping"):
        split_frontmatter("---\n- a\n- b\n---\nBody")


def test_strip_frontmatter_keeps_horizontal_rules():
    """Only a leading header is removed; later --- lines stay in the body."""
    text = "---\ntitle: T\n---\nPara\n\n---\n\nMore\n"
    assert strip_frontmatter(text) == "Para\n\n---\n\nMore\n"


def test_discover_files_recursive_and_filtered(tmp_path):
    """discover_files finds .md and .mdx recursively and ignores other files."""
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "notes.txt").write_text("text")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    assert discover_files(tmp_path) == [tmp_path / "a.md", sub / "b.mdx"]


def test_discover_files_excludes_subdirectory(tmp_path):
    """Top-level subdirectories named in exclude are skipped."""
    (tmp_path / "community").mkdir()
    (tmp_path / "community" / "post.md").write_text("x")
    (tmp_path / "a.md").write_text("a")
    assert discover_files(tmp_path, exclude=("community",)) == [tmp_path / "a.md"]


def test_discover_files_missing_root(tmp_path):
    """A missing content root yields no files."""
    assert discover_files(tmp_path / "nope") == []


def test_path_to_slug_nested(tmp_path):
    """Slugs drop the extension and use forward slashes."""
    assert path_to_slug(tmp_path / "guides" / "zigbee.mdx", tmp_path) == "guides/zigbee"
