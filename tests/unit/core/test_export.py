"""Unit tests for core/export.py"""

import json

from blogpub.core.export import build_sidecar, write_doc
from blogpub.core.processor import process_document


BODY = "## Intro\n\nHello.\n\n### Part\n\nMore.\n"


def test_build_sidecar_camel_case(make_doc):
    """The sidecar uses camelCase keys, includes TOC data, and omits HTML."""
    doc = process_document(make_doc(BODY), slug="post").data
    sidecar = build_sidecar(doc)
    assert "html" not in sidecar
    assert sidecar["slug"] == "post"
    assert sidecar["source"] == "markdown"
    assert sidecar["frontmatter"]["publishedAt"] == "2025-06-15"
    assert sidecar["readingTime"]["text"] == "1 min read"
    assert sidecar["tocTree"][0]["heading"]["id"] == "intro"
    assert sidecar["tocTree"][0]["children"][0]["heading"]["level"] == 3


def test_write_doc_nested_slug(make_doc, tmp_path):
    """Nested slugs are written under matching subdirectories."""
    doc = process_document(make_doc(BODY), slug="community/abc").data
    html_path, json_path = write_doc(doc, tmp_path)
    assert html_path == tmp_path / "community" / "abc.html"
    assert html_path.read_text(encoding="utf-8") == doc.html
    assert json.loads(json_path.read_text(encoding="utf-8"))["slug"] == "community/abc"
