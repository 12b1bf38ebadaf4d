"""Unit tests for core/headings.py"""

from blogpub.core.headings import build_toc_tree, extract_headings
from blogpub.core.models import TocHeading


SAMPLE_MD = """\
# Title

Intro with **bold** text.

## Getting Started

### Install

```python
print("hello")
```

#### Detail

## Getting Started

##### Too deep
"""


def _h(level: int, text: str) -> TocHeading:
    return TocHeading(id=text.lower(), text=text, level=level)


def test_extracts_h2_to_h4_in_order(tree_of):
    """Only h2-h4 are collected, in document order."""
    headings = extract_headings(tree_of(SAMPLE_MD))
    assert [(h.level, h.text) for h in headings] == [
        (2, "Getting Started"), (3, "Install"), (4, "Detail"), (2, "Getting Started"),
    ]


def test_duplicate_headings_get_suffixes(tree_of):
    """Three identical headings yield section, section-1, section-2."""
    headings = extract_headings(tree_of("## Section\n\n## Section\n\n## Section\n"))
    assert [h.id for h in headings] == ["section", "section-1", "section-2"]


def test_h1_h5_h6_ignored_and_do_not_count(tree_of):
    """Skipped levels never appear and never consume a slug."""
    md = "# Section\n\n##### Section\n\n###### Section\n\n## Section\n"
    headings = extract_headings(tree_of(md))
    assert [(h.id, h.level) for h in headings] == [("section", 2)]


def test_heading_text_ignores_formatting(tree_of):
    """Formatting wrappers are dropped; their text is kept."""
    headings = extract_headings(tree_of("## **Bold** text\n\n### Use `pip` *now*\n"))
    assert headings[0].text == "Bold text"
    assert headings[0].id == "bold-text"
    assert headings[1].text == "Use pip now"


def test_heading_text_skips_image_alt(tree_of):
    """Image alt text does not leak into heading text or ids."""
    headings = extract_headings(tree_of("## ![logo](x.png) Title\n"))
    assert (headings[0].text, headings[0].id) == ("Title", "title")


def test_headings_inside_blockquote_found(tree_of):
    """Nested block containers are walked depth-first."""
    headings = extract_headings(tree_of("> ## Quoted\n\n## After\n"))
    assert [h.text for h in headings] == ["Quoted", "After"]


def test_no_headings(tree_of):
    """A document without headings yields an empty list."""
    assert extract_headings(tree_of("Just prose.\n")) == []


def test_toc_tree_nests_children():
    """An h3 after an h2 becomes its child."""
    tree = build_toc_tree([_h(2, "A"), _h(3, "B")])
    assert len(tree) == 1
    assert tree[0].heading.text == "A"
    assert [c.heading.text for c in tree[0].children] == ["B"]


def test_toc_tree_level_skip_nests_directly():
    """An h4 right after an h2 nests under it with no synthetic h3."""
    tree = build_toc_tree([_h(2, "Section"), _h(4, "Detail")])
    assert tree[0].children[0].heading.text == "Detail"
    assert tree[0].children[0].children == []


def test_toc_tree_forest_of_siblings():
    """Multiple h2s form sibling roots; shallower headings close deeper frames."""
    tree = build_toc_tree([
        _h(2, "Intro"), _h(2, "Install"), _h(3, "Docker"), _h(4, "Compose"), _h(3, "Native"), _h(2, "Config"),
    ])
    assert [n.heading.text for n in tree] == ["Intro", "Install", "Config"]
    install = tree[1]
    assert [c.heading.text for c in install.children] == ["Docker", "Native"]
    assert [c.heading.text for c in install.children[0].children] == ["Compose"]


def test_toc_tree_starting_below_h2():
    """A leading h3 is a root when nothing shallower precedes it."""
    tree = build_toc_tree([_h(3, "Deep"), _h(2, "Top")])
    assert [n.heading.text for n in tree] == ["Deep", "Top"]


def test_toc_tree_empty():
    """No headings produce an empty forest."""
    assert build_toc_tree([]) == []
