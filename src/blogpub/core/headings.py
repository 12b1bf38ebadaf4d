"""Heading extraction and nested table-of-contents construction"""

from markdown_it.tree import SyntaxTreeNode

from blogpub.core.models import TocHeading, TocTree
from blogpub.core.utils.slug import Slugger
from blogpub.core.utils.tokens import TOC_LEVELS, heading_level, inline_text


def extract_headings(tree: SyntaxTreeNode) -> list[TocHeading]:
    """Collect h2-h4 headings in document order with unique slug ids.

    h1 (the title) and h5/h6 are skipped entirely and never consume a slug.
    """
    headings: list[TocHeading] = []
    slugger = Slugger()
    for node in tree.walk():
        level = heading_level(node)
        if level not in TOC_LEVELS:
            continue
        text = inline_text(node).strip()
        headings.append(TocHeading(id=slugger.slug(text), text=text, level=level))
    return headings


def build_toc_tree(headings: list[TocHeading]) -> list[TocTree]:
    """Nest a flat heading list by level; skipped levels nest under the nearest shallower heading."""
    root: list[TocTree] = []
    # (level, children list) frames; the sentinel at level 1 owns the root forest
    stack: list[tuple[int, list[TocTree]]] = [(1, root)]

    for heading in headings:
        node = TocTree(heading=heading)
        while len(stack) > 1 and stack[-1][0] >= heading.level:
            stack.pop()
        stack[-1][1].append(node)
        stack.append((heading.level, node.children))

    return root
