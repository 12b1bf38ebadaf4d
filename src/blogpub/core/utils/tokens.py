"""Shared markdown-it token and tree-node utilities"""

TOC_LEVELS = (2, 3, 4)
TEXT_LEAVES = ('text', 'code_inline')


def heading_level(token) -> int | None:
    """Return the heading level (1-6) for a heading_open token or heading tree node, else None."""
    if token.type in ('heading_open', 'heading') and token.tag and token.tag[0] == 'h' and token.tag[1:].isdigit():
        return int(token.tag[1:])
    return None


def inline_text(node) -> str:
    """Concatenate text-bearing leaves under node, ignoring formatting wrappers.

    Image alt text is not heading text, so image subtrees are skipped.
    """
    if node.type in TEXT_LEAVES:
        return node.content
    if node.type == 'image':
        return ''
    return ''.join(inline_text(child) for child in node.children)
