"""Markdown-to-HTML rendering: anchored heading ids and highlighted code fences"""

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from markdown_it.renderer import RendererHTML

from blogpub.core.highlight import highlight_code
from blogpub.core.models import TocHeading
from blogpub.core.parse import make_parser
from blogpub.core.utils.slug import Slugger
from blogpub.core.utils.tokens import TEXT_LEAVES, TOC_LEVELS, heading_level


def _inline_token_text(token) -> str:
    return ''.join(c.content for c in token.children or [] if c.type in TEXT_LEAVES)


def assign_heading_ids(tokens: list, headings: list[TocHeading]) -> None:
    """Set id attrs on heading_open tokens.

    h2-h4 take the extracted TOC ids in order; other levels get slugs that
    cannot collide with any TOC id.
    """
    toc_ids = iter([h.id for h in headings])
    others = Slugger(reserved=[h.id for h in headings])
    for i, tok in enumerate(tokens):
        level = heading_level(tok)
        if level is None:
            continue
        if level in TOC_LEVELS:
            tok.attrSet('id', next(toc_ids))
        else:
            tok.attrSet('id', others.slug(_inline_token_text(tokens[i + 1])))


def _heading_open(self, tokens, idx, options, env) -> str:
    anchor = escapeHtml(str(tokens[idx].attrGet('id') or ''))
    return f'{self.renderToken(tokens, idx, options, env)}<a class="heading-anchor" href="#{anchor}">'


def _heading_close(self, tokens, idx, options, env) -> str:
    return '</a>' + self.renderToken(tokens, idx, options, env)


def _fence(self, tokens, idx, options, env) -> str:
    info = tokens[idx].info.strip()
    lang = info.split(maxsplit=1)[0] if info else ''
    markup = highlight_code(tokens[idx].content, lang)
    if markup is None:
        return RendererHTML.fence(self, tokens, idx, options, env)
    return markup


def make_renderer(preset: str = 'gfm-like') -> MarkdownIt:
    """MarkdownIt instance whose HTML renderer wraps headings in anchors and highlights fences."""
    md = make_parser(preset)
    md.add_render_rule('heading_open', _heading_open)
    md.add_render_rule('heading_close', _heading_close)
    md.add_render_rule('fence', _fence)
    return md


def render_html(md: MarkdownIt, tokens: list, headings: list[TocHeading]) -> str:
    """Render parsed tokens to HTML with ids consistent with headings."""
    assign_heading_ids(tokens, headings)
    return md.renderer.render(tokens, md.options, {})
