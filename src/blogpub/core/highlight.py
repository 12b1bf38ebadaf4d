"""Pygments syntax highlighting with a lazily created, process-wide engine

The engine is built on first use, preloads the common languages, and lives for
the rest of the process. Other languages are loaded on demand; a language
Pygments does not know degrades to plain, unhighlighted code.
"""

import logging
import threading
from html import escape

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)

HIGHLIGHT_THEME = "github-dark"
PLAIN_LANGUAGE = "text"
PRELOADED_LANGUAGES = (
    "typescript", "javascript", "tsx", "jsx", "json", "yaml", "bash", "shell",
    "css", "html", "markdown", "python", "go", "dockerfile", "sql",
)


class Highlighter:
    """One formatter (fixed theme, inline styles) plus a registry of loaded lexers."""

    def __init__(self, theme: str = HIGHLIGHT_THEME, languages: tuple[str, ...] = PRELOADED_LANGUAGES):
        self.theme = theme
        self.formatter = HtmlFormatter(style=theme, noclasses=True)
        self._lexers: dict[str, Lexer] = {}
        for lang in (PLAIN_LANGUAGE, *languages):
            if not self.load_language(lang):
                logger.debug("Pygments has no lexer for preloaded language %r", lang)

    @property
    def loaded_languages(self) -> list[str]:
        return sorted(self._lexers)

    def load_language(self, lang: str) -> bool:
        """Register a lexer for lang; False when Pygments does not know it."""
        key = lang.lower()
        if key in self._lexers:
            return True
        try:
            self._lexers[key] = get_lexer_by_name(key)
        except ClassNotFound:
            return False
        return True

    def highlight(self, code: str, lang: str) -> str:
        """Highlight code with an already-loaded language (KeyError otherwise)."""
        return highlight(code, self._lexers[lang.lower()], self.formatter)


_highlighter: Highlighter | None = None
_init_lock = threading.Lock()


def get_highlighter() -> Highlighter:
    """Return the shared Highlighter, creating it exactly once."""
    global _highlighter
    if _highlighter is None:
        with _init_lock:
            if _highlighter is None:
                _highlighter = Highlighter()
    return _highlighter


def load_language(lang: str) -> bool:
    """Load lang into the shared engine on demand. Never raises."""
    if get_highlighter().load_language(lang):
        return True
    logger.warning("Failed to load language: %s, falling back to plaintext", lang)
    return False


def highlight_code(code: str, lang: str | None) -> str | None:
    """Highlighted block markup, or None when the language is unsupported."""
    lang = (lang or PLAIN_LANGUAGE).strip().lower() or PLAIN_LANGUAGE
    if not load_language(lang):
        return None
    markup = get_highlighter().highlight(code.strip(), lang)
    return f'<div class="code-block language-{escape(lang)}">{markup}</div>\n'
