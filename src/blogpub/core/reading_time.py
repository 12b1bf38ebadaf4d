"""Reading-time estimation and plain-text excerpt generation"""

import math
import re

from blogpub.core.models import ReadingTime
from blogpub.core.parse import strip_frontmatter


WORDS_PER_MINUTE = 200
CODE_LINE_SECONDS = 2

CODE_BLOCK_RE = re.compile(r'```.*?```', re.DOTALL)
MARKDOWN_SYNTAX_RE = re.compile(r'[#*_~`\[\](){}|]')
FORMATTING_RE = re.compile(r'[*_~`\[\](){}|]')
IMAGE_RE = re.compile(r'!\[[^\]]*\]\([^)]*\)')
LINK_RE = re.compile(r'\[([^\]]+)\]\([^)]+\)')
HEADING_MARKER_RE = re.compile(r'^#+\s+', re.MULTILINE)
WHITESPACE_RE = re.compile(r'\s+')


def _count_words(prose: str) -> int:
    return len(WHITESPACE_RE.sub(' ', MARKDOWN_SYNTAX_RE.sub('', prose)).split())


def calculate_reading_time(content: str) -> ReadingTime:
    """Estimate reading time: prose at WORDS_PER_MINUTE plus CODE_LINE_SECONDS per code line.

    Fence lines are not counted as code. Never less than one minute.
    """
    body = strip_frontmatter(content)
    code_blocks = CODE_BLOCK_RE.findall(body)
    words = _count_words(CODE_BLOCK_RE.sub('', body))

    code_lines = sum(max(len(block.split('\n')) - 2, 0) for block in code_blocks)
    minutes = max(1, math.ceil(words / WORDS_PER_MINUTE + code_lines * CODE_LINE_SECONDS / 60))

    return ReadingTime(
        minutes=minutes,
        text="1 min read" if minutes == 1 else f"{minutes} min read",
        words=words,
    )


def to_plain_text(content: str) -> str:
    """Strip frontmatter, code fences, images, and inline formatting; links keep their label.

    Only leading heading markers are removed, so a "#" inside prose survives.
    """
    text = CODE_BLOCK_RE.sub('', strip_frontmatter(content))
    text = HEADING_MARKER_RE.sub('', text)
    text = IMAGE_RE.sub('', text)
    text = LINK_RE.sub(r'\1', text)
    text = FORMATTING_RE.sub('', text)
    return WHITESPACE_RE.sub(' ', text).strip()


def generate_excerpt(content: str, max_length: int = 160) -> str:
    """Plain-text summary of at most max_length chars plus '...' when truncated.

    Truncation backs up to the last space before the cutoff so words are never split;
    without any space the cut falls on the raw character boundary.
    """
    text = to_plain_text(content)
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(' ')
    return (truncated[:last_space] if last_space > 0 else truncated) + "..."
