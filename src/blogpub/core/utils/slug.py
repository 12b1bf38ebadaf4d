"""Slug generation for heading anchors, with per-document collision handling"""

import re
from typing import Iterable


def slugify(text: str) -> str:
    """Convert heading text to a lowercase, hyphen-separated URL-safe slug.

    Only ASCII word characters survive: "Über uns" becomes "ber-uns".
    """
    text = text.lower().strip()
    text = re.sub(r'[^\w\s-]', '', text, flags=re.ASCII)
    text = re.sub(r'\s+', '-', text)
    return re.sub(r'-+', '-', text)


class Slugger:
    """Issues unique slugs within one document.

    The first occurrence of a base slug keeps it bare; later occurrences get
    -1, -2, ... counted per base slug. A suffixed candidate that was already
    issued is skipped so ids never repeat.
    """

    def __init__(self, reserved: Iterable[str] = ()):
        self._counts: dict[str, int] = {}
        self._issued: set[str] = set(reserved)

    def slug(self, text: str) -> str:
        base = slugify(text)
        count = self._counts.get(base, 0)
        candidate = f"{base}-{count}" if count else base
        while candidate in self._issued:
            count += 1
            candidate = f"{base}-{count}"
        self._counts[base] = count + 1
        self._issued.add(candidate)
        return candidate
