"""Export pipeline: rendered HTML page bodies plus sidecar JSON metadata"""

import json
from pathlib import Path

from blogpub.core.models import ProcessedDocument


def build_sidecar(doc: ProcessedDocument) -> dict:
    """Camel-cased metadata, headings, and TOC for a document (no HTML)."""
    return doc.model_dump(mode='json', by_alias=True, exclude={'html'})


def write_doc(doc: ProcessedDocument, output_dir: Path) -> tuple[Path, Path]:
    """Write <slug>.html and <slug>.json; nested slugs become subdirectories.

    Returns (html_path, json_path).
    """
    html_path = output_dir / f"{doc.slug}.html"
    json_path = output_dir / f"{doc.slug}.json"
    html_path.parent.mkdir(parents=True, exist_ok=True)

    html_path.write_text(doc.html, encoding='utf-8')
    json_path.write_text(json.dumps(build_sidecar(doc), indent=2), encoding='utf-8')
    return html_path, json_path
