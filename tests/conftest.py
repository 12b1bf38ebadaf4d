"""Root test configuration: document builders and a sample content tree"""

from pathlib import Path

import pytest
import yaml

from blogpub.config import Settings


def _make_doc(body: str = "Body text.\n", **fields) -> str:
    """Build raw markdown with a YAML header; fields override a valid default header."""
    fm = {
        "title": "A Post",
        "description": "A short description.",
        "publishedAt": "2025-06-15",
        "tags": ["smart-home"],
        "status": "published",
    }
    fm.update(fields)
    fm = {k: v for k, v in fm.items() if v is not None}
    return f"---\n{yaml.safe_dump(fm, sort_keys=False)}---\n\n{body}"


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path) -> Path:
    """A content tree with published, draft, nested, community, and broken documents."""
    root = tmp_path / "content" / "blog"
    (root / "guides").mkdir(parents=True)
    (root / "community").mkdir()

    (root / "home-assistant.md").write_text(_make_doc(
        "## Introduction\n\nGetting started.\n\n## Installation\n\n### Docker\n\n```yaml\nimage: ha\n```\n",
        title="Home Assistant", publishedAt="2025-06-15",
        tags=["home-assistant", "Smart-Home"], category="Guides",
    ))
    (root / "top-devices.mdx").write_text(_make_doc(
        "The best devices of the year.\n",
        title="Top Devices", publishedAt="2025-07-01",
        tags=["reviews"], category="Reviews", featured=True,
    ))
    (root / "guides" / "zigbee.md").write_text(_make_doc(
        "Zigbee pairing.\n", title="Zigbee", publishedAt="2025-05-01", tags=["zigbee", "smart-home"],
    ))
    (root / "work-in-progress.md").write_text(_make_doc(
        "Not ready.\n", title="Draft Post", publishedAt="2025-08-01", status="draft",
    ))
    (root / "broken.md").write_text(_make_doc("No tags.\n", title="Broken", tags=[]))
    (root / "notes.txt").write_text("not markdown")
    (root / "community" / "abc123.md").write_text(_make_doc(
        "New video out now!\n", title="New video", publishedAt="2025-06-20",
        tags=["community"], youtubePostId="abc123", youtubeUrl="https://www.youtube.com/post/abc123",
    ))
    (root / "community" / "missing-id.md").write_text(_make_doc(
        "Lost post.\n", title="Missing id", tags=["community"],
    ))
    return root


@pytest.fixture(name="settings")
def settings_fixture(content_dir) -> Settings:
    """Production settings pointed at the sample tree."""
    return Settings(content_dir=str(content_dir), environment="production")


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Builder for raw markdown documents with a valid default header."""
    return _make_doc
