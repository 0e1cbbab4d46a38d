import json
import zipfile
from pathlib import Path

import pytest

from flomo_importer.vault import Vault


def memo_html(stamp, body, files=""):
    """Markup of one memo as it appears in a flomo export page."""
    return (
        f'<div class="memo"><div class="time">{stamp}</div>'
        f'<div class="content">{body}</div>'
        f'<div class="files">{files}</div></div>'
    )


def export_page(memos, tags=("#reading",)):
    """A complete export page wrapping the given memo markup."""
    options = "".join(f"<option>{tag}</option>" for tag in ("全部标签",) + tuple(tags))
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8"><title>flomo</title></head>'
        f'<body><select id="tag">{options}</select>'
        f'<div class="memos">{"".join(memos)}</div></body></html>'
    )


SAMPLE_MEMOS = [
    memo_html(
        "2024-03-31 10:20:30",
        "<p>Reading <mark>deep work</mark> again</p><p>See [[Cal Newport]]</p>",
        '<img src="file/2024-03-31/1/cover.png"/>',
    ),
    memo_html("2024-03-31 08:00:00", "<p>Morning pages</p>"),
    memo_html("2024-03-30 22:15:00", "<ul><li>milk</li><li>eggs</li></ul>"),
]


@pytest.fixture
def make_archive(tmp_path):
    """Return a builder writing a zip archive from a ``{member: content}`` mapping."""
    def _make(members, name="flomo-export.zip"):
        archive = tmp_path / name
        with zipfile.ZipFile(archive, "w") as zf:
            for member, content in members.items():
                if member.endswith("/"):
                    zf.writestr(zipfile.ZipInfo(member), "")
                else:
                    zf.writestr(member, content)
        return archive
    return _make


@pytest.fixture
def sample_archive(make_archive):
    return make_archive({
        "flomo@reader-20240331/": "",
        "flomo@reader-20240331/12345.html": export_page(SAMPLE_MEMOS),
        "flomo@reader-20240331/file/2024-03-31/1/cover.png": b"\x89PNG fake",
    })


@pytest.fixture
def vault(tmp_path):
    base = tmp_path / "vault"
    (base / ".obsidian").mkdir(parents=True)
    (base / ".obsidian" / "app.json").write_text(
        json.dumps({"attachmentFolderPath": "assets"}), encoding="utf-8"
    )
    return Vault(base)


@pytest.fixture
def workspace_root(tmp_path) -> Path:
    return tmp_path / "workspaces"
