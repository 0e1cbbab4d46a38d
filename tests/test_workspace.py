"""
Tests for archive staging and workspace teardown.
"""

import logging
import zipfile
from unittest.mock import patch

import pytest

from flomo_importer.errors import ExtractionError, InvalidInputError
from flomo_importer.workspace import ArchiveStager


def test_rejects_non_zip_before_creating_workspace(tmp_path, workspace_root):
    text_file = tmp_path / "notes.txt"
    text_file.write_text("hello")

    with pytest.raises(InvalidInputError, match="ZIP"):
        ArchiveStager(workspace_root).stage(text_file)

    assert not workspace_root.exists()


def test_rejects_missing_file(tmp_path, workspace_root):
    with pytest.raises(InvalidInputError, match="does not exist"):
        ArchiveStager(workspace_root).stage(tmp_path / "missing.zip")
    assert not workspace_root.exists()


def test_rejects_empty_file(tmp_path, workspace_root):
    empty = tmp_path / "empty.zip"
    empty.write_bytes(b"")

    with pytest.raises(InvalidInputError, match="empty"):
        ArchiveStager(workspace_root).stage(empty)
    assert not workspace_root.exists()


def test_rejects_blank_path(workspace_root):
    with pytest.raises(InvalidInputError):
        ArchiveStager(workspace_root).stage("")


def test_corrupt_archive_leaves_no_workspace(tmp_path, workspace_root):
    corrupt = tmp_path / "broken.zip"
    corrupt.write_bytes(b"this is not a zip archive")

    with pytest.raises(ExtractionError, match="broken.zip"):
        ArchiveStager(workspace_root).stage(corrupt)

    assert list(workspace_root.iterdir()) == []


def test_archive_without_entries_is_an_extraction_error(tmp_path, workspace_root):
    archive = tmp_path / "nothing.zip"
    with zipfile.ZipFile(archive, "w"):
        pass

    with pytest.raises(ExtractionError, match="No files"):
        ArchiveStager(workspace_root).stage(archive)

    assert list(workspace_root.iterdir()) == []


def test_entries_include_implied_directories(make_archive, workspace_root):
    archive = make_archive({
        "export/index.html": "<html></html>",
        "export/file/2024-03-31/a.png": b"png",
    })

    with ArchiveStager(workspace_root).stage(archive) as workspace:
        listed = [(entry.path, entry.is_dir) for entry in workspace.entries]
        assert listed == [
            ("export", True),
            ("export/index.html", False),
            ("export/file", True),
            ("export/file/2024-03-31", True),
            ("export/file/2024-03-31/a.png", False),
        ]
        assert workspace.path_of(workspace.files[0]).read_text() == "<html></html>"
        root = workspace.root

    assert not root.exists()


def test_each_run_gets_its_own_workspace(make_archive, workspace_root):
    archive = make_archive({"index.html": "<html></html>"})
    stager = ArchiveStager(workspace_root)

    first = stager.stage(archive)
    second = stager.stage(archive)
    try:
        assert first.root != second.root
        assert first.root.parent == second.root.parent == workspace_root
    finally:
        first.cleanup()
        second.cleanup()

    assert list(workspace_root.iterdir()) == []


def test_cleanup_runs_once(make_archive, workspace_root):
    workspace = ArchiveStager(workspace_root).stage(make_archive({"index.html": "x"}))

    with patch("flomo_importer.workspace.shutil.rmtree") as rmtree:
        workspace.cleanup()
        workspace.cleanup()

    rmtree.assert_called_once_with(workspace.root)


def test_cleanup_errors_are_logged_not_raised(make_archive, workspace_root, caplog):
    workspace = ArchiveStager(workspace_root).stage(make_archive({"index.html": "x"}))

    with patch("flomo_importer.workspace.shutil.rmtree", side_effect=PermissionError("locked")):
        with caplog.at_level(logging.ERROR):
            workspace.cleanup()

    assert "locked" in caplog.text
    assert workspace.removed


def test_workspace_creation_failure_is_an_extraction_error(make_archive, workspace_root):
    archive = make_archive({"index.html": "x"})

    with patch("flomo_importer.workspace.tempfile.mkdtemp", side_effect=PermissionError("denied")):
        with pytest.raises(ExtractionError, match="workspaces"):
            ArchiveStager(workspace_root).stage(archive)


def test_interrupted_extraction_removes_workspace(make_archive, workspace_root):
    archive = make_archive({"index.html": "x"})

    with patch.object(zipfile.ZipFile, "extractall", side_effect=KeyboardInterrupt):
        with pytest.raises(KeyboardInterrupt):
            ArchiveStager(workspace_root).stage(archive)

    assert list(workspace_root.iterdir()) == []
