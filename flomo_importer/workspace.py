"""
Archive staging for the Flomo importer.

This module validates an export archive, unpacks it into a private workspace
directory and removes that directory again when the run is over.
"""

import logging
import shutil
import tempfile
import zipfile
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional, Union

from .errors import ExtractionError, InvalidInputError


ARCHIVE_SUFFIX = ".zip"
WORKSPACE_PREFIX = "flomo-import-"


@dataclass
class WorkspaceEntry:
    """
    One extracted archive member.
    """
    path: str
    is_dir: bool = False

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name


@dataclass
class Workspace:
    """
    Handle on an extracted archive.

    Use it as a context manager, or call ``cleanup()`` from a ``finally``
    block; the directory is removed at most once either way.
    """
    root: Path
    archive_path: Path
    entries: List[WorkspaceEntry] = field(default_factory=list)
    removed: bool = False

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup()

    @property
    def files(self) -> List[WorkspaceEntry]:
        return [entry for entry in self.entries if not entry.is_dir]

    @property
    def directories(self) -> List[WorkspaceEntry]:
        return [entry for entry in self.entries if entry.is_dir]

    def path_of(self, entry: WorkspaceEntry) -> Path:
        """Absolute location of an entry inside the workspace."""
        return self.root.joinpath(*PurePosixPath(entry.path).parts)

    def cleanup(self) -> None:
        """
        Remove the workspace directory.

        Failures are logged and swallowed so they never hide the error that
        ended the run.
        """
        if self.removed:
            return
        self.removed = True
        try:
            shutil.rmtree(self.root)
            logging.debug(f"Removed workspace {self.root}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logging.error(f"Failed to remove workspace {self.root}: {e}")


class ArchiveStager:
    """
    Unpacks flomo export archives into per-run workspaces.
    """

    def __init__(self, workspace_root: Optional[Union[str, Path]] = None):
        """
        Initialize the stager.

        Args:
            workspace_root: Directory under which run workspaces are created.
                Defaults to the system temp directory.
        """
        self.workspace_root = Path(workspace_root) if workspace_root else None

    @staticmethod
    def validate(archive_path: Union[str, Path]) -> Path:
        """
        Check that ``archive_path`` names a non-empty zip file.

        Raises:
            InvalidInputError: if the path is missing, empty or not a zip
        """
        if not archive_path or not str(archive_path).strip():
            raise InvalidInputError("No input file specified")

        path = Path(archive_path)
        if not path.exists():
            raise InvalidInputError(f"Input file does not exist: {path}")
        if not path.is_file():
            raise InvalidInputError(f"Input path is not a file: {path}")
        if path.suffix.lower() != ARCHIVE_SUFFIX:
            raise InvalidInputError(f"Input file must be a ZIP file: {path}")
        if path.stat().st_size == 0:
            raise InvalidInputError(f"Input file is empty: {path}")
        return path

    def stage(self, archive_path: Union[str, Path]) -> Workspace:
        """
        Extract ``archive_path`` into a fresh workspace.

        Args:
            archive_path: Path to the exported zip file

        Returns:
            The workspace holding the extracted entries

        Raises:
            InvalidInputError: if the input fails validation (nothing is created)
            ExtractionError: if the archive is corrupt or empty (nothing is left behind)
        """
        path = self.validate(archive_path)

        parent = self.workspace_root or Path(tempfile.gettempdir())
        try:
            parent.mkdir(parents=True, exist_ok=True)
            root = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=parent))
        except OSError as e:
            raise ExtractionError(f"Cannot create a workspace under {parent} for {path}: {e}") from e
        workspace = Workspace(root=root, archive_path=path)

        try:
            logging.debug(f"Decompressing {path} to {root}")
            with zipfile.ZipFile(path, 'r') as zf:
                infos = zf.infolist()
                if not infos:
                    raise ExtractionError(f"No files found in the archive: {path}")
                zf.extractall(root)
            workspace.entries = self._list_entries(infos)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, RuntimeError, EOFError) as e:
            workspace.cleanup()
            raise ExtractionError(f"Failed to extract ZIP file {path}: {e}") from e
        except BaseException:
            workspace.cleanup()
            raise

        logging.info(f"Extracted {len(workspace.files)} files from {path}")
        return workspace

    @staticmethod
    def _list_entries(infos: List[zipfile.ZipInfo]) -> List[WorkspaceEntry]:
        """
        Build the entry list in archive order.

        Parent directories that the archive does not list explicitly are
        inserted right before their first child.
        """
        entries: List[WorkspaceEntry] = []
        seen_dirs = set()

        for info in infos:
            member = PurePosixPath(info.filename.replace("\\", "/"))
            parts = [part for part in member.parts if part not in ("", ".", "..", "/")]
            if not parts:
                continue

            parents = parts if info.is_dir() else parts[:-1]
            for depth in range(1, len(parents) + 1):
                dir_path = "/".join(parents[:depth])
                if dir_path not in seen_dirs:
                    seen_dirs.add(dir_path)
                    entries.append(WorkspaceEntry(path=dir_path, is_dir=True))

            if not info.is_dir():
                entries.append(WorkspaceEntry(path="/".join(parts)))

        return entries
