"""
Import pipeline for the Flomo importer.

Coordinates one import run: stage the archive, normalize and extract the
export page, copy attachments, aggregate and write memo files, generate the
derived views, and always remove the workspace at the end.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .aggregator import aggregate
from .attachments import ATTACHMENT_SUBDIR, relocate
from .config import ConfigManager, get_config
from .errors import InvalidInputError, RelocationError
from .importers import extract
from .models import FlomoCore, ImportSettings
from .normalizer import normalize, select_primary_document
from .vault import Vault, write_all
from .views import run_derived_views
from .workspace import ArchiveStager, Workspace


class FlomoImporter:
    """
    Imports a flomo export archive into a vault.
    """

    def __init__(self, settings: Union[ImportSettings, Mapping[str, Any]], vault: Vault,
                 workspace_root: Optional[Union[str, Path]] = None,
                 config: Optional[ConfigManager] = None):
        """
        Initialize the importer.

        Settings are validated here, before any file is touched.

        Args:
            settings: Import settings, or a mapping using the option names
            vault: Destination vault
            workspace_root: Directory for per-run workspaces (system temp dir if None)
            config: Configuration supplying the derived-view limits (global one if None)

        Raises:
            InvalidInputError: if the settings are not valid
        """
        if not isinstance(settings, ImportSettings):
            settings = ImportSettings.from_mapping(settings)
        self.settings = settings
        self.vault = vault
        self.stager = ArchiveStager(workspace_root)
        self.config = config or get_config()

    def import_archive(self, archive_path: Union[str, Path]) -> FlomoCore:
        """
        Run a full import of ``archive_path``.

        Returns:
            The finished import session

        Raises:
            FlomoImportError: subclass describing the stage that failed
        """
        logging.info(f"Starting import of {archive_path}")
        workspace = self.stager.stage(archive_path)

        try:
            core = self._run(workspace)
        finally:
            workspace.cleanup()

        logging.info(f"Import completed: {len(core.memos)} memos in {len(core.files)} files")
        return core

    def _run(self, workspace: Workspace) -> FlomoCore:
        document = select_primary_document(workspace.entries, workspace.archive_path)
        logging.info(f"Using HTML file: {document.path}")

        canonical = normalize(workspace.path_of(document))
        core = extract(canonical)

        try:
            relocate(workspace, self.attachment_destination())
        except RelocationError as e:
            logging.warning(f"Attachments were not copied: {e}")
            core.warnings.append(str(e))

        aggregate(core, self.settings, self.vault)
        write_all(core, self.vault)
        run_derived_views(
            core, self.settings, self.vault,
            moments_limit=self.config.moments_limit,
            canvas_limit=self.config.canvas_limit,
            canvas_columns=self.config.canvas_columns,
        )
        return core

    def attachment_destination(self) -> Path:
        """
        Absolute folder that receives the export's attachments.

        Raises:
            RelocationError: if the vault's attachment folder lies outside the vault
        """
        folder = self.vault.attachment_folder()
        relative = f"{folder}/{ATTACHMENT_SUBDIR}" if folder else ATTACHMENT_SUBDIR
        try:
            return self.vault.resolve(relative)
        except InvalidInputError as e:
            raise RelocationError(
                f"Attachment folder {relative} is not inside the vault {self.vault.base_path}"
            ) from e
