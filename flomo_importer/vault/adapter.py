"""
Local-filesystem vault for the Flomo importer.

Every path handed to the vault is relative to its base directory, the way an
Obsidian vault adapter addresses files.
"""

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Union

from ..errors import InvalidInputError


class Vault:
    """
    A note vault rooted at a local directory.
    """

    def __init__(self, base_path: Union[str, Path], config_dir: str = ".obsidian"):
        """
        Initialize the vault.

        Args:
            base_path: Vault root directory
            config_dir: Name of the vault's settings folder
        """
        self.base_path = Path(base_path)
        self.config_dir = config_dir

    def resolve(self, rel_path: str) -> Path:
        """
        Map a vault-relative path to a filesystem path.

        Raises:
            InvalidInputError: if the path would leave the vault
        """
        parts = [part for part in PurePosixPath(rel_path.replace("\\", "/")).parts if part not in ("/", ".")]
        if ".." in parts:
            raise InvalidInputError(f"Path escapes the vault: {rel_path}")
        return self.base_path.joinpath(*parts)

    def exists(self, rel_path: str) -> bool:
        return self.resolve(rel_path).exists()

    def mkdir(self, rel_path: str) -> None:
        """Create a folder and its parents; an existing folder is fine."""
        self.resolve(rel_path).mkdir(parents=True, exist_ok=True)

    def write(self, rel_path: str, content: str) -> None:
        """Write ``content`` to a file, replacing what was there."""
        with open(self.resolve(rel_path), 'w', encoding='utf-8') as f:
            f.write(content)

    def read(self, rel_path: str) -> str:
        with open(self.resolve(rel_path), 'r', encoding='utf-8') as f:
            return f.read()

    def read_app_config(self) -> Dict[str, Any]:
        """
        Load the vault's ``app.json`` settings.

        Returns:
            The settings, or an empty dict if the file is missing or unreadable
        """
        app_json = self.base_path / self.config_dir / "app.json"
        if not app_json.exists():
            return {}
        try:
            with open(app_json, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.warning(f"Could not read vault settings {app_json}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def attachment_folder(self) -> str:
        """
        Vault-relative folder configured for new attachments.

        An empty string means the vault root.
        """
        folder = str(self.read_app_config().get("attachmentFolderPath") or "")
        folder = folder.strip()
        if folder.startswith("./"):
            folder = folder[2:]
        return folder.strip("/")
