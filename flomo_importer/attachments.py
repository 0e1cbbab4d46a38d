"""
Attachment relocation.

A flomo export keeps every image and recording under a ``file/`` folder.
The folder is copied into the vault's attachment folder under ``flomo/`` and
memo bodies reference ``flomo/...`` accordingly.
"""

import logging
import shutil
from pathlib import Path
from typing import Union

from .errors import RelocationError
from .workspace import Workspace


EXPORT_ATTACHMENT_DIR = "file"
ATTACHMENT_SUBDIR = "flomo"


def relocate(workspace: Workspace, destination_dir: Union[str, Path]) -> bool:
    """
    Copy the export's attachment folder into ``destination_dir``.

    Only the first ``file/`` folder is copied; any further ones are reported
    and left alone.

    Args:
        workspace: Extracted archive
        destination_dir: Absolute target folder, created if missing

    Returns:
        True if a folder was copied, False if the export has no attachments

    Raises:
        RelocationError: if copying fails
    """
    matches = [entry for entry in workspace.directories if entry.name == EXPORT_ATTACHMENT_DIR]
    if not matches:
        logging.info("No attachment folder in the archive")
        return False

    source = workspace.path_of(matches[0])
    for extra in matches[1:]:
        logging.warning(f"Ignoring additional attachment folder {extra.path}")

    destination = Path(destination_dir)
    logging.debug(f"Copying attachments from {source} to {destination}")
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (OSError, shutil.Error) as e:
        raise RelocationError(f"Failed to copy attachments to {destination}: {e}") from e

    logging.info(f"Copied attachments to {destination}")
    return True
