"""
Moments digest: one note embedding the most recent memo files.
"""

import logging
from typing import List, Optional

from ..config import config
from ..errors import WriteError
from ..models import FlomoCore, ImportSettings
from ..vault import Vault


MOMENTS_FILE = "Flomo Moments.md"


def moment_links(core: FlomoCore, limit: int) -> List[str]:
    """Output files of the latest ``limit`` memos, without repeats, newest first."""
    links = []
    for memo in core.latest(limit):
        if memo.file_path and memo.file_path not in links:
            links.append(memo.file_path)
    return links


def generate_moments(core: FlomoCore, settings: ImportSettings, vault: Vault,
                     limit: Optional[int] = None) -> str:
    """
    Write the Moments note.

    Returns:
        Vault-relative path of the written note
    """
    limit = config.moments_limit if limit is None else limit
    index_file = f"{settings.flomo_target}/{MOMENTS_FILE}"

    buffer = []
    for file_path in moment_links(core, limit):
        link = file_path[:-3] if file_path.endswith(".md") else file_path
        buffer.append(f"![[{link}]]\n\n---\n")

    try:
        vault.mkdir(settings.flomo_target)
        vault.write(index_file, "\n".join(buffer))
    except OSError as e:
        raise WriteError(index_file, str(e)) from e
    logging.info(f"Generated {index_file} with {len(buffer)} entries")
    return index_file
