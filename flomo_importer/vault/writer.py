"""
Persists aggregated memo buckets into the vault.
"""

import logging

from ..errors import WriteError
from ..models import FlomoCore
from .adapter import Vault


def write_all(core: FlomoCore, vault: Vault) -> int:
    """
    Write every bucket of ``core`` as one file.

    Buckets are written in insertion order; files written before a failure
    are left in place.

    Args:
        core: Aggregated import session
        vault: Destination vault

    Returns:
        Number of files written

    Raises:
        WriteError: naming the first path that could not be written
    """
    written = 0
    for file_path in core.files:
        try:
            vault.write(file_path, core.render_file(file_path))
        except OSError as e:
            raise WriteError(file_path, str(e)) from e
        written += 1
        logging.debug(f"Wrote {file_path}")

    logging.info(f"Wrote {written} memo files")
    return written
