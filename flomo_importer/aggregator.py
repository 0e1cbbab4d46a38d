"""
File aggregation for the Flomo importer.

Decides which output file every memo goes to and renders the memo text that
is written there.
"""

import logging

from .errors import WriteError
from .markup import highlight, unescape_bilinks
from .models import FlomoCore, ImportSettings, Memo
from .vault import Vault


def memo_file_path(settings: ImportSettings, memo: Memo, position: int, total: int) -> str:
    """
    Vault-relative output path of a memo.

    With ``merge_by_date`` every memo of a day shares ``memo@{date}.md``;
    otherwise each memo gets ``memo@{title}_{total - position}.md``, so the
    first memo of the export carries the highest number.
    """
    folder = f"{settings.memo_root}/{memo.date}"
    if settings.merge_by_date:
        return f"{folder}/memo@{memo.date}.md"
    return f"{folder}/memo@{memo.title}_{total - position}.md"


def render_memo_content(memo: Memo, settings: ImportSettings) -> str:
    """
    Final text of a memo as it appears in the vault.

    The highlight placeholder is resolved first; link unescaping runs after
    it and never sees a half-rewritten highlight.
    """
    content = highlight.restore(memo.content)
    if settings.allow_bilink:
        content = unescape_bilinks(content)
    return content


def aggregate(core: FlomoCore, settings: ImportSettings, vault: Vault) -> FlomoCore:
    """
    Fill the bucket mapping of ``core`` and seal it.

    Args:
        core: Import session with memos extracted
        settings: Validated import settings
        vault: Vault in which the output folders are created

    Returns:
        The same FlomoCore, now with ``files`` populated
    """
    total = len(core.memos)
    created_dirs = set()

    for position, memo in enumerate(core.memos):
        file_path = memo_file_path(settings, memo, position, total)
        memo.file_path = file_path

        folder = file_path.rsplit("/", 1)[0]
        if folder not in created_dirs:
            try:
                vault.mkdir(folder)
            except OSError as e:
                raise WriteError(folder, str(e)) from e
            created_dirs.add(folder)

        core.add_fragment(file_path, render_memo_content(memo, settings))

    core.seal()
    logging.info(f"Aggregated {total} memos into {len(core.files)} files")
    return core
