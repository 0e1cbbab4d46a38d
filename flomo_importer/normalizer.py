"""
Primary document selection and markup repair.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from .errors import MissingDocumentError
from .markup import parse_html
from .workspace import WorkspaceEntry


INDEX_PAGE = "index.html"
_USER_ID_PAGE = re.compile(r"^\d+\.html$")


def select_primary_document(entries: List[WorkspaceEntry],
                            archive_path: Optional[Union[str, Path]] = None) -> WorkspaceEntry:
    """
    Pick the HTML document that holds the memos.

    Preference order: ``index.html``, then a page named after a numeric user
    id (``12345.html``), then the first HTML file in archive order.

    Args:
        entries: Extracted archive entries
        archive_path: Archive the entries came from, named in the error message

    Raises:
        MissingDocumentError: if the archive holds no HTML file
    """
    html_files = [e for e in entries if not e.is_dir and e.name.lower().endswith(".html")]
    if not html_files:
        where = f": {archive_path}" if archive_path else ""
        raise MissingDocumentError(f"No HTML file found in the archive{where}")

    for entry in html_files:
        if entry.name == INDEX_PAGE:
            return entry
    for entry in html_files:
        if _USER_ID_PAGE.match(entry.name):
            return entry
    return html_files[0]


def normalize(html_file_path: Union[str, Path]) -> str:
    """
    Read an export page and round-trip it through a forgiving parser.

    Unclosed and misnested tags come out balanced, so the extractor can rely
    on well-formed structure.

    Raises:
        MissingDocumentError: if the file is not on disk
    """
    path = Path(html_file_path)
    if not path.is_file():
        raise MissingDocumentError(f"HTML file not found: {path}")

    data = path.read_bytes()
    try:
        raw = data.decode("utf-8")
    except UnicodeDecodeError as e:
        logging.warning(f"{path} is not valid UTF-8 ({e.reason} at byte {e.start}); "
                        f"undecodable bytes were replaced")
        raw = data.decode("utf-8", errors="replace")
    canonical = str(parse_html(raw))
    logging.debug(f"Normalized {path} ({len(raw)} -> {len(canonical)} chars)")
    return canonical
