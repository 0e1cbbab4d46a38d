"""
Canvas layout: the most recent memos arranged on a JSON Canvas grid.

Nodes are either links to the memo files (``copy_with_link``) or text cards
carrying the memo content (``copy_with_content``).
"""

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

from ..aggregator import render_memo_content
from ..config import config
from ..errors import WriteError
from ..models import FlomoCore, ImportSettings
from ..vault import Vault


CANVAS_FILE = "Flomo Canvas.canvas"
CANVAS_GAP = 20

NODE_SIZES = {
    "S": (230, 280),
    "M": (300, 350),
    "L": (500, 500),
}


def _node_id(seed: str) -> str:
    return hashlib.sha1(seed.encode("utf-8")).hexdigest()[:16]


def build_canvas(core: FlomoCore, settings: ImportSettings, limit: int, columns: int) -> Dict[str, Any]:
    """Build the canvas document for the latest ``limit`` memos."""
    width, height = NODE_SIZES[settings.canvas_size]
    columns = max(columns, 1)
    with_content = settings.options_canvas == "copy_with_content"

    nodes: List[Dict[str, Any]] = []
    seen_files = set()
    for position, memo in enumerate(core.latest(limit)):
        if with_content:
            card = {"type": "text", "text": render_memo_content(memo, settings)}
        else:
            if not memo.file_path or memo.file_path in seen_files:
                continue
            seen_files.add(memo.file_path)
            card = {"type": "file", "file": memo.file_path}

        slot = len(nodes)
        nodes.append({
            "id": _node_id(f"{position}:{memo.title}:{memo.file_path}"),
            **card,
            "x": (slot % columns) * (width + CANVAS_GAP),
            "y": (slot // columns) * (height + CANVAS_GAP),
            "width": width,
            "height": height,
        })

    return {"nodes": nodes, "edges": []}


def generate_canvas(core: FlomoCore, settings: ImportSettings, vault: Vault,
                    limit: Optional[int] = None, columns: Optional[int] = None) -> str:
    """
    Write the canvas file.

    Returns:
        Vault-relative path of the written canvas
    """
    limit = config.canvas_limit if limit is None else limit
    columns = config.canvas_columns if columns is None else columns
    canvas_file = f"{settings.flomo_target}/{CANVAS_FILE}"

    document = build_canvas(core, settings, limit, columns)
    try:
        vault.mkdir(settings.flomo_target)
        vault.write(canvas_file, json.dumps(document, ensure_ascii=False, indent=2))
    except OSError as e:
        raise WriteError(canvas_file, str(e)) from e
    logging.info(f"Generated {canvas_file} with {len(document['nodes'])} nodes")
    return canvas_file
