"""
flomo HTML export importer.

This module reads the HTML page of a flomo export and converts every memo in
it into a Memo. The page looks like::

    <select id="tag"><option>全部标签</option><option>#reading</option></select>
    <div class="memos">
      <div class="memo">
        <div class="time">2024-03-31 10:20:30</div>
        <div class="content"><p>text with <mark>highlight</mark></p></div>
        <div class="files"><img src="file/2024-03-31/1/a.png"/></div>
      </div>
    </div>
"""

import logging
import re
from typing import List, Optional

from bs4.element import Tag
from pydantic import ValidationError

from ..attachments import ATTACHMENT_SUBDIR, EXPORT_ATTACHMENT_DIR
from ..markup import MarkdownConverter, highlight, parse_html
from ..models import FlomoCore, Memo
from .base import BaseImporter


ALL_TAGS_LABEL = "全部标签"

_WHITESPACE = re.compile(r"\s+")
_TITLE_UNSAFE = re.compile(r"[-:\s]")
_EXPORT_FILE_PREFIX = re.compile(rf"^(\./)?{EXPORT_ATTACHMENT_DIR}/")


def rewrite_attachment_path(src: str) -> str:
    """Point an export-relative ``file/...`` reference at the vault attachment folder."""
    return _EXPORT_FILE_PREFIX.sub(f"{ATTACHMENT_SUBDIR}/", src)


class FlomoHTMLImporter(BaseImporter):
    """
    Importer for the HTML page of a flomo export.
    """

    def __init__(self, html_content: str):
        """
        Initialize the importer.

        Args:
            html_content: The export page, ideally already normalized
        """
        self.soup = parse_html(html_content)
        self.converter = MarkdownConverter(rewrite_src=rewrite_attachment_path)
        self.warnings: List[str] = []
        self._memos: Optional[List[Memo]] = None

    def get_all_memos(self) -> List[Memo]:
        if self._memos is None:
            self._memos = self._load_memos()
        return list(self._memos)

    def get_tags(self) -> List[str]:
        select = self.soup.find(id="tag")
        if not isinstance(select, Tag):
            return []

        tags = []
        for option in select.find_all("option"):
            name = option.get_text().strip()
            if name and name != ALL_TAGS_LABEL and name not in tags:
                tags.append(name)
        return tags

    def build_core(self) -> FlomoCore:
        core = super().build_core()
        core.warnings.extend(self.warnings)
        return core

    def _load_memos(self) -> List[Memo]:
        memos = []
        for position, node in enumerate(self.soup.find_all("div", class_="memo")):
            memo = self._parse_memo(node, position)
            if memo is not None:
                memos.append(memo)

        logging.info(f"Extracted {len(memos)} memos from export page")
        return memos

    def _parse_memo(self, node: Tag, position: int) -> Optional[Memo]:
        time_node = node.find(class_="time")
        if time_node is None:
            self._warn(f"Skipping memo #{position + 1}: no timestamp")
            return None

        stamp = _WHITESPACE.sub(" ", time_node.get_text()).strip()
        date, _, clock = stamp.partition(" ")

        content_node = node.find(class_="content")
        body_html = highlight.protect(content_node.decode_contents()) if content_node else ""
        body = self.converter.convert(body_html)

        attachments = self._collect_attachments(node.find(class_="files"))

        header = f"📅 [[{date}]] {clock}".rstrip()
        content = f"{header}\n\n{body}" if body else header
        if attachments:
            content += "\n" + "\n".join(f"![]({ref})" for ref in attachments)

        try:
            return Memo(
                date=date,
                time=clock,
                title=_TITLE_UNSAFE.sub("_", stamp),
                content=content,
                attachments=attachments,
            )
        except ValidationError as e:
            self._warn(f"Skipping memo #{position + 1} ({stamp!r}): {e.errors()[0]['msg']}")
            return None

    @staticmethod
    def _collect_attachments(files_node) -> List[str]:
        if not isinstance(files_node, Tag):
            return []

        refs = []
        for tag in files_node.find_all(["img", "audio", "video", "source", "a"]):
            ref = tag.get("src") or tag.get("href")
            if not ref:
                continue
            ref = rewrite_attachment_path(ref)
            if ref not in refs:
                refs.append(ref)
        return refs

    def _warn(self, message: str) -> None:
        logging.warning(message)
        self.warnings.append(message)


def extract(canonical_html: str) -> FlomoCore:
    """
    Build the import session for a normalized export page.

    Args:
        canonical_html: Output of ``normalizer.normalize``

    Returns:
        A FlomoCore with memos and tags filled in and no buckets yet
    """
    return FlomoHTMLImporter(canonical_html).build_core()
