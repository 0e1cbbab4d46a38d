"""
HTML to Markdown conversion for memo bodies.

Built on markdownify. The library handles block layout, lists, tables and
emphasis; this module adds the attachment path hook, media embeds and
turndown-style escaping of text nodes. Bracket escaping is what
makes ``[[links]]`` arrive as ``\\[\\[links\\]\\]``; see ``markup.links``.
"""

import re
from typing import Callable, Optional

import markdownify
from bs4.element import NavigableString, PreformattedString, Tag

from .html import parse_html


SOURCE_ATTRIBUTES = {
    "img": "src",
    "audio": "src",
    "video": "src",
    "source": "src",
    "a": "href",
}

EMPHASIS_TAGS = ["strong", "b", "em", "i", "s", "del", "strike"]

# Applied to each text node in order. Anchored patterns only look at the
# start of the node.
_ESCAPES = [
    (re.compile(r"\\"), r"\\\\"),
    (re.compile(r"\*"), r"\\*"),
    (re.compile(r"^-"), r"\\-"),
    (re.compile(r"^\+ "), r"\\+ "),
    (re.compile(r"^(=+)"), r"\\\1"),
    (re.compile(r"^(#{1,6}) "), r"\\\1 "),
    (re.compile(r"`"), r"\\`"),
    (re.compile(r"^~~~"), r"\\~~~"),
    (re.compile(r"\["), r"\\["),
    (re.compile(r"\]"), r"\\]"),
    (re.compile(r"^>"), r"\\>"),
    (re.compile(r"_"), r"\\_"),
    (re.compile(r"^(\d+)\. "), r"\1\\. "),
]

_BLANK_LINES = re.compile(r"\n{3,}")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that Markdown would otherwise interpret."""
    for pattern, replacement in _ESCAPES:
        text = pattern.sub(replacement, text)
    return text


class MarkdownConverter(markdownify.MarkdownConverter):
    """
    Converts an HTML fragment into Markdown text.

    Args:
        rewrite_src: Optional callable applied to every image, media and link
            target, used to point export-relative attachment paths at their
            new vault location.
    """

    class Options(markdownify.MarkdownConverter.DefaultOptions):
        heading_style = markdownify.ATX
        bullets = "-"
        strong_em_symbol = markdownify.ASTERISK
        escape_misc = False

    def __init__(self, rewrite_src: Optional[Callable[[str], str]] = None, **options):
        super().__init__(**options)
        self.rewrite_src = rewrite_src or (lambda src: src)

    def convert(self, html_fragment: str) -> str:
        if not html_fragment or not html_fragment.strip():
            return ""
        soup = parse_html(html_fragment)
        root = soup.body or soup
        self._rewrite_sources(root)
        _tighten_emphasis(root)
        text = self.convert_soup(root)
        return _BLANK_LINES.sub("\n\n", text).strip()

    def escape(self, text, parent_tags):
        return escape_markdown(text) if text else ""

    def convert_audio(self, el, text, parent_tags):
        src = el.get("src")
        return f"![]({src})" if src else text

    convert_video = convert_audio

    def convert_source(self, el, text, parent_tags):
        src = el.get("src")
        return f"![]({src})" if src else ""

    def _rewrite_sources(self, root: Tag) -> None:
        for tag in root.find_all(list(SOURCE_ATTRIBUTES)):
            attribute = SOURCE_ATTRIBUTES[tag.name]
            if tag.get(attribute):
                tag[attribute] = self.rewrite_src(tag[attribute])


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _tighten_emphasis(root: Tag) -> None:
    """
    Drop whitespace that would be doubled around an emphasis tag.

    ``a <b> x </b>b`` keeps one space on each side of ``**x**`` instead of
    pushing the inner spaces next to the outer ones.
    """
    for tag in root.find_all(EMPHASIS_TAGS):
        inner = tag.get_text()
        before = tag.previous_sibling
        if inner[:1].isspace() and _is_text(before) and str(before)[-1:].isspace():
            before.replace_with(str(before).rstrip())
        after = tag.next_sibling
        if inner[-1:].isspace() and _is_text(after) and str(after)[:1].isspace():
            after.replace_with(str(after).lstrip())
