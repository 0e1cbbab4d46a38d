"""
HTML parsing helpers shared by the normalizer and the extractor.
"""

from bs4 import BeautifulSoup, FeatureNotFound


def parse_html(html_content: str) -> BeautifulSoup:
    """
    Parse possibly malformed HTML with the most forgiving parser available.

    Args:
        html_content: Raw markup

    Returns:
        The parsed document
    """
    try:
        return BeautifulSoup(html_content, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html_content, "html.parser")
