"""
Plugin Utilities - HTML query helpers shared by source plugins.

Selectors are evaluated with BeautifulSoup (soupsieve). Every accessor is
total: a selector that matches nothing yields an empty string or None,
never an exception.
"""

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)


Node = Union[BeautifulSoup, Tag]


def element_text(element: Tag) -> str:
    """Get the text of an element with whitespace collapsed."""
    return " ".join(element.get_text().split())


def select_text(node: Node, selector: str) -> str:
    """
    Get the combined text of every element matching a CSS selector.

    Args:
        node: Document or fragment to query
        selector: CSS selector string

    Returns:
        Texts of the matches joined by a space, or "" if nothing matches
    """
    texts = (element_text(element) for element in node.select(selector))
    return " ".join(text for text in texts if text)


def select_first_text(node: Node, selector: str) -> Optional[str]:
    """Get the text of the first element matching a selector, if any."""
    element = node.select_one(selector)
    if element is None:
        return None
    return element_text(element)


def select_attr(node: Node, selector: str, attr: str) -> str:
    """
    Get an attribute from the first matching element that carries it.

    Args:
        node: Document or fragment to query
        selector: CSS selector string
        attr: Attribute name

    Returns:
        Attribute value, or "" if no match has the attribute
    """
    for element in node.select(selector):
        if element.has_attr(attr):
            value = element[attr]
            # Multi-valued attributes such as class come back as lists
            if isinstance(value, list):
                value = " ".join(value)
            return value
    return ""


def has_match(node: Node, selector: str) -> bool:
    """Check whether a selector matches anything inside node."""
    return node.select_one(selector) is not None


def next_element_text(element: Tag) -> Optional[str]:
    """Get the text of the next sibling element, if there is one."""
    sibling = element.find_next_sibling()
    if sibling is None:
        return None
    return element_text(sibling)


def remove_suffix(text: str, suffix: str) -> str:
    """Remove suffix from the end of text when present."""
    if suffix and text.endswith(suffix):
        return text[:-len(suffix)]
    return text


class HTMLParser:
    """Wraps a parsed document with selector shortcuts."""

    def __init__(self, html_content: str):
        """
        Initialize HTML parser.

        Args:
            html_content: HTML content to parse
        """
        self.soup = BeautifulSoup(html_content, 'html.parser')

    def select(self, selector: str) -> List[Tag]:
        """Find all elements matching a CSS selector."""
        return self.soup.select(selector)

    def find_text(self, selector: str) -> str:
        """Find the combined text of all matches of a CSS selector."""
        return select_text(self.soup, selector)

    def find_attr(self, selector: str, attr: str) -> str:
        """Find an attribute value using a CSS selector."""
        return select_attr(self.soup, selector, attr)


# Export utility classes and functions
__all__ = [
    "Node",
    "HTMLParser",
    "element_text",
    "select_text",
    "select_first_text",
    "select_attr",
    "has_match",
    "next_element_text",
    "remove_suffix",
]
