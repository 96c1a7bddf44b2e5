"""
Common utilities for plugin development.

This package contains shared HTML query helpers used by source plugins.
"""

from .utils import (
    Node,
    HTMLParser,
    element_text,
    select_text,
    select_first_text,
    select_attr,
    has_match,
    next_element_text,
    remove_suffix,
)

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
