"""
Utility functions for the PHP type to schema resolver.
"""

import re

_WHITESPACE_PATTERN = re.compile(r"\s+")


def clean_doc_comment(comment: str) -> str:
    """Collapse whitespace runs of a doc-comment text into single spaces.

    Examples:
        "The  user\\n   id " -> "The user id"
    """
    return _WHITESPACE_PATTERN.sub(" ", comment).strip()


def clean_schema_name(name: str, prefix: str = "") -> str:
    """Strip the application prefix from a named type.

    Examples:
        ("NotificationsItem", "Notifications") -> "Item"
        ("Item", "Notifications") -> "Item"
    """
    if prefix and name.startswith(prefix) and len(name) > len(prefix):
        return name[len(prefix) :]
    return name
