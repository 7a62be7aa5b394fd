"""Nested key-value document store backing the tracking database."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import PATH_SEPARATOR
from .exceptions import DatabaseIOError, DatabaseNotFoundError, FormatError, InsertionError

logger = logging.getLogger(__name__)

Tree = Dict[str, Any]


def parse(text: str) -> Tree:
    """
    Parse a document into a tree of nested mappings.

    Args:
        text: Document text. Blank text is an empty document.

    Returns:
        Tree of nested dicts

    Raises:
        FormatError: If the text is not valid JSON or its top level is not an object
    """
    if not text.strip():
        return {}

    try:
        tree = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Malformed tracking document: {e}") from e

    if not isinstance(tree, dict):
        raise FormatError(
            f"Tracking document must be an object at the top level, got {type(tree).__name__}"
        )
    return tree


def serialize(tree: Tree) -> str:
    """Render a tree as document text (sorted keys, trailing newline)."""
    return json.dumps(tree, indent=2, sort_keys=True) + "\n"


def _split_path(path: str) -> List[str]:
    segments = path.split(PATH_SEPARATOR)
    if not all(segments):
        raise InsertionError(f"Invalid path '{path}': empty segment")
    return segments


def read_path(tree: Tree, path: str) -> Optional[Any]:
    """
    Read the value at a dot-joined path.

    Args:
        tree: Document tree
        path: Keys joined with "."

    Returns:
        The value, or None if any segment is missing
    """
    node: Any = tree
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node


def insert_path(tree: Tree, path: str, value: Any) -> None:
    """
    Create a new value at a path, building intermediate mappings as needed.

    Raises:
        InsertionError: If the path already holds a value, or an intermediate
            segment holds something other than a mapping
    """
    segments = _split_path(path)
    node = tree
    for segment in segments[:-1]:
        if segment not in node:
            node[segment] = {}
        elif not isinstance(node[segment], dict):
            raise InsertionError(f"Cannot insert at '{path}': '{segment}' is not a table")
        node = node[segment]

    last = segments[-1]
    if last in node:
        raise InsertionError(f"Cannot insert at '{path}': value already present")
    node[last] = value


def set_path(tree: Tree, path: str, value: Any) -> None:
    """
    Overwrite (or create) the value at a path whose parent already exists.

    Raises:
        InsertionError: If an intermediate segment is missing or is not a mapping
    """
    segments = _split_path(path)
    node = tree
    for segment in segments[:-1]:
        if segment not in node:
            raise InsertionError(f"Cannot set '{path}': '{segment}' does not exist")
        if not isinstance(node[segment], dict):
            raise InsertionError(f"Cannot set '{path}': '{segment}' is not a table")
        node = node[segment]

    node[segments[-1]] = value


def upsert_path(tree: Tree, path: str, value: Any) -> bool:
    """
    Insert a value if the path is empty, otherwise overwrite it.

    Returns:
        True if a new value was inserted, False if an existing one was overwritten
    """
    if read_path(tree, path) is None:
        insert_path(tree, path, value)
        return True

    set_path(tree, path, value)
    return False


def load_document(path: Path) -> Tree:
    """
    Load and parse a document file.

    Raises:
        DatabaseNotFoundError: If the file does not exist
        DatabaseIOError: If the file cannot be read
        FormatError: If the contents are malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise DatabaseNotFoundError(f"Tracking database not found at {path}") from e
    except OSError as e:
        raise DatabaseIOError(f"Couldn't read tracking database at {path}: {e}") from e

    logger.debug("Loaded tracking database from %s", path)
    return parse(text)


def save_document(tree: Tree, path: Path) -> None:
    """
    Serialize a tree and rewrite the whole document file.

    Raises:
        DatabaseIOError: If the file cannot be written
    """
    text = serialize(tree)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise DatabaseIOError(f"Couldn't write tracking database at {path}: {e}") from e

    logger.debug("Wrote tracking database to %s", path)
