from __future__ import annotations

"""
Literal Tree Builder.

Assembles a frozen Directory tree from nested literal dictionaries.
Directory levels are derived from nesting depth, so callers never set
them by hand.

Directory spec:  {"title": str, "children": [spec, ...]}
Leaf spec:       {"type": "audio" | "image" | "text" | "video",
                  "title": str, "extension": str, "size": int, <detail>: str}

The detail key is 'album_title', 'resolution', 'content' or 'directed_by'
depending on the leaf type.
"""

import logging
from typing import Any, Dict, Mapping, Tuple, Type

from fsvisitor.domain.file_models import (
    AudioFile,
    Directory,
    FileNode,
    ImageFile,
    TextFile,
    VideoFile,
    _LeafFile,
)

logger = logging.getLogger(__name__)

# Leaf type -> (model class, type-specific field)
_LEAF_TYPES: Dict[str, Tuple[Type[_LeafFile], str]] = {
    "audio": (AudioFile, "album_title"),
    "image": (ImageFile, "resolution"),
    "text": (TextFile, "content"),
    "video": (VideoFile, "directed_by"),
}


class TreeSpecError(ValueError):
    """Raised when a literal tree description is malformed."""


def build_tree(spec: Mapping[str, Any], *, freeze: bool = True) -> Directory:
    """
    Build a directory tree from a nested literal description.

    Args:
        spec: Root directory description.
        freeze: Publish the resulting tree as read-only.

    Returns:
        Directory: Root directory at level 0.

    Raises:
        TreeSpecError: If any node description is malformed.
    """
    if not isinstance(spec, Mapping) or "children" not in spec:
        raise TreeSpecError("Root description must be a directory with 'children'.")

    root = _build_directory(spec, level=0, path="")
    if freeze:
        root.freeze()

    logger.debug(f"Built tree '{root.title}' with {sum(1 for _ in root.iter_files())} files")
    return root


def _build_node(spec: Any, level: int, path: str) -> FileNode:
    if not isinstance(spec, Mapping):
        raise TreeSpecError(f"{path or '/'}: expected a mapping, received {type(spec).__name__}.")
    if "children" in spec:
        return _build_directory(spec, level, path)
    return _build_leaf(spec, path)


def _build_directory(spec: Mapping[str, Any], level: int, path: str) -> Directory:
    title = _require_str(spec, "title", path)
    here = f"{path}/{title}"

    children = spec["children"]
    if not isinstance(children, (list, tuple)):
        raise TreeSpecError(f"{here}: 'children' must be a list.")

    directory = Directory(title, level=level)
    for child in children:
        directory.add_file(_build_node(child, level + 1, here))
    return directory


def _build_leaf(spec: Mapping[str, Any], path: str) -> FileNode:
    title = _require_str(spec, "title", path)
    here = f"{path}/{title}"

    leaf_type = str(spec.get("type", "")).strip().lower()
    if leaf_type not in _LEAF_TYPES:
        raise TreeSpecError(
            f"{here}: unknown file type '{spec.get('type')}'. "
            f"Expected one of: {', '.join(_LEAF_TYPES)}."
        )
    cls, detail_field = _LEAF_TYPES[leaf_type]

    try:
        return cls(
            title=title,
            file_extension=str(spec.get("extension", "")),
            size=spec.get("size", 0),
            **{detail_field: str(spec.get(detail_field, ""))},
        )
    except (TypeError, ValueError) as e:
        raise TreeSpecError(f"{here}: {e}") from e


def _require_str(spec: Mapping[str, Any], key: str, path: str) -> str:
    value = spec.get(key)
    if not isinstance(value, str) or not value.strip():
        raise TreeSpecError(f"{path or '/'}: missing or empty '{key}'.")
    return value
