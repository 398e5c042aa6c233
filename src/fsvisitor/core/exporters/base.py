from __future__ import annotations

"""
Shared Exporter Behaviour.

Holds the pieces common to every text exporter: child traversal in
insertion order and the truncated preview of text content.
"""

from typing import TYPE_CHECKING

from fsvisitor.domain.constants import DEFAULT_PREVIEW_LENGTH, PREVIEW_ELLIPSIS
from fsvisitor.domain.visitor import FileVisitor

if TYPE_CHECKING:
    from fsvisitor.domain.file_models import Directory


class BaseExporter(FileVisitor):
    """
    Base class for visitors that serialize the tree into text.

    Exporters hold no state between calls, so visiting the same tree twice
    yields the same string.
    """

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH):
        if preview_length < 1:
            raise ValueError(f"preview_length must be >= 1, received {preview_length}.")
        self.preview_length = preview_length

    def _visit_children(self, directory: Directory) -> str:
        """Concatenate the fragments of every child, depth-first."""
        return "".join(child.accept(self) for child in directory.files)

    def _preview(self, content: str) -> str:
        """Cut content longer than the preview length and mark the cut."""
        if len(content) <= self.preview_length:
            return content
        return f"{content[:self.preview_length]}{PREVIEW_ELLIPSIS}"
