from __future__ import annotations

"""
Visitor Protocol.

Declares one operation per node kind. Nodes call back the method that
matches their own kind from 'accept', which resolves the (node kind,
operation) pair through two single-dispatch calls.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsvisitor.domain.file_models import (
        AudioFile,
        Directory,
        ImageFile,
        TextFile,
        VideoFile,
    )


class FileVisitor(ABC):
    """
    Abstract base class for operations performed over the file tree.

    Every method returns the text fragment for the subtree rooted at the
    visited node.
    """

    @property
    @abstractmethod
    def title(self) -> str:
        """Human label describing the operation."""

    @abstractmethod
    def visit_audio_file(self, file: AudioFile) -> str:
        pass

    @abstractmethod
    def visit_image_file(self, file: ImageFile) -> str:
        pass

    @abstractmethod
    def visit_text_file(self, file: TextFile) -> str:
        pass

    @abstractmethod
    def visit_video_file(self, file: VideoFile) -> str:
        pass

    @abstractmethod
    def visit_directory(self, directory: Directory) -> str:
        pass
