from __future__ import annotations

"""
fsvisitor.

Composite file/directory model with visitor-based text exporters.
"""

from fsvisitor.core.exporters import HumanReadableExporter, XmlExporter
from fsvisitor.domain.file_models import (
    AudioFile,
    Directory,
    FileNode,
    ImageFile,
    TextFile,
    VideoFile,
)
from fsvisitor.domain.visitor import FileVisitor
from fsvisitor.utils.units import bytes_to_string

__version__ = "1.0.0"

__all__ = [
    "AudioFile",
    "Directory",
    "FileNode",
    "FileVisitor",
    "HumanReadableExporter",
    "ImageFile",
    "TextFile",
    "VideoFile",
    "XmlExporter",
    "bytes_to_string",
]
