from __future__ import annotations

"""
Human-Readable Exporter.

Renders each file as a title line followed by tab-indented 'Label:value'
lines. Directories add no header of their own, so nested structure is
flattened into a sequence of per-file blocks.
"""

from typing import TYPE_CHECKING, Dict

from fsvisitor.core.exporters.base import BaseExporter
from fsvisitor.utils.units import bytes_to_string

if TYPE_CHECKING:
    from fsvisitor.domain.file_models import (
        AudioFile,
        Directory,
        ImageFile,
        TextFile,
        VideoFile,
    )


class HumanReadableExporter(BaseExporter):
    """Labelled plain-text report meant to be read by people."""

    @property
    def title(self) -> str:
        return "Export files in human readable format"

    def visit_audio_file(self, file: AudioFile) -> str:
        file_info = {
            "Album": file.album_title,
            "Extension": file.file_extension,
            "Size": bytes_to_string(file.get_size()),
        }
        return self._format_file(file.title, file_info)

    def visit_image_file(self, file: ImageFile) -> str:
        file_info = {
            "Resolution": file.resolution,
            "Extension": file.file_extension,
            "Size": bytes_to_string(file.get_size()),
        }
        return self._format_file(file.title, file_info)

    def visit_text_file(self, file: TextFile) -> str:
        file_info = {
            "Content": self._preview(file.content),
            "Extension": file.file_extension,
            "Size": bytes_to_string(file.get_size()),
        }
        return self._format_file(file.title, file_info)

    def visit_video_file(self, file: VideoFile) -> str:
        file_info = {
            "Directed by": file.directed_by,
            "Extension": file.file_extension,
            "Size": bytes_to_string(file.get_size()),
        }
        return self._format_file(file.title, file_info)

    def visit_directory(self, directory: Directory) -> str:
        return self._visit_children(directory)

    def _format_file(self, title: str, file_info: Dict[str, str]) -> str:
        lines = [f"{title}\n"]
        for label, value in file_info.items():
            lines.append(f"\t{label}:{value}\n")
        return "".join(lines)
