from __future__ import annotations

"""
XML-like Exporter.

Renders each file as a tag-delimited block and wraps the root directory
in a <Files> element. The output is a presentation format: values are not
escaped and, unless 'close_tags' is enabled, leaf blocks end with a
repeated opening tag instead of a closing one.
"""

from typing import TYPE_CHECKING, Dict

from fsvisitor.core.exporters.base import BaseExporter
from fsvisitor.domain.constants import DEFAULT_PREVIEW_LENGTH
from fsvisitor.utils.units import bytes_to_string

if TYPE_CHECKING:
    from fsvisitor.domain.file_models import (
        AudioFile,
        Directory,
        ImageFile,
        TextFile,
        VideoFile,
    )

ROOT_OPEN_TAG = "<Files>\n"
ROOT_CLOSE_TAG = "</Files>\n"


class XmlExporter(BaseExporter):
    """
    Tag-based report of the tree.

    Args:
        preview_length: Maximum characters of text content before truncation.
        close_tags: Emit '</type>' at the end of leaf blocks instead of the
            historical '<type>' line.
    """

    def __init__(self, preview_length: int = DEFAULT_PREVIEW_LENGTH, close_tags: bool = False):
        super().__init__(preview_length=preview_length)
        self.close_tags = close_tags

    @property
    def title(self) -> str:
        return "Export files in XML format"

    def visit_audio_file(self, file: AudioFile) -> str:
        file_info = {
            "title": file.title,
            "album": file.album_title,
            "extension": file.file_extension,
            "size": bytes_to_string(file.get_size()),
        }
        return self._format_file("audio", file_info)

    def visit_image_file(self, file: ImageFile) -> str:
        file_info = {
            "title": file.title,
            "resolution": file.resolution,
            "extension": file.file_extension,
            "size": bytes_to_string(file.get_size()),
        }
        return self._format_file("image", file_info)

    def visit_text_file(self, file: TextFile) -> str:
        file_info = {
            "title": file.title,
            "content": self._preview(file.content),
            "extension": file.file_extension,
            "size": bytes_to_string(file.get_size()),
        }
        return self._format_file("text", file_info)

    def visit_video_file(self, file: VideoFile) -> str:
        file_info = {
            "title": file.title,
            "directed": file.directed_by,
            "extension": file.file_extension,
            "size": bytes_to_string(file.get_size()),
        }
        return self._format_file("video", file_info)

    def visit_directory(self, directory: Directory) -> str:
        body = self._visit_children(directory)
        if directory.level != 0:
            return body
        return f"{ROOT_OPEN_TAG}{body}{ROOT_CLOSE_TAG}"

    def _format_file(self, file_type: str, file_info: Dict[str, str]) -> str:
        lines = [f"\t\t<{file_type}>\n"]
        for tag, value in file_info.items():
            lines.append(f"\t\t\t<{tag}>{value}</{tag}>\n")

        # Leaf blocks historically end with the opening tag repeated
        closing = f"</{file_type}>" if self.close_tags else f"<{file_type}>"
        lines.append(f"\t\t{closing}\n")
        return "".join(lines)
