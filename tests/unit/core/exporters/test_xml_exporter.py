from __future__ import annotations

"""
Unit tests for the XML-like Exporter.

Verifies:
1. Leaf block layout and lowercase tag names.
2. Root-only <Files> wrapper and flattening of nested directories.
3. Closing-tag behaviour: by default leaf blocks end with the opening tag
   repeated ('<audio>'), which is kept on purpose; 'close_tags=True'
   switches to a proper '</audio>'.
4. Text preview truncation and idempotence.
"""

import pytest

from fsvisitor.core.exporters.xml import XmlExporter
from fsvisitor.domain.file_models import (
    AudioFile,
    Directory,
    ImageFile,
    TextFile,
    VideoFile,
)

AUDIO_BLOCK = (
    "\t\t<audio>\n"
    "\t\t\t<title>A</title>\n"
    "\t\t\t<album>Al</album>\n"
    "\t\t\t<extension>mp3</extension>\n"
    "\t\t\t<size>1.00 KB</size>\n"
    "\t\t<audio>\n"
)


@pytest.fixture
def exporter() -> XmlExporter:
    return XmlExporter()


def test_title(exporter: XmlExporter) -> None:
    assert exporter.title == "Export files in XML format"


def test_root_with_single_audio_file(exporter: XmlExporter, audio_file: AudioFile) -> None:
    root = Directory("Root", level=0).add_file(audio_file)
    assert exporter.visit_directory(root) == f"<Files>\n{AUDIO_BLOCK}</Files>\n"


def test_leaf_closing_tag_repeats_opening_tag_by_default(
        exporter: XmlExporter, audio_file: AudioFile
) -> None:
    block = audio_file.accept(exporter)
    assert block == AUDIO_BLOCK
    assert "</audio>" not in block


def test_close_tags_option_emits_slashed_closing_tag(audio_file: AudioFile) -> None:
    block = audio_file.accept(XmlExporter(close_tags=True))
    assert block.endswith("\t\t</audio>\n")
    assert block.startswith("\t\t<audio>\n")


def test_image_block(exporter: XmlExporter) -> None:
    image = ImageFile("Shot", "png", 1024, resolution="1920x1080")
    assert image.accept(exporter) == (
        "\t\t<image>\n"
        "\t\t\t<title>Shot</title>\n"
        "\t\t\t<resolution>1920x1080</resolution>\n"
        "\t\t\t<extension>png</extension>\n"
        "\t\t\t<size>1.00 KB</size>\n"
        "\t\t<image>\n"
    )


def test_video_block(exporter: XmlExporter) -> None:
    video = VideoFile("Film", "mp4", 1024 ** 3, directed_by="Director")
    assert video.accept(exporter) == (
        "\t\t<video>\n"
        "\t\t\t<title>Film</title>\n"
        "\t\t\t<directed>Director</directed>\n"
        "\t\t\t<extension>mp4</extension>\n"
        "\t\t\t<size>1.00 GB</size>\n"
        "\t\t<video>\n"
    )


def test_text_block_truncates_content(exporter: XmlExporter) -> None:
    text = TextFile("Note", "txt", 10, content="x" * 31)
    assert f"\t\t\t<content>{'x' * 30}...</content>\n" in text.accept(exporter)


def test_non_root_directory_has_no_wrapper(exporter: XmlExporter, audio_file: AudioFile) -> None:
    nested = Directory("Nested", level=1).add_file(audio_file)
    assert nested.accept(exporter) == AUDIO_BLOCK


def test_empty_root_emits_only_wrapper(exporter: XmlExporter) -> None:
    assert Directory("Root").accept(exporter) == "<Files>\n</Files>\n"


def test_nested_tree_is_flattened_inside_single_wrapper(
        exporter: XmlExporter, mixed_tree: Directory
) -> None:
    output = mixed_tree.accept(exporter)

    assert output.startswith("<Files>\n")
    assert output.endswith("</Files>\n")
    assert output.count("<Files>") == 1
    assert output.count("</Files>") == 1

    # Leaf blocks appear depth-first in insertion order
    positions = [output.index(f"<title>{t}</title>") for t in ("Song", "Notes", "Cover", "Clip")]
    assert positions == sorted(positions)


def test_export_is_idempotent(exporter: XmlExporter, mixed_tree: Directory) -> None:
    assert mixed_tree.accept(exporter) == mixed_tree.accept(exporter)
