from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory (config and logs) per test.
3. Shared tree fixtures used across exporter and service tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsvisitor.domain.file_models import (  # noqa: E402
    AudioFile,
    Directory,
    ImageFile,
    TextFile,
    VideoFile,
)


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME/LOCALAPPDATA to a temporary folder so no test touches ~/.fsvisitor."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def audio_file() -> AudioFile:
    return AudioFile("A", "mp3", 1024, album_title="Al")


@pytest.fixture
def mixed_tree() -> Directory:
    """
    Build a small nested tree mixing every node kind.

    Structure:
    Root (level 0)
      Song (audio, 1024)
      Docs (level 1)
        Notes (text, 2048)
        Deep (level 2)
          Cover (image, 4096)
      Clip (video, 8192)
    """
    deep = Directory("Deep", level=2)
    deep.add_file(ImageFile("Cover", "png", 4096, resolution="800x600"))

    docs = Directory("Docs", level=1)
    docs.add_file(TextFile("Notes", "txt", 2048, content="short note"))
    docs.add_file(deep)

    root = Directory("Root")
    root.add_file(AudioFile("Song", "mp3", 1024, album_title="Album"))
    root.add_file(docs)
    root.add_file(VideoFile("Clip", "mp4", 8192, directed_by="Someone"))
    return root.freeze()
