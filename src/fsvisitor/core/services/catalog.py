from __future__ import annotations

"""
Sample Catalog.

Literal description of the demo library (media and documents) and the
factory that turns it into a frozen tree.
"""

from typing import Any, Dict

from fsvisitor.core.services.tree_builder import build_tree
from fsvisitor.domain.file_models import Directory

SAMPLE_TREE: Dict[str, Any] = {
    "title": "Root",
    "children": [
        {
            "title": "Media",
            "children": [
                {
                    "title": "Music",
                    "children": [
                        {"type": "audio", "title": "Darude - Sandstorm", "album_title": "Before the Storm",
                         "extension": "mp3", "size": 2612453},
                        {"type": "audio", "title": "Toto - Africa", "album_title": "Toto IV",
                         "extension": "mp3", "size": 3219811},
                        {"type": "audio", "title": "Bag Raiders - Shooting Stars", "album_title": "Bag Raiders",
                         "extension": "mp3", "size": 3811214},
                    ],
                },
                {
                    "title": "Movies",
                    "children": [
                        {"type": "video", "title": "The Matrix", "directed_by": "The Wachowskis",
                         "extension": "avi", "size": 951495532},
                        {"type": "video", "title": "Pulp Fiction", "directed_by": "Quentin Tarantino",
                         "extension": "mp4", "size": 1073741824},
                    ],
                },
                {"type": "image", "title": "Screenshot", "resolution": "1920x1080",
                 "extension": "png", "size": 262144},
            ],
        },
        {
            "title": "Documents",
            "children": [
                {"type": "text", "title": "Nothing Else Matters", "extension": "txt", "size": 1024,
                 "content": "So close, no matter how far. Couldn't be much more from the heart."},
                {"type": "text", "title": "Todo", "extension": "txt", "size": 67,
                 "content": "Buy milk. Call mom."},
                {"type": "image", "title": "Family Photo", "resolution": "3840x2160",
                 "extension": "jpg", "size": 3145728},
            ],
        },
        {"type": "text", "title": "README", "extension": "md", "size": 0, "content": ""},
    ],
}


def build_sample_tree() -> Directory:
    """Build a fresh, frozen copy of the demo library."""
    return build_tree(SAMPLE_TREE)
