from __future__ import annotations

"""
File and Directory Data Models.

Implements the composite tree exported by the visitors: four immutable
leaf variants (audio, image, text, video) and a Directory node that owns
an ordered list of children and aggregates their sizes on demand.

Directories follow a two-phase lifecycle. While building, children are
appended with 'add_file'. Once 'freeze' is called the whole subtree is
published read-only and further mutation raises FrozenTreeError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple, Union

if TYPE_CHECKING:
    from fsvisitor.domain.visitor import FileVisitor

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class FileTreeError(Exception):
    """Base class for structural errors in the file tree."""


class FrozenTreeError(FileTreeError):
    """Raised when mutating a directory after it has been frozen."""


class TreeCycleError(FileTreeError):
    """Raised when adding a directory would make the tree contain itself."""

# -----------------------------------------------------------------------------
# NODE CAPABILITY
# -----------------------------------------------------------------------------

class FileNode(ABC):
    """
    Common capability shared by every node of the tree.

    Each node decides which visitor method applies to it, so visitors
    never inspect node types themselves.
    """

    title: str

    @abstractmethod
    def get_size(self) -> int:
        """Return the size of the node in bytes."""

    @abstractmethod
    def accept(self, visitor: FileVisitor) -> str:
        """Dispatch to the visitor method matching this node kind."""

# -----------------------------------------------------------------------------
# LEAF VARIANTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _LeafFile(FileNode):
    """
    Shared storage and validation for leaf files.

    Attributes:
        title: Display name of the file.
        file_extension: Extension without the leading dot (e.g. 'mp3').
        size: Stored size in bytes.
    """
    title: str
    file_extension: str
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(
                f"File '{self.title}': size must be int, received {type(self.size).__name__}."
            )
        if self.size < 0:
            raise ValueError(f"File '{self.title}': size cannot be negative ({self.size}).")

    def get_size(self) -> int:
        return self.size


@dataclass(frozen=True)
class AudioFile(_LeafFile):
    """Audio track carrying the album it belongs to."""
    album_title: str = ""

    def accept(self, visitor: FileVisitor) -> str:
        return visitor.visit_audio_file(self)


@dataclass(frozen=True)
class ImageFile(_LeafFile):
    """Image carrying its resolution label (e.g. '1920x1080')."""
    resolution: str = ""

    def accept(self, visitor: FileVisitor) -> str:
        return visitor.visit_image_file(self)


@dataclass(frozen=True)
class TextFile(_LeafFile):
    """Plain text document carrying its full content."""
    content: str = ""

    def accept(self, visitor: FileVisitor) -> str:
        return visitor.visit_text_file(self)


@dataclass(frozen=True)
class VideoFile(_LeafFile):
    """Video carrying the name of its director."""
    directed_by: str = ""

    def accept(self, visitor: FileVisitor) -> str:
        return visitor.visit_video_file(self)


LeafFile = Union[AudioFile, ImageFile, TextFile, VideoFile]

# -----------------------------------------------------------------------------
# COMPOSITE
# -----------------------------------------------------------------------------

class Directory(FileNode):
    """
    Composite node owning an ordered sequence of files and directories.

    The size is never cached: every call to 'get_size' walks the current
    children, so it always reflects the latest structure.

    Attributes:
        title: Display name of the directory (read-only).
        level: Nesting depth, 0 for the root directory (read-only).
    """

    def __init__(self, title: str, level: int = 0):
        if level < 0:
            raise ValueError(f"Directory '{title}': level cannot be negative ({level}).")
        self._title = title
        self._level = level
        self._files: List[FileNode] = []
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"Directory(title={self.title!r}, level={self.level}, "
            f"files={len(self._files)}, frozen={self._frozen})"
        )

    def __iter__(self) -> Iterator[FileNode]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    @property
    def title(self) -> str:
        return self._title

    @property
    def level(self) -> int:
        return self._level

    @property
    def files(self) -> Tuple[FileNode, ...]:
        """Read-only view of the direct children, in insertion order."""
        return tuple(self._files)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def add_file(self, node: FileNode) -> Directory:
        """
        Append a child node. Allowed only before the directory is frozen.

        Args:
            node: Leaf file or nested directory.

        Returns:
            Directory: self, to allow chained construction.

        Raises:
            FrozenTreeError: If the directory has been frozen.
            TreeCycleError: If the node is this directory or contains it.
        """
        if self._frozen:
            raise FrozenTreeError(f"Directory '{self.title}' is frozen; cannot add '{node.title}'.")
        if isinstance(node, Directory) and (node is self or node.contains(self)):
            raise TreeCycleError(
                f"Adding '{node.title}' to '{self.title}' would create a cycle."
            )
        self._files.append(node)
        return self

    def contains(self, node: FileNode) -> bool:
        """Return True if the node appears anywhere below this directory."""
        for child in self._files:
            if child is node:
                return True
            if isinstance(child, Directory) and child.contains(node):
                return True
        return False

    def freeze(self) -> Directory:
        """Publish this directory and its whole subtree as read-only."""
        self._frozen = True
        for child in self._files:
            if isinstance(child, Directory):
                child.freeze()
        return self

    def iter_files(self) -> Iterator[FileNode]:
        """Yield every leaf file below this directory, depth-first."""
        for child in self._files:
            if isinstance(child, Directory):
                yield from child.iter_files()
            else:
                yield child

    def get_size(self) -> int:
        return sum(child.get_size() for child in self._files)

    def accept(self, visitor: FileVisitor) -> str:
        return visitor.visit_directory(self)
