"""File type indicators for the selected file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class FileType:
    """Icon and colour shown next to the selected file name."""

    label: str
    icon: str
    color: str


DEFAULT_TYPE = FileType("file", "📄", "#969696")

_TYPES: Tuple[Tuple[FileType, Tuple[str, ...]], ...] = (
    (FileType("text", "📄", "#7878dc"), ("txt", "md", "rtf")),
    (FileType("pdf", "📑", "#dc5050"), ("pdf",)),
    (FileType("image", "🖼️", "#50b450"), ("jpg", "jpeg", "png", "gif", "bmp", "tiff")),
    (FileType("audio", "🎵", "#b478b4"), ("mp3", "wav", "ogg", "flac")),
    (FileType("video", "🎬", "#78b4dc"), ("mp4", "avi", "mov", "mkv")),
    (FileType("archive", "🗜️", "#b4a050"), ("zip", "tar", "gz", "7z", "rar")),
    (FileType("executable", "📦", "#c86464"), ("exe", "app", "dmg")),
    (FileType("web", "🌐", "#64b4c8"), ("html", "css", "js")),
    (FileType("source", "📝", "#78c878"), ("py", "rs", "c", "cpp", "java")),
)

EXTENSION_TYPES: Dict[str, FileType] = {
    ext: file_type for file_type, extensions in _TYPES for ext in extensions
}


def file_type_for(path: Union[str, Path]) -> FileType:
    """
    Look up the display type of a file by its extension.

    Args:
        path: File path or name

    Returns:
        Matching FileType, or DEFAULT_TYPE for unknown extensions
    """
    suffix = Path(path).suffix.lower().lstrip(".")
    return EXTENSION_TYPES.get(suffix, DEFAULT_TYPE)


def display_name(path: Union[str, Path]) -> str:
    """Get file name for display (never the full path)."""
    name = Path(path).name
    return name or "Unknown file"
