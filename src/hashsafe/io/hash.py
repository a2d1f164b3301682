"""Hash helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union

from hashsafe.constants import CHUNK_SIZE


def sha256_file(path: Union[str, Path], chunk_size: int = CHUNK_SIZE) -> str:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    hasher = hashlib.sha256()
    with Path(path).open("rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.hexdigest()


def describe_io_error(exc: OSError) -> str:
    """Human-readable message for a failed open or read."""
    if isinstance(exc, FileNotFoundError):
        reason = "file not found"
    elif isinstance(exc, PermissionError):
        reason = "permission denied"
    elif isinstance(exc, IsADirectoryError):
        reason = "is a directory"
    else:
        reason = exc.strerror or str(exc)
    if exc.filename is not None:
        return f"{reason}: {exc.filename}"
    return reason
