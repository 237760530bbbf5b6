"""File emission for generated projects.

Writes are executed in a worker thread (``asyncio.to_thread``) and awaited
one at a time, so a write never observes a half-finished sibling write.
There is no retry and no atomic rename; ``OSError`` propagates unchanged.
"""

from __future__ import annotations

import asyncio
from pathlib import Path


class FileEmitter:
    """Materialises directories and files below a project root.

    Attributes:
        root: Project root; every path handed to the emitter is relative to it.
        written: Files written so far, in write order.
        directories: Directories ensured so far, in creation order.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self.written: list[Path] = []
        self.directories: list[Path] = []

    async def ensure_directories(self, relative_dirs: list[str]) -> list[Path]:
        """Create each directory (and its parents) if missing."""
        created: list[Path] = []
        for rel in relative_dirs:
            path = self.root / rel
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            if path not in self.directories:
                self.directories.append(path)
            created.append(path)
        return created

    async def emit(self, relative_path: str, content: str) -> Path:
        """Write *content* to ``root / relative_path``, replacing any existing file.

        Returns:
            The absolute path that was written.
        """
        path = self.root / relative_path
        await asyncio.to_thread(_write_file, path, content)
        self.written.append(path)
        return path


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
