#!/usr/bin/env python3
"""
temporal_files.py
--------------------
Staged file writes for generated reports.

Reports are written to a temporary file next to their destination and only
moved into place once fully written, so an interrupted run never leaves a
half-written TOTAL.md or time.csv behind.

Classes:
    TemporalFileManager: Tracks staged files and removes leftovers on exit

Usage:
    from worktools.core.temporal_files import TemporalFileManager

    with TemporalFileManager(output.parent) as temp_manager:
        staged = temp_manager.create_temp_file(suffix=".csv")
        staged.write_text(content, encoding="utf-8")
        temp_manager.commit(staged, output)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from .exceptions import TemporalFileError


def _default_file_mode() -> int:
    """Permissions a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class TemporalFileManager:
    """
    Manages staged files with automatic cleanup.

    Files created through the manager are removed on exit unless they were
    committed to their final location.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        """
        Initialize temporal file manager.

        Args:
            base_dir: Directory for staged files. Uses system temp if None.
                Use the destination directory so commits are same-filesystem moves.
        """
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self.active_files: List[Path] = []

    def create_temp_file(self, suffix: str = "", prefix: str = ".worktools_") -> Path:
        """
        Create an empty staged file and track it for cleanup.

        Raises:
            TemporalFileError: If file creation fails
        """
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            temp_file_obj = tempfile.NamedTemporaryFile(
                suffix=suffix, prefix=prefix, dir=self.base_dir, delete=False
            )
            temp_file_obj.close()
        except OSError as e:
            raise TemporalFileError(f"Failed to create temporary file: {e}") from e

        temp_path = Path(temp_file_obj.name)
        self.active_files.append(temp_path)
        return temp_path

    def commit(self, temp_path: Path, final_path: Path) -> Path:
        """
        Move a staged file to its final location and stop tracking it.

        The staged file is created private (0600). Before the move it takes the
        mode of the file it replaces, or the umask default for a new file.

        Raises:
            TemporalFileError: If the file is not tracked or the move fails
        """
        if temp_path not in self.active_files:
            raise TemporalFileError(f"Not a staged file: {temp_path}")

        try:
            if final_path.exists():
                mode = stat.S_IMODE(final_path.stat().st_mode)
            else:
                mode = _default_file_mode()
            os.chmod(temp_path, mode)
            shutil.move(str(temp_path), str(final_path))
        except OSError as e:
            raise TemporalFileError(
                f"Failed to move {temp_path.name} to {final_path}: {e}"
            ) from e

        self.active_files.remove(temp_path)
        return final_path

    def cleanup(self) -> Dict[str, int]:
        """
        Remove all staged files that were never committed.

        Returns:
            Dictionary with cleanup statistics
        """
        cleanup_stats = {"files_removed": 0, "errors": 0}

        for temp_file in self.active_files[:]:
            try:
                if temp_file.exists():
                    temp_file.unlink()
                    cleanup_stats["files_removed"] += 1
                self.active_files.remove(temp_file)
            except OSError:
                cleanup_stats["errors"] += 1

        return cleanup_stats

    def __enter__(self) -> "TemporalFileManager":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Optional[Any],
    ) -> None:
        """Context manager exit with automatic cleanup."""
        del exc_type, exc_val, exc_tb
        self.cleanup()
