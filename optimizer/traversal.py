"""
File system traversal: walk directories and collect supported source files.

Collects files whose extension maps to a Language (.js, .ts, .py, .rs),
skipping build output, dependency, VCS and cache directories.

Typical usage:
    from pathlib import Path
    from optimizer.findings.models import Language
    from optimizer.traversal import find_source_files

    # Every supported file
    files = find_source_files(Path("./my_project"))

    # Only Python files, custom ignore set
    py_files = find_source_files(
        Path("./my_project"),
        languages={Language.PYTHON},
        ignore_dirs={"build", "venv"},
    )
"""

import logging
from pathlib import Path
from typing import Collection, Optional, Set

from optimizer.context import detect_language
from optimizer.findings.models import Language

logger = logging.getLogger(__name__)

# Default directories to ignore during traversal
DEFAULT_IGNORE_DIRS: Set[str] = {
    # Build and distribution directories
    "build",
    "dist",
    "out",
    "target",

    # Dependency and package directories
    "node_modules",
    "vendor",
    "third_party",

    # Version control
    ".git",
    ".svn",
    ".hg",

    # IDE and editor directories
    ".vscode",
    ".idea",

    # Python virtual environments
    "venv",
    ".venv",
    "env",

    # Cache directories
    "__pycache__",
    ".cache",
    ".pytest_cache",
    ".mypy_cache",
}


def is_source_file(path: Path, languages: Optional[Collection[Language]] = None) -> bool:
    """
    Check if a file has a supported extension (optionally limited to ``languages``).

    Examples:
        >>> is_source_file(Path("app.py"))
        True
        >>> is_source_file(Path("app.py"), languages={Language.RUST})
        False
        >>> is_source_file(Path("README.md"))
        False
    """
    language = detect_language(path)
    if language is None:
        return False
    return languages is None or language in languages


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    """Check the directory name (not the full path) against ``ignore_dirs``."""
    return dir_path.name in ignore_dirs


def find_source_files(
    root: Path,
    languages: Optional[Collection[Language]] = None,
    ignore_dirs: Optional[Set[str]] = None,
) -> list[Path]:
    """
    Recursively find all supported source files in a directory tree.

    Args:
        root: Root directory to start traversal from.
        languages: Only collect files of these languages; None means all.
        ignore_dirs: Directory names to skip. If None, uses DEFAULT_IGNORE_DIRS.

    Returns:
        Matching files, sorted by path.

    Raises:
        FileNotFoundError: root does not exist.
        NotADirectoryError: root is not a directory.

    Symlinks are skipped. Permission errors on subdirectories are logged and
    do not stop traversal.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    root = root.resolve()

    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")

    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)

    collected_files: list[Path] = []

    def _walk_directory(current_dir: Path) -> None:
        try:
            for entry in current_dir.iterdir():
                if entry.is_symlink():
                    logger.debug("Skipping symlink: %s", entry)
                    continue

                if entry.is_dir():
                    if should_ignore_directory(entry, ignore_dirs):
                        logger.debug("Ignoring directory: %s", entry)
                        continue
                    _walk_directory(entry)

                elif entry.is_file() and is_source_file(entry, languages):
                    collected_files.append(entry)

        except OSError as e:
            logger.warning("Error accessing directory %s: %s", current_dir, e)

    _walk_directory(root)
    collected_files.sort()

    logger.info(
        "Traversal complete: found %d source file(s) in %s",
        len(collected_files),
        root,
    )
    return collected_files
