# Per-file analysis context: source path, decoded text and detected language.
# Handles extension -> Language mapping and reading files, raising FileReadError /
# UnsupportedLanguageError so the CLI can report them and exit nonzero.

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from optimizer.errors import FileReadError, UnsupportedLanguageError
from optimizer.findings.models import Language

logger = logging.getLogger(__name__)

EXTENSION_LANGUAGES: Dict[str, Language] = {
    ".js": Language.JAVASCRIPT,
    ".ts": Language.JAVASCRIPT,
    ".py": Language.PYTHON,
    ".rs": Language.RUST,
}

SUPPORTED_EXTENSIONS: Tuple[str, ...] = tuple(EXTENSION_LANGUAGES)


def detect_language(path: Path) -> Optional[Language]:
    """Return the Language for a path's extension, or None if unsupported."""
    return EXTENSION_LANGUAGES.get(path.suffix.lower())


class FileContext:
    """
    Per-file state for analysis: path, source text, and language.

    The engine only needs ``source`` and ``language``; ``path`` is kept so
    reporting can group suggestions by file.
    """

    def __init__(self, path: Path, source: str, language: Language) -> None:
        self.path = path
        self.source = source
        self.language = language

    @property
    def line_count(self) -> int:
        return len(self.source.splitlines())


def read_source(path: Path) -> str:
    """Read a file as UTF-8 text; raises FileReadError on any read or decode failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read file %s: %s", path, e)
        raise FileReadError(path, e) from e


def create_context(path: Path) -> FileContext:
    """
    Detect the language of ``path`` and read it into a FileContext.

    Language detection comes first, so an unsupported file is rejected without
    being opened.

    Raises:
        UnsupportedLanguageError: extension is not one of SUPPORTED_EXTENSIONS.
        FileReadError: file could not be read or is not valid UTF-8.
    """
    language = detect_language(path)
    if language is None:
        raise UnsupportedLanguageError(path, SUPPORTED_EXTENSIONS)

    source = read_source(path)
    ctx = FileContext(path=path, source=source, language=language)
    logger.info("Loaded %s: %d line(s) of %s", path, ctx.line_count, language.value)
    return ctx


def load_contexts(paths: list[Path]) -> list[FileContext]:
    """
    Read multiple files into FileContexts.

    Unreadable or unsupported files are skipped (logged). Order matches input
    order; failed files are omitted.
    """
    contexts: list[FileContext] = []
    for path in paths:
        try:
            contexts.append(create_context(path))
        except UnsupportedLanguageError:
            logger.warning("Skipping %s: unsupported file extension", path)
        except FileReadError:
            continue
    return contexts
