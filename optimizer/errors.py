# Errors surfaced to the CLI. The analysis core itself raises none of these.

from __future__ import annotations

from pathlib import Path


class OptimizerError(Exception):
    """Base class for errors reported by the command-line layer."""


class FileReadError(OptimizerError):
    """An input file (source, config or rules) could not be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read file '{path}': {cause}")


class UnsupportedLanguageError(OptimizerError):
    """A file extension does not map to any supported Language."""

    def __init__(self, path: Path, supported: tuple[str, ...]) -> None:
        self.path = path
        self.supported = supported
        super().__init__(
            f"could not determine the programming language of '{path}' from its extension. "
            f"Supported extensions are: {', '.join(supported)}"
        )
