"""Tests for optimizer.context: language detection, create_context, load_contexts."""

from pathlib import Path

import pytest

from optimizer.context import (
    SUPPORTED_EXTENSIONS,
    FileContext,
    create_context,
    detect_language,
    load_contexts,
)
from optimizer.errors import FileReadError, UnsupportedLanguageError
from optimizer.findings.models import Language


@pytest.mark.parametrize(
    "name, language",
    [
        ("app.js", Language.JAVASCRIPT),
        ("app.ts", Language.JAVASCRIPT),
        ("main.py", Language.PYTHON),
        ("lib.rs", Language.RUST),
        ("MAIN.PY", Language.PYTHON),
    ],
)
def test_detect_language(name, language):
    assert detect_language(Path(name)) == language


@pytest.mark.parametrize("name", ["main.c", "README.md", "Makefile", "script.py.bak"])
def test_detect_language_unsupported(name):
    assert detect_language(Path(name)) is None


def test_supported_extensions():
    assert SUPPORTED_EXTENSIONS == (".js", ".ts", ".py", ".rs")


def test_create_context_reads_source(tmp_path):
    py_file = tmp_path / "main.py"
    py_file.write_text("import os.path\nprint(1)\n", encoding="utf-8")
    ctx = create_context(py_file)
    assert ctx.path == py_file
    assert ctx.source == "import os.path\nprint(1)\n"
    assert ctx.language == Language.PYTHON
    assert ctx.line_count == 2


def test_create_context_nonexistent():
    path = Path("/nonexistent/file.py")
    with pytest.raises(FileReadError) as exc_info:
        create_context(path)
    assert exc_info.value.path == path
    assert "/nonexistent/file.py" in str(exc_info.value)


def test_create_context_unsupported_extension(tmp_path):
    c_file = tmp_path / "main.c"
    c_file.write_text("int main(void) { return 0; }\n", encoding="utf-8")
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        create_context(c_file)
    message = str(exc_info.value)
    for ext in (".js", ".ts", ".py", ".rs"):
        assert ext in message


def test_create_context_invalid_utf8(tmp_path):
    bad = tmp_path / "bad.rs"
    bad.write_bytes(b"fn main() { \xff\xfe }\n")
    with pytest.raises(FileReadError):
        create_context(bad)


def test_file_context_line_count_empty():
    ctx = FileContext(path=Path("x.js"), source="", language=Language.JAVASCRIPT)
    assert ctx.line_count == 0


def test_load_contexts(tmp_path):
    a = tmp_path / "a.py"
    b = tmp_path / "b.rs"
    a.write_text("x = 1\n", encoding="utf-8")
    b.write_text("fn main() {}\n", encoding="utf-8")
    contexts = load_contexts([a, b])
    assert [c.path for c in contexts] == [a, b]
    assert [c.language for c in contexts] == [Language.PYTHON, Language.RUST]


def test_load_contexts_skips_unreadable_and_unsupported(tmp_path):
    a = tmp_path / "a.js"
    a.write_text("let x = 1;\n", encoding="utf-8")
    notes = tmp_path / "notes.txt"
    notes.write_text("hello\n", encoding="utf-8")
    contexts = load_contexts([a, tmp_path / "missing.py", notes])
    assert len(contexts) == 1
    assert contexts[0].path == a
