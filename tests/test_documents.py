"""Tests for document loading, saving and language detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsoneditor.core.documents import (
    DEFAULT_LANGUAGE,
    Document,
    detect_language,
    load_document,
    save_document,
)


class TestDetectLanguage:
    """Tests for detect_language function."""

    @pytest.mark.parametrize(
        "filename, language",
        [
            ("data.json", "json"),
            ("DATA.JSON", "json"),
            ("dir/nested.json", "json"),
            ("notes.txt", DEFAULT_LANGUAGE),
            ("data.jsonl", DEFAULT_LANGUAGE),
            ("README", DEFAULT_LANGUAGE),
        ],
    )
    def test_detection(self, filename, language):
        """Only .json files are JSON documents."""
        assert detect_language(filename) == language


class TestDocument:
    """Tests for the Document class."""

    def test_identity_equality(self):
        """Documents with the same content are not equal."""
        a = Document(title="a", text="{}")
        b = Document(title="a", text="{}")
        assert a != b
        assert a == a

    def test_untitled_titles_are_unique(self):
        """Each untitled document gets its own title."""
        first = Document.untitled()
        second = Document.untitled()

        assert first.title.startswith("Untitled-")
        assert first.title != second.title
        assert first.is_untitled
        assert first.is_json

    def test_untitled_with_language(self):
        """Untitled documents can hold other languages."""
        doc = Document.untitled("plaintext", "hi")
        assert not doc.is_json
        assert doc.text == "hi"


class TestLoadDocument:
    """Tests for load_document function."""

    def test_loads_json_file(self, tmp_path, left_text):
        """A .json file loads as a JSON document."""
        path = tmp_path / "left.json"
        path.write_text(left_text, encoding="utf-8")

        doc = load_document(str(path))

        assert doc.text == left_text
        assert doc.title == "left.json"
        assert doc.is_json
        assert doc.path == path

    def test_loads_other_file(self, tmp_path):
        """Other extensions load as plain text."""
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        assert not load_document(str(path)).is_json

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_document(str(tmp_path / "missing.json"))


class TestSaveDocument:
    """Tests for save_document function."""

    def test_save_to_own_path(self, tmp_path):
        """A loaded document saves back to its file."""
        path = tmp_path / "data.json"
        path.write_text("{}", encoding="utf-8")
        doc = load_document(str(path))
        doc.text = '{"a": 1}'

        assert save_document(doc) == path
        assert path.read_text(encoding="utf-8") == '{"a": 1}'

    def test_save_untitled_requires_filename(self):
        """An untitled document cannot be saved without a filename."""
        with pytest.raises(ValueError):
            save_document(Document.untitled())

    def test_save_as_updates_document(self, tmp_path):
        """Saving under a new name updates path, title and language."""
        doc = Document.untitled("plaintext", "[1]")
        target = tmp_path / "saved.json"

        assert save_document(doc, str(target)) == target
        assert Path(target).read_text(encoding="utf-8") == "[1]"
        assert doc.path == target
        assert doc.title == "saved.json"
        assert doc.is_json
        assert not doc.is_untitled
