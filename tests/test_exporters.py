"""Tests for exporters."""

import json
import pytest
from pathlib import Path

from citations.model import Occurrence, ParseResult
from exporters.json_exporter import to_json
from exporters.text_exporter import to_text


@pytest.fixture
def result():
    root = Path("/repo")
    main = root / "main.tex"
    chapter = root / "chapters" / "one.tex"
    result = ParseResult()
    result.record_parsed_files([main, chapter])
    result.record_occurrence(Occurrence("smith2020", main, 5, 6, 22, "First \\cite{smith2020}."))
    result.record_occurrence(Occurrence("jones1999", chapter, 2, 0, 27, "\\citep{jones1999,smith2020}"))
    result.record_occurrence(Occurrence("smith2020", chapter, 2, 0, 27, "\\citep{jones1999,smith2020}"))
    return result


class TestJSONExporter:
    """Tests for JSON exporter."""

    def test_empty_result(self):
        """Test exporting empty result."""
        data = json.loads(to_json(ParseResult()))

        assert data["files"] == []
        assert data["keys"] == {}

    def test_relative_paths(self, result):
        """Test that paths are shown relative to the base."""
        data = json.loads(to_json(result, base=Path("/repo")))

        assert data["files"] == ["main.tex", "chapters/one.tex"]
        assert data["keys"]["smith2020"][1]["file"] == "chapters/one.tex"

    def test_occurrence_fields(self, result):
        data = json.loads(to_json(result, base=Path("/repo")))

        first = data["keys"]["smith2020"][0]
        assert first == {
            "file": "main.tex",
            "line": 5,
            "start": 6,
            "end": 22,
            "text": "First \\cite{smith2020}.",
        }

    def test_key_order(self, result):
        """Test that keys keep first-discovery order."""
        data = json.loads(to_json(result))
        assert list(data["keys"]) == ["smith2020", "jones1999"]

    def test_text_placeholder(self):
        result = ParseResult()
        result.record_occurrence(Occurrence("x", Path(""), 1, 0, 8, "\\cite{x}"))

        data = json.loads(to_json(result))

        assert data["files"] == ["<text>"]


class TestTextExporter:
    """Tests for text exporter."""

    def test_empty_result(self):
        assert to_text(ParseResult()) == ""

    def test_tree(self, result):
        """Test key tree with unicode branches."""
        output = to_text(result, base=Path("/repo"))

        assert "smith2020 (2)" in output
        assert "├── main.tex:5 [6:22]" in output
        assert "└── chapters/one.tex:2 [0:27]" in output
        assert "Files (2)" in output

    def test_ascii_style(self, result):
        """Test pure ASCII output."""
        output = to_text(result, base=Path("/repo"), style="ascii")

        assert "├" not in output
        assert "└" not in output
        assert "|-- main.tex:5" in output
        assert "\\-- chapters/one.tex" in output
