"""Tests for citation and inclusion matchers."""

import pytest
from pathlib import Path

from texscan.patterns import (
    CitePatternMatcher,
    IncludePatternMatcher,
    build_cite_pattern,
    resolve_include,
    split_keys,
)


@pytest.fixture
def matcher():
    return CitePatternMatcher()


class TestCitePatternMatcher:
    """Tests for citation command matching."""

    @pytest.mark.parametrize("command", [
        "cite", "Cite", "citep", "citet", "citeauthor", "citeauthorfull",
        "citeyearpar", "autocite", "Autocite", "parencite", "footcite",
        "nocite", "supercite", "footcitetext", "textcquote", "blockcquote",
    ])
    def test_recognized_commands(self, matcher, command):
        """Test that the default command family is recognized."""
        matches = list(matcher.iter_matches("\\%s{key}" % command))
        assert len(matches) == 1
        assert matches[0].raw_keys == "key"

    def test_unknown_command(self, matcher):
        """Test that unknown commands are ignored."""
        assert list(matcher.iter_matches("\\ref{fig:one} \\label{sec}")) == []

    def test_no_braced_group(self, matcher):
        """Test that a command without a key list does not match."""
        assert list(matcher.iter_matches("\\cite and more text")) == []

    def test_offsets(self, matcher):
        """Test that offsets span the whole command."""
        line = "See \\cite{smith2020} for details."
        (match,) = matcher.iter_matches(line)
        assert match.start == 4
        assert line[match.start:match.end] == "\\cite{smith2020}"

    def test_star_and_optional_arguments(self, matcher):
        """Test star marker and up to two bracketed arguments."""
        line = "\\citep*[see][p.~4]{a,b}"
        (match,) = matcher.iter_matches(line)
        assert match.raw_keys == "a,b"
        assert (match.start, match.end) == (0, len(line))

    def test_trailing_braced_argument(self, matcher):
        """Test that a trailing braced argument is consumed but ignored."""
        line = "\\textcquote{key}{Quoted text} after"
        (match,) = matcher.iter_matches(line)
        assert match.raw_keys == "key"
        assert line[match.start:match.end] == "\\textcquote{key}{Quoted text}"

    def test_multiple_commands_on_line(self, matcher):
        """Test that several commands on one line are found left to right."""
        matches = list(matcher.iter_matches("\\cite{a} and \\citet{b}"))
        assert [m.raw_keys for m in matches] == ["a", "b"]
        assert matches[0].end <= matches[1].start

    def test_nested_braces_not_balanced(self, matcher):
        """Test that the key list ends at the first closing brace."""
        (match,) = matcher.iter_matches("\\cite{{a}}")
        assert match.raw_keys == "{a"

    def test_custom_commands(self):
        """Test building a matcher from a custom command list."""
        custom = CitePatternMatcher(["mycite"])
        assert [m.raw_keys for m in custom.iter_matches("\\mycite{x} \\cite{y}")] == ["x"]

    def test_build_cite_pattern_group(self):
        """Test that the compiled rule exposes the key group."""
        pattern = build_cite_pattern(["cite"])
        assert pattern.search("\\cite{k}").group("key") == "k"


class TestSplitKeys:
    """Tests for key list splitting."""

    def test_split(self):
        assert split_keys("a,b,c") == ["a", "b", "c"]

    def test_strip_whitespace(self):
        assert split_keys(" a , b ") == ["a", "b"]

    def test_drop_empty(self):
        assert split_keys("") == []
        assert split_keys("a,,b,") == ["a", "b"]

    def test_case_sensitive(self):
        assert split_keys("Smith,smith") == ["Smith", "smith"]


class TestIncludePatternMatcher:
    """Tests for inclusion directive matching."""

    def test_stems(self):
        """Test that input and include directives are found."""
        matcher = IncludePatternMatcher()
        stems = list(matcher.iter_stems("\\input{intro} \\include{chapters/two.tex}"))
        assert stems == ["intro", "chapters/two.tex"]

    def test_other_commands_ignored(self):
        """Test that unrelated commands are not inclusions."""
        matcher = IncludePatternMatcher()
        assert list(matcher.iter_stems("\\includegraphics{fig} \\cite{x}")) == []

    def test_iter_includes_existing_only(self, tmp_path):
        """Test that only existing files are yielded."""
        root = tmp_path.resolve()
        source = root / "main.tex"
        source.write_text("")
        (root / "intro.tex").write_text("")

        matcher = IncludePatternMatcher()
        includes = list(matcher.iter_includes(source, "\\input{intro}\\input{missing}"))

        assert includes == [root / "intro.tex"]


class TestResolveInclude:
    """Tests for include path resolution."""

    def test_appends_extension(self, tmp_path):
        """Test that the extension is appended to bare stems."""
        root = tmp_path.resolve()
        (root / "chapter1.tex").write_text("")
        assert resolve_include(root / "main.tex", "chapter1") == root / "chapter1.tex"

    def test_keeps_extension(self, tmp_path):
        """Test that stems with the extension are used as-is."""
        root = tmp_path.resolve()
        (root / "chapter1.tex").write_text("")
        assert resolve_include(root / "main.tex", "chapter1.tex") == root / "chapter1.tex"

    def test_relative_to_source_directory(self, tmp_path):
        """Test resolution against the including file's directory."""
        root = tmp_path.resolve()
        sub = root / "chapters"
        sub.mkdir()
        (sub / "two.tex").write_text("")
        (root / "two.tex").write_text("")

        assert resolve_include(sub / "one.tex", "two") == sub / "two.tex"

    def test_missing(self, tmp_path):
        """Test that missing files resolve to None."""
        assert resolve_include(tmp_path / "main.tex", "missing") is None

    def test_directory_is_not_a_target(self, tmp_path):
        """Test that a directory with a matching name is ignored."""
        (tmp_path / "dir.tex").mkdir()
        assert resolve_include(tmp_path / "main.tex", "dir") is None

    def test_blank_stem(self, tmp_path):
        assert resolve_include(tmp_path / "main.tex", "  ") is None
