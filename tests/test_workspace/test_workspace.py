"""Tests for HTML file discovery and reading."""

from pathlib import Path

import pytest

from html2scss.errors import HtmlReadError, NoHtmlFilesError
from html2scss.workspace import find_html_files, prioritize, read_html


def _touch(root: Path, rel: str, text: str = "<p></p>") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestFindHtmlFiles:
    def test_recursive(self, tmp_path):
        _touch(tmp_path, "a.html")
        _touch(tmp_path, "pages/b.html")
        _touch(tmp_path, "style.css")
        found = find_html_files(tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in found] == ["a.html", "pages/b.html"]

    def test_excludes_node_modules(self, tmp_path):
        _touch(tmp_path, "index.html")
        _touch(tmp_path, "node_modules/pkg/readme.html")
        _touch(tmp_path, "src/node_modules/x.html")
        found = find_html_files(tmp_path)
        assert [p.name for p in found] == ["index.html"]

    def test_excluded_name_only_matches_directories(self, tmp_path):
        _touch(tmp_path, "node_modules.html")
        assert [p.name for p in find_html_files(tmp_path)] == ["node_modules.html"]

    def test_limit(self, tmp_path):
        for i in range(5):
            _touch(tmp_path, f"p{i}.html")
        assert len(find_html_files(tmp_path, limit=3)) == 3

    def test_zero_limit_finds_nothing(self, tmp_path):
        _touch(tmp_path, "a.html")
        with pytest.raises(NoHtmlFilesError):
            find_html_files(tmp_path, limit=0)

    def test_none_found(self, tmp_path):
        _touch(tmp_path, "notes.txt")
        with pytest.raises(NoHtmlFilesError, match="No HTML source file"):
            find_html_files(tmp_path)


class TestPrioritize:
    def test_priority_first_then_rest(self):
        files = [Path("a.html"), Path("interview.html"), Path("b.html"), Path("index.html")]
        ordered = prioritize(files, ("index.html", "under.html", "interview.html"))
        assert [p.name for p in ordered] == ["index.html", "interview.html", "a.html", "b.html"]

    def test_case_insensitive(self):
        ordered = prioritize([Path("x.html"), Path("INDEX.HTML")], ("index.html",))
        assert [p.name for p in ordered] == ["INDEX.HTML", "x.html"]

    def test_only_first_duplicate_priority_name_kept(self):
        files = [Path("a/index.html"), Path("b/index.html"), Path("c.html")]
        ordered = prioritize(files, ("index.html",))
        assert ordered == [Path("a/index.html"), Path("c.html")]

    def test_no_priorities(self):
        files = [Path("b.html"), Path("a.html")]
        assert prioritize(files, ()) == files


class TestReadHtml:
    def test_reads_utf8(self, tmp_path):
        path = _touch(tmp_path, "j.html", '<p class="見出し">日本語</p>')
        assert "見出し" in read_html(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(HtmlReadError, match="Cannot read HTML file"):
            read_html(tmp_path / "missing.html")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "bad.html"
        path.write_bytes(b"<p>\xff\xfe</p>")
        with pytest.raises(HtmlReadError) as exc_info:
            read_html(path)
        assert exc_info.value.path == str(path)
