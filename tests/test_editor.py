from unittest import mock

import pytest

from sqlinlist.editor import Editor, open_in_browser, write_help_page
from sqlinlist.formatting import BATCH_SIZE, format_text
from sqlinlist.snippets import SnippetStore


def test_clear_empties_text():
    editor = Editor(text="something")
    editor.clear()
    assert editor.text == ""


def test_format_updates_text():
    editor = Editor(text="a\r\nb")
    result = editor.format()
    assert result == format_text("a\r\nb")
    assert editor.text == result


def test_format_long_text_without_column_raises_and_keeps_text():
    original = "\n".join(["x"] * (BATCH_SIZE + 1))
    editor = Editor(text=original)
    with pytest.raises(ValueError):
        editor.format()
    assert editor.text == original


def test_replace_counts_and_replaces_all():
    editor = Editor(text="'a','a','b'")
    assert editor.replace("a", "z") == 2
    assert "a" not in editor.text
    assert editor.text.count("z") == 2


def test_replace_with_empty_pattern_changes_nothing():
    editor = Editor(text="abc")
    assert editor.replace("", "x") == 0
    assert editor.text == "abc"


def test_show_snippet():
    store = SnippetStore()
    store.add(0, "SELECT 1")
    editor = Editor(text="old", snippets=store)
    assert editor.show_snippet(0) == "SELECT 1"
    assert editor.text == "SELECT 1"
    editor.show_snippet(17)
    assert editor.text == ""


def test_write_help_page_round_trip(tmp_path):
    page = "<html><body>帮助</body></html>"
    path = write_help_page(page, tmp_path)
    assert path.suffix == ".html"
    assert path.parent == tmp_path
    assert path.read_text(encoding="utf-8") == page


def test_write_help_page_gives_distinct_files(tmp_path):
    first = write_help_page(b"<p>1</p>", tmp_path)
    second = write_help_page(b"<p>2</p>", tmp_path)
    assert first != second
    assert second.read_bytes() == b"<p>2</p>"


def test_open_in_browser_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_in_browser(tmp_path / "none.html")


def test_open_in_browser_opens_uri(tmp_path):
    path = write_help_page("<p>x</p>", tmp_path)
    with mock.patch("webbrowser.open", return_value=True) as opener:
        open_in_browser(path)
    opener.assert_called_once_with(path.resolve().as_uri())


def test_open_in_browser_failure_raises(tmp_path):
    path = write_help_page("<p>x</p>", tmp_path)
    with mock.patch("webbrowser.open", return_value=False):
        with pytest.raises(OSError):
            open_in_browser(path)