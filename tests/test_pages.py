"""Tests for errpage.pages — probing candidates and loading error pages."""

import logging
from pathlib import Path

import pytest

from errpage.errors import PathResolutionError
from errpage.pages import ErrorPage, find_error_page, load_error_page, path_exists, read_file


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Create an error page tree with a few localized variants."""
    site = tmp_path.resolve() / "site"
    site.mkdir()
    (site / "404.html").write_text("<h1>Not Found</h1>")

    generic = site / "resources" / "html"
    generic.mkdir(parents=True)
    (generic / "404.html").write_text("<h1>Generic</h1>")

    german = site / "resources" / "de" / "html"
    german.mkdir(parents=True)
    (german / "404.html").write_text("<h1>Nicht gefunden</h1>")

    taiwan = site / "resources" / "zh" / "Hant" / "TW" / "html"
    taiwan.mkdir(parents=True)
    (taiwan / "404.html").write_text("<h1>找不到</h1>", encoding="utf-8")

    return site


class TestPathExists:
    def test_file(self, site: Path) -> None:
        assert path_exists(str(site / "404.html")) is True

    def test_directory(self, site: Path) -> None:
        assert path_exists(str(site)) is True

    def test_missing(self, site: Path) -> None:
        assert path_exists(str(site / "nope.html")) is False

    def test_empty(self) -> None:
        assert path_exists("") is False


class TestReadFile:
    def test_reads_text(self, site: Path) -> None:
        assert read_file(str(site / "404.html")) == "<h1>Not Found</h1>"

    def test_missing_reads_empty(self, site: Path) -> None:
        assert read_file(str(site / "nope.html")) == ""

    def test_directory_reads_empty(self, site: Path) -> None:
        assert path_exists(str(site)) is True
        assert read_file(str(site)) == ""

    def test_empty_path_reads_empty(self) -> None:
        assert read_file("") == ""

    def test_invalid_utf8_is_replaced(self, site: Path) -> None:
        page = site / "latin1.html"
        page.write_bytes("<h1>Für</h1>".encode("latin-1"))
        assert read_file(str(page)) == "<h1>F�r</h1>"


class TestFindErrorPage:
    def test_most_specific_wins(self, site: Path) -> None:
        found = find_error_page(str(site / "404.html"), "zh-Hant-TW")
        assert found == str(site / "resources" / "zh" / "Hant" / "TW" / "html" / "404.html")

    def test_language_fallback(self, site: Path) -> None:
        found = find_error_page(str(site / "404.html"), "de-AT")
        assert found == str(site / "resources" / "de" / "html" / "404.html")

    def test_generic_fallback(self, site: Path) -> None:
        found = find_error_page(str(site / "404.html"), "ja-JP")
        assert found == str(site / "resources" / "html" / "404.html")

    def test_original_location_last(self, site: Path) -> None:
        (site / "500.html").write_text("<h1>Oops</h1>")
        found = find_error_page(str(site / "500.html"), "fr")
        assert found == str(site / "500.html")

    def test_directories_are_skipped(self, site: Path) -> None:
        (site / "resources" / "html" / "dir.html").mkdir()
        assert find_error_page(str(site / "dir.html"), "") is None

    def test_nothing_found_logs_warning(
        self, site: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="errpage.pages"):
            assert find_error_page(str(site / "418.html"), "en") is None
        assert "No error page found" in caplog.text

    def test_empty_location(self) -> None:
        assert find_error_page("", "en") is None

    def test_missing_directory_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(PathResolutionError):
            find_error_page(str(tmp_path / "missing" / "404.html"), "en")


class TestLoadErrorPage:
    def test_loads_body_and_uri(self, site: Path) -> None:
        page = load_error_page(str(site / "404.html"), "de")
        expected = site / "resources" / "de" / "html" / "404.html"
        assert page == ErrorPage(
            path=str(expected),
            uri=expected.as_uri(),
            body="<h1>Nicht gefunden</h1>",
        )

    def test_utf8_body(self, site: Path) -> None:
        page = load_error_page(str(site / "404.html"), "zh-Hant-TW")
        assert page is not None
        assert page.body == "<h1>找不到</h1>"

    def test_not_found(self, site: Path) -> None:
        assert load_error_page(str(site / "418.html"), "en") is None

    def test_non_utf8_page(self, site: Path) -> None:
        (site / "resources" / "de" / "html" / "500.html").write_bytes(b"<h1>Fehler f\xfcr Sie</h1>")
        page = load_error_page(str(site / "500.html"), "de")
        assert page is not None
        assert page.body == "<h1>Fehler f\ufffdr Sie</h1>"
