from pathlib import Path

from bs4 import BeautifulSoup

from pagegen.builders import page, paragraph, stylesheet, text, text_link, with_class
from pagegen.render import render
from scripts.verify_page import main, verify_page, verify_page_text


def _sample_html() -> str:
    return render(
        page(
            "Sample <page>",
            links=[stylesheet("site.css")],
            body=[with_class(["lead"], [paragraph([text("a & b"), text_link("/x", "x")])])],
        )
    )


def test_rendered_page_passes_verification():
    assert verify_page_text(_sample_html()) == []


def test_rendered_page_parses_as_expected():
    soup = BeautifulSoup(_sample_html(), "html.parser")

    assert soup.title.get_text() == "Sample <page>"
    assert soup.find("link")["href"] == "site.css"
    assert soup.find("p")["class"] == ["lead"]
    assert soup.find("a")["class"] == ["lead"]
    assert "a & b" in soup.find("p").get_text()


def test_missing_body_and_odd_indentation():
    errors = verify_page_text("<html>\n  <head>\n   <title>x</title>\n  </head>\n</html>\n")

    assert "Missing <body> element" in errors
    assert "Line 3 is indented by 3 spaces" in errors


def test_main_exit_codes(tmp_path: Path):
    good = tmp_path / "good.html"
    good.write_text(_sample_html(), encoding="utf-8")
    bad = tmp_path / "bad.html"
    bad.write_text("<p>nope</p>\n", encoding="utf-8")

    assert main([str(good)]) == 0
    assert main([str(bad)]) == 1
    assert verify_page(tmp_path / "missing.html") == [f"Rendered page not found: {tmp_path / 'missing.html'}"]
