import pytest
import requests

from app.core.config import settings
from app.services import page_service as page_module
from app.services.page_service import page_service

HTML = """
<html>
  <head>
    <title>Garden Tools Guide</title>
    <meta name="description" content="How to pick garden tools.">
    <style>body { color: red; }</style>
  </head>
  <body>
    <h1>  Garden
        Tools </h1>
    <h2>Spades</h2>
    <h2>Rakes</h2>
    <h3>Care</h3>
    <p>Garden tools last longer with care.</p>
    <script>var garden = "ignored";</script>
    <p>Clean garden tools after use.</p>
  </body>
</html>
"""


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_extract_page_reads_meta_and_headings():
    page = page_service.extract_page(HTML)
    assert page.title == "Garden Tools Guide"
    assert page.description == "How to pick garden tools."
    assert page.headings == {"h1": ["Garden Tools"], "h2": ["Spades", "Rakes"], "h3": ["Care"]}


def test_extract_page_body_text_skips_scripts_and_styles():
    page = page_service.extract_page(HTML)
    assert "ignored" not in page.body_text
    assert "color" not in page.body_text
    assert page.body_text.startswith("Garden Tools Spades Rakes Care")
    assert page.body_text.endswith("Clean garden tools after use.")
    assert "  " not in page.body_text


def test_extract_page_defaults_when_missing():
    page = page_service.extract_page("<html><body><p>Plain</p></body></html>")
    assert page.title == ""
    assert page.description == ""
    assert page.headings == {"h1": [], "h2": [], "h3": []}
    assert page.body_text == "Plain"


def test_fetch_html_sends_user_agent_and_timeout(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse("<html></html>")

    monkeypatch.setattr(page_module.requests, "get", fake_get)
    assert page_service.fetch_html("https://example.com") == "<html></html>"
    assert seen["headers"]["User-Agent"] == settings.FETCH_USER_AGENT
    assert seen["timeout"] == settings.FETCH_TIMEOUT


def test_fetch_html_raises_on_error_status(monkeypatch):
    monkeypatch.setattr(page_module.requests, "get", lambda *a, **kw: FakeResponse("", 404))
    with pytest.raises(requests.HTTPError):
        page_service.fetch_html("https://example.com/missing")


def test_analyze_url_builds_report(monkeypatch):
    monkeypatch.setattr(page_module.PageService, "fetch_html", staticmethod(lambda url: HTML))
    report = page_service.analyze_url("https://example.com/garden")

    assert report["meta"] == {
        "title": "Garden Tools Guide",
        "description": "How to pick garden tools.",
        "url": "https://example.com/garden",
    }
    assert report["content"]["wordCount"] == 16
    assert report["content"]["characterCount"] == len(report["content"]["rawText"])
    assert report["analysis"]["oneGrams"][0] == ("garden", 3)
    assert report["analysis"]["twoGrams"][0] == ("garden tools", 3)


def test_extract_page_without_body_leaves_out_head_text():
    page = page_service.extract_page(
        '<title>Site Title</title><meta name="description" content="d"><p>hello world</p>'
    )
    assert page.title == "Site Title"
    assert page.description == "d"
    assert page.body_text == "hello world"
