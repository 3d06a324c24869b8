import requests
from bs4 import BeautifulSoup
from dataclasses import dataclass, field
from typing import Any, Dict, List
import logging

from app.core.config import settings
from app.services.ngram_service import ngram_service
from app.services.tokenization import clean_text, tokenize

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3")


@dataclass
class PageContent:
    title: str = ""
    description: str = ""
    headings: Dict[str, List[str]] = field(default_factory=lambda: {tag: [] for tag in HEADING_TAGS})
    body_text: str = ""


class PageService:
    @staticmethod
    def fetch_html(url: str) -> str:
        """GET the page; non-2xx responses raise requests.HTTPError."""
        r = requests.get(
            url,
            headers={"User-Agent": settings.FETCH_USER_AGENT},
            timeout=settings.FETCH_TIMEOUT,
        )
        r.raise_for_status()
        return r.text

    @staticmethod
    def extract_page(html: str) -> PageContent:
        soup = BeautifulSoup(html or "", "html.parser")

        title = "".join(t.get_text() for t in soup.find_all("title"))
        meta = soup.find("meta", attrs={"name": "description"})
        description = (meta.get("content") if meta else None) or ""

        headings = {
            tag: [clean_text(el.get_text()) for el in soup.find_all(tag)]
            for tag in HEADING_TAGS
        }

        # headings above are read before scripts and styles go away
        for el in soup.find_all(["script", "style"]):
            el.decompose()

        body = soup.body
        if body is None:
            # bodyless fragment: everything outside head-only tags is body
            for el in soup.find_all(["head", "title", "meta"]):
                el.decompose()
            body = soup
        body_text = clean_text(body.get_text())

        return PageContent(
            title=title,
            description=description,
            headings=headings,
            body_text=body_text,
        )

    @staticmethod
    def analyze_url(url: str) -> Dict[str, Any]:
        """Fetch a page and build its on-page text report."""
        html = PageService.fetch_html(url)
        page = PageService.extract_page(html)

        tokens = tokenize(page.body_text)
        logger.info("Analyzed %s: %d words", url, len(tokens))

        return {
            "meta": {
                "title": page.title,
                "description": page.description,
                "url": url,
            },
            "headings": page.headings,
            "content": {
                "wordCount": len(tokens),
                "characterCount": len(page.body_text),
                "rawText": page.body_text,
            },
            "analysis": ngram_service.analyze(tokens),
        }

page_service = PageService()
