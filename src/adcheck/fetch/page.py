"""Landing page fetcher and content extractor.

This is the network side of a compliance check. It turns a URL into one
of the LandingPageContent variants; the rule engine only ever sees the
variant, never the network.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup

from adcheck.models.content import PageContent, PageFetchError, PageTimeout
from adcheck.utils.config import DEFAULT_USER_AGENT
from adcheck.utils.errors import FetchError
from adcheck.utils.logging import get_logger_with_context

_WHITESPACE = re.compile(r"\s+")
_PHONE = re.compile(r"\+?[\d\s\-()]{10,}")
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PRIVACY = re.compile(r"privacy\s*policy", re.IGNORECASE)
_TERMS = re.compile(r"terms\s*(and|&)?\s*conditions|terms\s*of\s*(use|service)", re.IGNORECASE)


def extract_page_content(html: str, url: str) -> PageContent:
    """Extract the fields the landing page rules need from HTML.

    Args:
        html: Page markup
        url: URL the page was loaded from

    Returns:
        PageContent summary of the page
    """
    soup = BeautifulSoup(html, "html.parser")

    title = soup.title.get_text().strip() if soup.title else ""

    meta = soup.find("meta", attrs={"name": "description"})
    meta_description = meta.get("content", "") if meta else ""

    headings = []
    for heading in soup.find_all(["h1", "h2", "h3"]):
        text = heading.get_text().strip()
        if text:
            headings.append(text)

    root = soup.body or soup
    body_text = _WHITESPACE.sub(" ", root.get_text(" ")).strip()

    forms = len(soup.find_all("form"))
    privacy_link = soup.find("a", href=re.compile("privacy"))
    terms_link = soup.find("a", href=re.compile("terms"))

    return PageContent(
        title=title,
        meta_description=meta_description,
        headings=headings,
        body_text=body_text,
        has_contact_form=forms > 0,
        has_phone_number=bool(_PHONE.search(body_text)),
        has_email=bool(_EMAIL.search(body_text)),
        has_privacy_policy=bool(_PRIVACY.search(body_text)) or privacy_link is not None,
        has_terms=bool(_TERMS.search(body_text)) or terms_link is not None,
        images=len(soup.find_all("img")),
        forms=forms,
        links=len(soup.find_all("a")),
        protocol=f"{urlsplit(url).scheme}:",
    )


class PageFetcher:
    """Fetches a landing page and summarizes its content.

    Failures are returned as PageTimeout or PageFetchError rather than
    raised, so they can be scored as violations.

    Example:
        fetcher = PageFetcher(timeout=10.0)
        content = fetcher.fetch("https://example.com/listing")
    """

    def __init__(
        self,
        timeout: float = 10.0,
        max_redirects: int = 5,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds
            max_redirects: Maximum redirects to follow
            user_agent: User-Agent header to send
            transport: Custom httpx transport (used by tests)
        """
        self._timeout = timeout
        self._max_redirects = max_redirects
        self._user_agent = user_agent
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            max_redirects=self._max_redirects,
            headers={"User-Agent": self._user_agent},
            transport=self._transport,
        )

    def fetch(self, url: str) -> PageContent | PageTimeout | PageFetchError:
        """Fetch and extract a landing page.

        Args:
            url: Landing page URL

        Returns:
            PageContent on success, PageTimeout or PageFetchError on failure

        Raises:
            FetchError: If url is empty
        """
        if not url:
            raise FetchError("URL is required")

        log = get_logger_with_context("fetch", url=url)
        log.debug("Fetching landing page")

        try:
            with self._get_client() as client:
                response = client.get(url)
        except httpx.TimeoutException:
            log.warning("Landing page timed out")
            return PageTimeout(message=f"Page took too long to load (>{self._timeout:g} seconds)")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning(f"Landing page fetch failed: {e}")
            return PageFetchError(message=str(e) or "Failed to fetch landing page")

        if response.status_code >= 500:
            log.warning(f"Landing page returned {response.status_code}")
            return PageFetchError(
                message=f"Server returned {response.status_code} error",
                status_code=response.status_code,
            )

        content = extract_page_content(response.text, url)
        log.debug(f"Extracted {len(content.body_text.split())} words, {content.images} images")
        return content


def fetch_page(url: str, timeout: float = 10.0) -> PageContent | PageTimeout | PageFetchError:
    """Fetch a landing page with default settings."""
    return PageFetcher(timeout=timeout).fetch(url)
