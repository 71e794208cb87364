# knowledge_retriever.py

import logging
import time
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Simple rate-limiter to avoid hammering any one domain
_last_request_time = {}


class FetchError(RuntimeError):
    pass


def fetch_url(url: str, min_interval: float = 1.0) -> str:
    """
    Fetch a URL's HTML, enforcing at least `min_interval` seconds between requests
    to the same domain. Raises FetchError on failure.
    """
    domain = urlparse(url).netloc
    now = time.time()
    last = _last_request_time.get(domain, 0)
    wait = min_interval - (now - last)
    if wait > 0:
        time.sleep(wait)

    headers = {"User-Agent": "RankCodec/1.0"}
    try:
        response = requests.get(url, headers=headers, timeout=10)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Error fetching {url}: {e}")
        raise FetchError(f"Could not fetch {url}: {e}") from e
    finally:
        _last_request_time[domain] = time.time()
    return response.text


def clean_html(html: str) -> str:
    """
    Strip scripts, styles, and tags; return plain text.
    """
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    text = soup.get_text(separator="\n")
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join([line for line in lines if line])


def fetch_text(url: str, min_interval: float = 1.0) -> str:
    html = fetch_url(url, min_interval=min_interval)
    text = clean_html(html)
    logger.info(f"Fetched {len(text)} characters of text from {url}")
    return text
