import logging
import httpx
from typing import Optional
from fake_useragent import UserAgent
from tenacity import AsyncRetrying, stop_after_attempt, wait_fixed, retry_if_exception_type

from core.exceptions import FetchError

logger = logging.getLogger(__name__)

# First attempt: a fixed desktop Chrome profile
PRIMARY_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
}


class HTTPClient:
    def __init__(self, timeout: float = 15.0, retry_wait: float = 2.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.ua = UserAgent()
        self.timeout = timeout
        self.retry_wait = retry_wait
        self.client = httpx.AsyncClient(http2=False, follow_redirects=True, transport=transport)

    def _get_alternate_headers(self):
        return {
            "User-Agent": self.ua.random,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
            "DNT": "1",
            "Connection": "keep-alive",
            "Upgrade-Insecure-Requests": "1",
            "Referer": "https://www.google.com/",
            "Sec-Fetch-Dest": "document",
            "Sec-Fetch-Mode": "navigate",
            "Sec-Fetch-Site": "cross-site",
            "Sec-Fetch-User": "?1",
            "Cache-Control": "max-age=0",
        }

    def _headers_for_attempt(self, attempt_number: int):
        if attempt_number == 1:
            return PRIMARY_HEADERS
        return self._get_alternate_headers()

    async def fetch_page(self, url: str) -> str:
        """
        Fetches a page and returns its HTML.
        The first attempt uses the primary header set; on any network error,
        timeout or non-2xx status it retries once with the alternate set.
        Raises FetchError when both attempts fail.
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(2),
                wait=wait_fixed(self.retry_wait),
                retry=retry_if_exception_type(httpx.HTTPError),
                reraise=True,
            ):
                with attempt:
                    number = attempt.retry_state.attempt_number
                    if number > 1:
                        logger.warning(f"Retrying {url} with alternate headers")
                    headers = self._headers_for_attempt(number)
                    response = await self.client.get(url, headers=headers, timeout=self.timeout)
                    response.raise_for_status()
                    logger.info(f"Successfully fetched {url}")
                    return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(url, status_code=e.response.status_code, original_error=e) from e
        except httpx.HTTPError as e:
            raise FetchError(url, original_error=e) from e

    async def close(self):
        await self.client.aclose()
