"""
HHS OCR Breach Portal Fetcher

Downloads the breach report page with aiohttp and reads its server-rendered
data table with BeautifulSoup.

DATA FORMAT: Static HTML, one <table> marked with the PrimeFaces
"ui-datatable-data" class
RECORD SHAPE: header text -> cell text, one record per body row. Rows shorter
than the header list carry only the columns they have.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

import aiohttp

from ...base import BaseFetcher, FetchException, ParseException, Record
from .config import DEFAULT_USER_AGENT, HHS_CONFIG


class HHSBreachFetcher(BaseFetcher):
    """Fetcher for the HHS breach report table"""

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession):
        """
        Args:
            config: Source configuration, defaults to HHS_CONFIG
            session_factory: Builds the aiohttp client session (swapped in tests)
        """
        super().__init__('hhs', dict(config or HHS_CONFIG))
        self.session_factory = session_factory
        self.table_selector = self.config['table_selector']
        self.headers = {
            'User-Agent': self.config.get('user_agent') or DEFAULT_USER_AGENT,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }

    def get_required_config_fields(self) -> List[str]:
        return ['url', 'table_selector']

    async def fetch_records(self, browser=None) -> List[Record]:
        html = await self._fetch_html()
        return self.cap(self.parse_report_table(html))

    async def _fetch_html(self) -> str:
        """
        Download the report page

        Raises:
            FetchException: On connection errors, timeouts or non-200 responses
        """
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with self.session_factory(headers=self.headers, timeout=timeout) as session:
                async with session.get(self.url) as response:
                    if response.status != 200:
                        raise FetchException(
                            f"HTTP {response.status} from {self.url}",
                            self.source_name,
                            status_code=response.status,
                        )
                    return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchException(f"Request to {self.url} failed: {e!r}", self.source_name) from e

    def parse_report_table(self, html: str) -> List[Record]:
        """
        Extract records from the report page HTML

        Raises:
            ParseException: If the report table is missing
        """
        records = self.normalizer.html_to_table_records(
            html, self.table_selector, skip_empty_rows=True
        )
        if records is None:
            raise ParseException(
                f"Report table '{self.table_selector}' not found",
                self.source_name,
            )
        return records
