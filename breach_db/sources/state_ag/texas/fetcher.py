"""
Texas Attorney General Data Security Breach Reports Fetcher

The report table is rendered client-side, so the page is loaded through the
shared browser session, given time to render, moved to its last page when the
pager offers it, and the rendered HTML is read with BeautifulSoup.

RECORD SHAPE: every header text (None where a row is short) plus "URL", which
is the report page address for every record.
"""

from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...base import BaseFetcher, FetchException, ParseException, Record
from .config import TEXAS_CONFIG


class TexasBreachFetcher(BaseFetcher):
    """Fetcher for the Texas AG breach report table"""

    requires_browser = True

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__('texas', dict(config or TEXAS_CONFIG))
        self.navigation_timeout = self.config.get('navigation_timeout_seconds', 60)
        self.wait_until = self.config.get('wait_until', 'networkidle')
        self.render_delay = self.config.get('render_delay_seconds', 5.0)
        self.pagination_delay = self.config.get('pagination_delay_seconds', 3.0)
        self.last_page_selector = self.config['last_page_selector']
        self.table_selector = self.config.get('table_selector', 'table')

    def get_required_config_fields(self) -> List[str]:
        return ['url', 'last_page_selector', 'max_records']

    async def fetch_records(self, browser=None) -> List[Record]:
        if browser is None:
            raise FetchException("A browser session is required", self.source_name)

        async with browser.page(self.navigation_timeout) as page:
            await page.goto(self.url, wait_until=self.wait_until)
            await page.wait_for_timeout(self.render_delay * 1000)
            await self._jump_to_last_page(page)
            html = await page.content()

        return self.cap(self.parse_report_table(html))

    async def _jump_to_last_page(self, page: Page) -> bool:
        """
        Click the pager's "last" control if there is one.

        Returns:
            True if the control was clicked; failures are logged, not raised
        """
        try:
            last_button = await page.query_selector(self.last_page_selector)
            if last_button is None:
                self.logger.info("No last-page control found, reading the current page")
                return False
            await last_button.click()
            await page.wait_for_timeout(self.pagination_delay * 1000)
            return True
        except PlaywrightError as e:
            self.logger.warning(f"Error clicking last button: {e}")
            return False

    def parse_report_table(self, html: str) -> List[Record]:
        """
        Extract records from the first table of the rendered page

        Raises:
            ParseException: If the page has no table
        """
        records = self.normalizer.html_to_table_records(html, self.table_selector, pad_missing=True)
        if records is None:
            raise ParseException("No table rendered on report page", self.source_name)
        for record in records:
            record['URL'] = self.url
        return records
