"""
Maine Attorney General Breach Notices Fetcher

Two-phase scrape through the shared browser session:

1. Load the notice list page and collect the report links on it
2. Open every report page and read its "Label: value" lines

DATA FORMAT: Script-rendered HTML, one detail page per notice
RECORD SHAPE: "URL" (the report link) plus whatever labels the report page
shows; labels differ from report to report.

A report page that fails to load is skipped; the remaining reports are still
processed.
"""

from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ...base import BaseFetcher, FetchException, Record
from .config import MAINE_CONFIG

COLLECT_LINKS_SCRIPT = 'links => links.map(link => link.href)'


class MaineBreachFetcher(BaseFetcher):
    """Fetcher for the Maine AG breach notice list and its detail pages"""

    requires_browser = True

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__('maine', dict(config or MAINE_CONFIG))
        self.navigation_timeout = self.config.get('navigation_timeout_seconds', 60)
        self.wait_until = self.config.get('wait_until', 'networkidle')
        self.content_selector = self.config['content_selector']
        self.min_link_length = self.config['min_link_length']

    def get_required_config_fields(self) -> List[str]:
        return ['url', 'content_selector', 'min_link_length', 'max_records']

    async def fetch_records(self, browser=None) -> List[Record]:
        if browser is None:
            raise FetchException("A browser session is required", self.source_name)

        async with browser.page(self.navigation_timeout) as page:
            report_urls = await self.discover_report_urls(page)
            self.logger.info(f"Discovered {len(report_urls)} report links")
            return await self.scrape_reports(page, report_urls)

    async def discover_report_urls(self, page: Page) -> List[str]:
        """Phase 1: report links on the list page, in document order"""
        await page.goto(self.url, wait_until=self.wait_until)
        hrefs = await page.eval_on_selector_all('a', COLLECT_LINKS_SCRIPT)
        return self.select_report_links(hrefs)

    def select_report_links(self, hrefs: List[Optional[str]]) -> List[str]:
        """Keep links longer than min_link_length, up to max_records of them"""
        links = [href for href in hrefs if href and len(href) > self.min_link_length]
        return links[:self.max_records]

    async def scrape_reports(self, page: Page, report_urls: List[str]) -> List[Record]:
        """Phase 2: one record per report page that loads and has content"""
        reports: List[Record] = []

        for i, url in enumerate(report_urls, 1):
            self.logger.debug(f"Scraping report {i}/{len(report_urls)}: {url}")
            try:
                await page.goto(url, wait_until=self.wait_until)
                content = await page.query_selector(self.content_selector)
                if content is None:
                    self.logger.warning(f"No {self.content_selector} element on {url}")
                    continue
                text = await content.inner_text()
            except PlaywrightError as e:
                self.logger.warning(f"Error processing URL {url}: {e}")
                continue

            reports.append(self.normalizer.labels_to_record(text, url))

        return reports
