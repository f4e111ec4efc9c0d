"""
Shared Browser Session

One headless Chromium instance (via Playwright) per aggregation run, shared by
the sources whose pages need client-side rendering. Used as an async context
manager so the browser is closed on every exit path.

    async with BrowserSession() as browser:
        async with browser.page(navigation_timeout=60) as page:
            await page.goto(url)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from ..sources.base.exceptions import SessionException

logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_ARGS = ['--no-sandbox', '--disable-setuid-sandbox']


class BrowserSession:
    """Scoped headless browser shared by the browser-based sources"""

    def __init__(self, headless: bool = True, launch_args: Optional[List[str]] = None,
                 playwright_factory: Callable = async_playwright):
        self.headless = headless
        self.launch_args = list(DEFAULT_LAUNCH_ARGS if launch_args is None else launch_args)
        self._playwright_factory = playwright_factory
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> "BrowserSession":
        try:
            self._playwright = await self._playwright_factory().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=self.launch_args,
            )
        except Exception as e:
            await self.close()
            raise SessionException(f"Failed to launch browser: {e}") from e

        logger.info("Browser session started")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def is_open(self) -> bool:
        return self._browser is not None

    @asynccontextmanager
    async def page(self, navigation_timeout: Optional[float] = None) -> AsyncIterator[Page]:
        """
        Open a new page, closed again when the block exits

        Args:
            navigation_timeout: Default navigation timeout in seconds
        """
        if self._browser is None:
            raise SessionException("Browser session is not open")

        page = await self._browser.new_page()
        if navigation_timeout:
            page.set_default_navigation_timeout(navigation_timeout * 1000)
        try:
            yield page
        finally:
            await page.close()

    async def close(self) -> None:
        """Close the browser and stop Playwright; safe to call more than once"""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None

        if browser is not None:
            try:
                await browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping playwright: {e}")
            logger.info("Browser session closed")
