"""
Breach Source Orchestration

OBJECTIVE:
Runs every breach source once and folds the outcomes into one ResultEnvelope,
tolerating the failure of any individual source.

EXECUTION ORDER:
1. Sources that need no browser (hhs), one after another
2. One shared browser session is opened
3. Browser-based sources (maine, then texas) run on that session
4. The session is closed, whatever the sources did
5. The envelope is stamped with the completion time

FAILURE POLICY:
- A failing source only turns its own status flag false and leaves its data
  list empty; fetchers report failures as SourceResult values, never raise.
- Failing to open the browser session aborts the whole run (SessionException),
  since two of the three sources cannot be reached without it.

Sources run sequentially; there is no parallel fan-out.
"""

import argparse
import asyncio
import functools
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Type

from ..config.source_config import SOURCE_NAMES, get_source_config
from ..sources.base import BaseFetcher, SessionException, SourceResult
from ..sources.federal.hhs import HHSBreachFetcher
from ..sources.state_ag.maine import MaineBreachFetcher
from ..sources.state_ag.texas import TexasBreachFetcher
from .browser_session import BrowserSession
from .envelope import ResultEnvelope

logger = logging.getLogger(__name__)

FETCHER_CLASSES: Dict[str, Type[BaseFetcher]] = {
    'hhs': HHSBreachFetcher,
    'maine': MaineBreachFetcher,
    'texas': TexasBreachFetcher,
}


def build_fetcher(source_name: str, config: Optional[Dict[str, Any]] = None) -> BaseFetcher:
    """Create the fetcher for a source, using its default config when none is given"""
    if config is None:
        config = get_source_config(source_name)
    return FETCHER_CLASSES[source_name](config)


class BreachSourceManager:
    """
    Central orchestrator for the breach sources

    RESPONSIBILITIES:
    1. Run every source in order, isolating failures per source
    2. Own the browser session lifecycle for the browser-based sources
    3. Build the result envelope
    """

    def __init__(self, fetchers: Optional[Dict[str, BaseFetcher]] = None,
                 session_factory: Callable[[], BrowserSession] = BrowserSession,
                 clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            fetchers: Source name -> fetcher, in envelope order (default: all sources)
            session_factory: Creates the shared browser session context manager
            clock: Returns the completion timestamp (default: current UTC time)
        """
        if fetchers is None:
            fetchers = {name: build_fetcher(name) for name in SOURCE_NAMES}
        self.fetchers = fetchers
        self.session_factory = session_factory
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    @classmethod
    def from_settings(cls, settings) -> "BreachSourceManager":
        """
        Build a manager whose source configs are overridden by settings.

        settings is any object carrying the API server's upper-case setting
        attributes (HHS_URL, HTTP_TIMEOUT, ...).
        """
        overrides = {
            'hhs': {
                'url': settings.HHS_URL,
                'timeout_seconds': settings.HTTP_TIMEOUT,
                'user_agent': settings.USER_AGENT,
            },
            'maine': {
                'url': settings.MAINE_URL,
                'navigation_timeout_seconds': settings.NAVIGATION_TIMEOUT,
                'min_link_length': settings.MAINE_MIN_LINK_LENGTH,
                'max_records': settings.MAINE_MAX_REPORTS,
            },
            'texas': {
                'url': settings.TEXAS_URL,
                'navigation_timeout_seconds': settings.NAVIGATION_TIMEOUT,
                'render_delay_seconds': settings.TEXAS_RENDER_DELAY,
                'pagination_delay_seconds': settings.TEXAS_PAGINATION_DELAY,
                'max_records': settings.TEXAS_MAX_RECORDS,
            },
        }
        fetchers = {
            name: build_fetcher(name, get_source_config(name, overrides[name]))
            for name in SOURCE_NAMES
        }
        session_factory = functools.partial(BrowserSession, headless=settings.BROWSER_HEADLESS)
        return cls(fetchers=fetchers, session_factory=session_factory)

    async def aggregate(self) -> ResultEnvelope:
        """
        Run all sources and assemble the result envelope

        Returns:
            The envelope; per-source failures show up as false status flags

        Raises:
            SessionException: If the shared browser session cannot be opened
        """
        results: Dict[str, SourceResult] = {}
        direct = [name for name, fetcher in self.fetchers.items() if not fetcher.requires_browser]
        browser_based = [name for name, fetcher in self.fetchers.items() if fetcher.requires_browser]

        for name in direct:
            results[name] = await self.fetchers[name].run()

        if browser_based:
            async with self.session_factory() as browser:
                for name in browser_based:
                    results[name] = await self.fetchers[name].run(browser)

        envelope = ResultEnvelope.from_results(self.fetchers, results, self.clock())

        summary = ', '.join(
            f"{name}={'ok' if envelope.meta.status[name] else 'failed'}({len(envelope.data[name])})"
            for name in self.fetchers
        )
        logger.info(f"Aggregation complete: {summary}")
        return envelope

    async def run_source(self, source_name: str) -> SourceResult:
        """Run a single source, opening a browser session only if it needs one"""
        fetcher = self.fetchers[source_name]
        if not fetcher.requires_browser:
            return await fetcher.run()
        async with self.session_factory() as browser:
            return await fetcher.run(browser)


async def main(argv=None) -> int:
    """One-shot scrape from the command line"""
    parser = argparse.ArgumentParser(description='Scrape breach disclosure sources once')
    parser.add_argument('--source', choices=SOURCE_NAMES,
                        help='Only run this source (default: full aggregation)')
    parser.add_argument('--output',
                        help='Write the JSON result to this file instead of stdout')
    parser.add_argument('--log-level', default='INFO',
                        help='Logging level (default: INFO)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    manager = BreachSourceManager()
    try:
        if args.source:
            result = await manager.run_source(args.source)
            payload: Any = {'success': result.success, 'error': result.error, 'records': list(result.records)}
            exit_code = 0 if result.success else 1
        else:
            payload = (await manager.aggregate()).to_dict()
            exit_code = 0
    except SessionException as e:
        logger.error(f"Scraping failed: {e}")
        return 1

    output = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Wrote result to {args.output}")
    else:
        print(output)
    return exit_code


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
