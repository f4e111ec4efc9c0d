"""
Base Fetcher for the Breach Disclosure Sources

Abstract base class that every breach source inherits from.
Provides configuration handling, logging and the failure-isolation wrapper
that turns any fetch error into a failed SourceResult.
"""

import abc
import logging
from typing import Any, Dict, List, Optional

from .data_normalizer import DataNormalizer
from .exceptions import ConfigException, ParseException
from .source_result import Record, SourceResult


class BaseFetcher(abc.ABC):
    """Abstract base class for all breach source fetchers"""

    # Set by fetchers that need a page from the shared browser session
    requires_browser = False

    def __init__(self, source_name: str, config: Dict[str, Any]):
        """
        Initialize fetcher with source configuration

        Args:
            source_name: Key of the source in the result envelope
            config: Configuration dict (see the source's config.py)
        """
        self.source_name = source_name
        self.config = config
        self.logger = logging.getLogger(f"fetcher.{source_name}")
        self.normalizer = DataNormalizer(source_name)

        # Common configuration
        self.url = config.get('url', '')
        self.timeout = config.get('timeout_seconds', 30)
        self.max_records: Optional[int] = config.get('max_records')

        self.validate_config()

    @abc.abstractmethod
    async def fetch_records(self, browser=None) -> List[Record]:
        """
        Fetch and normalize the source's records

        Args:
            browser: Shared BrowserSession, for fetchers with requires_browser

        Returns:
            Records in source order

        Raises:
            BreachSourceException (or any other error) when the source is unusable
        """
        pass

    @abc.abstractmethod
    def get_required_config_fields(self) -> List[str]:
        """Return list of required configuration fields for this source"""
        pass

    async def run(self, browser=None) -> SourceResult:
        """
        Fetch the source and report the outcome as a SourceResult.

        Never raises for a source-level problem: errors are logged and returned
        as a failed result. A fetch that completes without any record is a
        failure too.
        """
        self.logger.info(f"Fetching {self.source_name} data...")
        try:
            records = await self.fetch_records(browser)
        except Exception as e:
            self.logger.error(f"Error getting {self.source_name} data: {e}")
            return SourceResult.failed(self.source_name, str(e))

        if not records:
            error = ParseException(f"No records extracted from {self.url}", self.source_name)
            self.logger.error(f"Error getting {self.source_name} data: {error}")
            return SourceResult.failed(self.source_name, str(error))

        self.logger.info(f"Retrieved {len(records)} {self.source_name} records")
        return SourceResult.ok(self.source_name, records)

    def validate_config(self) -> bool:
        """
        Validate that required configuration is present

        Returns:
            True if configuration is valid

        Raises:
            ConfigException: If configuration is invalid
        """
        for field in self.get_required_config_fields():
            if field not in self.config:
                raise ConfigException(
                    f"Missing required configuration field: {field}",
                    self.source_name,
                    config_key=field,
                )
        return True

    def cap(self, records: List[Record]) -> List[Record]:
        """Truncate to max_records when the source has a cap"""
        if self.max_records is None:
            return records
        return records[:self.max_records]
