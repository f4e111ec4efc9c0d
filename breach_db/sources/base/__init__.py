"""
Base Infrastructure for the Breach Disclosure Sources

This module provides the foundational classes that all breach sources use.
All source-specific fetchers inherit from BaseFetcher to ensure consistency.

Key Components:
- BaseFetcher: Abstract async interface for fetching one source
- DataNormalizer: Converts tables and label lines into flat records
- SourceResult: Success/failure value returned for every fetch attempt

Related Files:
- All source implementations in ../federal/* and ../state_ag/* inherit from these classes
- orchestration/source_manager.py consumes their SourceResult values
"""

from .base_fetcher import BaseFetcher
from .data_normalizer import DataNormalizer
from .exceptions import (
    BreachSourceException,
    ConfigException,
    FetchException,
    ParseException,
    SessionException,
)
from .source_result import Record, SourceResult

__all__ = [
    'BaseFetcher',
    'DataNormalizer',
    'Record',
    'SourceResult',
    'BreachSourceException',
    'ConfigException',
    'FetchException',
    'ParseException',
    'SessionException',
]
