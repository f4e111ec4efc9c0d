"""
Aggregation pipeline: runs the breach sources, assembles the result envelope
and caches it.
"""

from .browser_session import BrowserSession
from .envelope import EnvelopeMeta, ResultEnvelope
from .result_cache import CacheEntry, ResultCache
from .source_manager import BreachSourceManager, build_fetcher

__all__ = [
    'BrowserSession',
    'EnvelopeMeta',
    'ResultEnvelope',
    'CacheEntry',
    'ResultCache',
    'BreachSourceManager',
    'build_fetcher',
]
