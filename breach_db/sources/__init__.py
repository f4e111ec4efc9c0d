"""
Breach Disclosure Sources

Each source lives in its own package with a config.py (default settings) and a
fetcher.py (a BaseFetcher subclass).

Architecture:
- base/: Common infrastructure used by all sources
- federal/hhs/: HHS OCR breach portal (static HTML table)
- state_ag/maine/: Maine AG notices (link list plus detail pages, browser)
- state_ag/texas/: Texas AG reports (client-side rendered table, browser)

Usage:
    from breach_db.sources import HHSBreachFetcher

    result = await HHSBreachFetcher().run()
"""

from .base import BaseFetcher, DataNormalizer, SourceResult, BreachSourceException
from .federal.hhs import HHSBreachFetcher
from .state_ag.maine import MaineBreachFetcher
from .state_ag.texas import TexasBreachFetcher

__all__ = [
    'BaseFetcher',
    'DataNormalizer',
    'SourceResult',
    'BreachSourceException',
    'HHSBreachFetcher',
    'MaineBreachFetcher',
    'TexasBreachFetcher',
]
