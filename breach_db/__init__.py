"""
Breach Disclosure Collection

Collects breach-disclosure records from three public sources with different
page structures and merges them into one result envelope:

- sources/: one fetcher per source plus the shared base infrastructure
- config/: default configuration of every source
- orchestration/: source manager, shared browser session, result cache

Usage:
    from breach_db.orchestration import BreachSourceManager, ResultCache

    cache = ResultCache()
    envelope = await cache.get_or_build(BreachSourceManager().aggregate)
"""

__version__ = "1.0.0"
