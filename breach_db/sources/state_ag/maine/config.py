"""
Maine Attorney General Breach Notices Configuration

OBJECTIVE: Configure fetching parameters for the Maine AG data breach list
(link list page plus one detail page per notice)

INTEGRATION: Used by MaineBreachFetcher
LOADED BY: config/source_config.py get_source_config('maine')
"""

MAINE_CONFIG = {
    'url': 'https://www.maine.gov/agviewer/content/ag/985235c7-cb95-4be2-8792-a1252b4f8318/list.html',

    # Navigation
    'navigation_timeout_seconds': 60,
    'wait_until': 'networkidle',

    # Extraction
    'content_selector': '#content',
    # Report links are long generated URLs, navigation links are short.
    # Only a proxy for "detail page link": re-check when the list markup changes.
    'min_link_length': 100,
    'max_records': 10,
}
