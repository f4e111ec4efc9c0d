"""
Texas Attorney General Data Security Breach Reports Configuration

OBJECTIVE: Configure fetching parameters for the Texas AG breach report table
(client-side rendered, paginated)

INTEGRATION: Used by TexasBreachFetcher
LOADED BY: config/source_config.py get_source_config('texas')
"""

TEXAS_CONFIG = {
    'url': 'https://oag.my.site.com/datasecuritybreachreport/apex/DataSecurityReportsPage',

    # Navigation
    'navigation_timeout_seconds': 60,
    'wait_until': 'networkidle',
    'render_delay_seconds': 5.0,
    'pagination_delay_seconds': 3.0,

    # Extraction
    'last_page_selector': '#mycdrs_last',
    'table_selector': 'table',
    'max_records': 15,
}
