"""
HHS OCR Breach Portal Configuration

OBJECTIVE: Configure fetching parameters for the HHS Office for Civil Rights
breach report (static, server-rendered paginated table)

INTEGRATION: Used by HHSBreachFetcher
LOADED BY: config/source_config.py get_source_config('hhs')
"""

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
)

HHS_CONFIG = {
    'url': 'https://ocrportal.hhs.gov/ocr/breach/breach_report.jsf',

    # Fetching configuration
    'timeout_seconds': 30,
    'user_agent': DEFAULT_USER_AGENT,

    # Extraction
    'table_selector': 'table.ui-datatable-data',
    'max_records': None,
}
