"""
Custom Exceptions for the Breach Disclosure Sources

Fetchers raise these inside fetch_records(); BaseFetcher.run() turns them into
failed SourceResult values. SessionException is the exception: it is fatal to
a whole aggregation run.

- BreachSourceException (base)
  ├── FetchException (network / navigation errors)
  ├── ParseException (unexpected markup, nothing extracted)
  ├── ConfigException (configuration errors)
  └── SessionException (browser session could not be created)
"""

from typing import Optional


class BreachSourceException(Exception):
    """Base exception for all breach source operations"""

    def __init__(self, message: str, source_name: Optional[str] = None):
        self.source_name = source_name
        super().__init__(message)

    def __str__(self):
        if self.source_name:
            return f"[{self.source_name}] {super().__str__()}"
        return super().__str__()


class FetchException(BreachSourceException):
    """Raised when a page or document cannot be retrieved"""

    def __init__(self, message: str, source_name: Optional[str] = None,
                 status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, source_name)


class ParseException(BreachSourceException):
    """Raised when retrieved markup does not yield any records"""


class ConfigException(BreachSourceException):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, source_name: Optional[str] = None,
                 config_key: Optional[str] = None):
        self.config_key = config_key
        super().__init__(message, source_name)


class SessionException(BreachSourceException):
    """Raised when the shared rendering session cannot be started"""
