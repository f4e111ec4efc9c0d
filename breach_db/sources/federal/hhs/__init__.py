"""HHS OCR breach portal source"""

from .config import HHS_CONFIG
from .fetcher import HHSBreachFetcher

__all__ = ['HHS_CONFIG', 'HHSBreachFetcher']
