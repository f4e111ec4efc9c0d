"""Maine Attorney General breach notice source"""

from .config import MAINE_CONFIG
from .fetcher import MaineBreachFetcher

__all__ = ['MAINE_CONFIG', 'MaineBreachFetcher']
