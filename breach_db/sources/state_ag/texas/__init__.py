"""Texas Attorney General breach report source"""

from .config import TEXAS_CONFIG
from .fetcher import TexasBreachFetcher

__all__ = ['TEXAS_CONFIG', 'TexasBreachFetcher']
