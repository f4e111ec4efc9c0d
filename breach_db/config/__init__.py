# Config package for the breach source registry
from .source_config import SOURCE_CONFIGS, SOURCE_NAMES, get_source_config

__all__ = ['SOURCE_CONFIGS', 'SOURCE_NAMES', 'get_source_config']
