"""
Source Configuration Registry

OBJECTIVE:
Single lookup point for the default configuration of every breach source.
Defaults live next to each fetcher (sources/*/*/config.py); callers may layer
runtime overrides (for example values read from the environment by the API
server) on top of them.

INTEGRATION:
- Used by orchestration/source_manager.py to build fetchers
- Source order here is the order of the result envelope
"""

import copy
import logging
from typing import Any, Dict, List, Optional

from ..sources.base.exceptions import ConfigException
from ..sources.federal.hhs.config import HHS_CONFIG
from ..sources.state_ag.maine.config import MAINE_CONFIG
from ..sources.state_ag.texas.config import TEXAS_CONFIG

logger = logging.getLogger(__name__)


SOURCE_CONFIGS: Dict[str, Dict[str, Any]] = {
    'hhs': HHS_CONFIG,
    'maine': MAINE_CONFIG,
    'texas': TEXAS_CONFIG,
}

SOURCE_NAMES: List[str] = list(SOURCE_CONFIGS)


def get_source_config(source_name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Get the configuration of one source

    Args:
        source_name: Source key ('hhs', 'maine' or 'texas')
        overrides: Values replacing the defaults; None values are ignored

    Returns:
        A fresh configuration dict, safe to modify

    Raises:
        ConfigException: If the source is unknown
    """
    if source_name not in SOURCE_CONFIGS:
        raise ConfigException(f"Unknown source: {source_name}", source_name, config_key='source_name')

    config = copy.deepcopy(SOURCE_CONFIGS[source_name])
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key not in config:
            logger.warning(f"Override {key} is not a known setting of source {source_name}")
        config[key] = value
    return config
