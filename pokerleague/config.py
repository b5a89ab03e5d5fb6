"""League scoring configuration management."""

import logging
from functools import lru_cache
from pathlib import Path

from .schemas import ScoringConfig
from .scoring import STRATEGY_CLASSES, ScoringStrategyFactory
from .utils import load_json

logger = logging.getLogger('pokerleague.config')

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'scoring_config.json'


@lru_cache(maxsize=1)
def get_config() -> ScoringConfig:
    """
    Load scoring configuration from data/scoring_config.json.

    Configuration is cached after first load.

    Returns:
        ScoringConfig object with validated settings

    Raises:
        FileNotFoundError: If scoring_config.json doesn't exist
        ValueError: If config file has invalid structure

    Example:
        from pokerleague.config import get_config
        config = get_config()
        print(f"Default strategy: {config.default_strategy}")
    """
    return load_config(DEFAULT_CONFIG_PATH)


def load_config(path: Path | str) -> ScoringConfig:
    """Load and validate a scoring config file without caching."""
    config = load_json(path, schema=ScoringConfig)
    logger.debug(
        f'Loaded scoring config from {path}: default={config.default_strategy}, '
        f'{len(config.strategies)} custom strategies'
    )
    return config


def get_default_strategy() -> str:
    """Get the league's default strategy name from config."""
    return get_config().default_strategy


def get_bounty_point_value() -> int:
    """Get the points awarded per bounty from config."""
    return get_config().bounty_point_value


def build_factory(config: ScoringConfig) -> ScoringStrategyFactory:
    """
    Build a strategy factory with the built-ins plus every configured strategy.

    A configured strategy may reuse a built-in name, in which case it
    replaces the built-in defaults (e.g. a league-specific 'fixed' table).

    Args:
        config: Validated scoring configuration

    Returns:
        ScoringStrategyFactory ready for a PointsCalculationService
    """
    factory = ScoringStrategyFactory()
    for name, settings in config.strategies.items():
        strategy_class = STRATEGY_CLASSES[settings.kind]
        options = settings.options()
        factory.register(name, lambda cls=strategy_class, kwargs=options: cls(**kwargs))
    return factory


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
