"""Packing facade choosing between count-based and time-based strategies."""

from typing import Any, Callable, Dict, List, Optional, Sequence

from ..core.enums import PackingStrategy
from ..core.log import get_logger, log_packing_event
from ..core.types import PackingConfig
from ..core.value_objects import Suite, ExecutionBundle
from .count_packer import pack_by_count
from .time_packer import pack_by_time, EstimateLoader

logger = get_logger(__name__)

PackFunction = Callable[..., List[ExecutionBundle]]

STRATEGIES: Dict[PackingStrategy, PackFunction] = {
    PackingStrategy.COUNT: pack_by_count,
    PackingStrategy.TIME: pack_by_time,
}


def select_strategy(config: PackingConfig) -> PackingStrategy:
    """Time-based when an estimates source is configured, count-based otherwise."""
    strategy = config.strategy
    if strategy is PackingStrategy.COUNT:
        logger.info(
            "Could not find Test Time Estimates Json file. Using test counts for packing."
        )
    else:
        logger.info("Found Test Time Estimates Json file. Using the same for packing.")
    return strategy


def pack_tests(
    suites: Sequence[Suite],
    config: PackingConfig,
    loader: Optional[EstimateLoader] = None,
) -> List[ExecutionBundle]:
    """Pack discovered suites into execution bundles.

    Args:
        suites: Discovered suites, in discovery order
        config: Packing configuration
        loader: Optional estimates loader, only used by time-based packing

    Returns:
        Ordered list of bundles for the worker scheduler

    Raises:
        NoSuitesError: If ``suites`` is empty
        EstimateSourceError: If time-based packing cannot load its estimates
    """
    strategy = select_strategy(config)
    kwargs: Dict[str, Any] = {}
    if strategy is PackingStrategy.TIME and loader is not None:
        kwargs["loader"] = loader
    bundles = STRATEGIES[strategy](suites, config, **kwargs)
    log_packing_event(
        logger, "completed", strategy.value, suites=len(suites), bundles=len(bundles)
    )
    return bundles
