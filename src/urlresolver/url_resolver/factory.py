"""
Factory for creating URL resolvers.

Strategies are looked up by name in a registry populated at import time, so
callers get a ready resolver without naming its class.
"""
import logging
from typing import Callable, Dict, List, Optional

from .base import UrlResolver
from .indexed_file import IndexedFileUrlResolver
from ..errors import CONSTRUCTION_FAILURES, ConstructionError, UrlResolverError

logger = logging.getLogger(__name__)

ResolverConstructor = Callable[..., UrlResolver]

_RESOLVERS: Dict[str, ResolverConstructor] = {}


def register_url_resolver(name: str, constructor: ResolverConstructor) -> None:
    """
    Register a URL resolver strategy.

    Args:
        name: Strategy name used in configuration
        constructor: Callable taking a ResolverContext and returning a UrlResolver
    """
    if not callable(constructor):
        raise ValueError(f"Constructor for URL resolver {name} is not callable")
    _RESOLVERS[name] = constructor
    logger.debug(f"Registered URL resolver: {name}")


def get_url_resolver_names() -> List[str]:
    """Get the names of all registered URL resolver strategies."""
    return sorted(_RESOLVERS)


def create_url_resolver(context, strategy: Optional[str] = None) -> UrlResolver:
    """
    Create a URL resolver from configuration.

    Args:
        context: ResolverContext
        strategy: Strategy name; defaults to ``url_resolver.type`` in the configuration

    Returns:
        UrlResolver instance

    Raises:
        ConstructionError: If the strategy is unknown or cannot be built
    """
    if context is None:
        raise ConstructionError("Cannot create URL resolver: context cannot be None")

    strategy = strategy or context.config.get_strategy_name()
    constructor = _RESOLVERS.get(strategy)
    if constructor is None:
        message = f"Unsupported URL resolver: {strategy}"
        logger.error(message)
        raise ConstructionError(message)

    try:
        resolver = constructor(context)
    except ConstructionError:
        raise
    except (UrlResolverError,) + CONSTRUCTION_FAILURES as e:
        message = f"Cannot create URL resolver {strategy}: {str(e)}"
        logger.error(message)
        raise ConstructionError(message, e) from e

    logger.info(f"Created URL resolver {strategy}")
    return resolver


register_url_resolver(IndexedFileUrlResolver.strategy_name, IndexedFileUrlResolver)
register_url_resolver("indexed_file", IndexedFileUrlResolver)
