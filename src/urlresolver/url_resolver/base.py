"""
Base URL resolver module.

A URL resolver turns request parameters into one or more URLs. Each concrete
strategy names its own configuration resource through ``config_file_path``;
the base class loads that resource when the resolver is built.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional

from ..errors import CONSTRUCTION_FAILURES, ConstructionError
from ..strategy_config import StrategyConfig

logger = logging.getLogger(__name__)


class UrlResolver(ABC):
    """Abstract base class for URL resolvers."""

    def __init__(self, context):
        """
        Build the resolver and load its strategy configuration.

        Args:
            context: ResolverContext used to locate configuration and resources

        Raises:
            ConstructionError: If the context is missing or the configuration
                resource cannot be read or parsed
        """
        if context is None:
            raise ConstructionError(f"Cannot create {type(self).__name__}: context cannot be None")

        self.context = context
        self.logger = getattr(context, "logger", None) or logger

        path = None
        try:
            path = self.config_file_path(context)
            self.configuration = StrategyConfig(context.config).read_configuration(context, path)
        except CONSTRUCTION_FAILURES as e:
            message = f"Cannot create {type(self).__name__}: failed to load configuration {path}: {str(e)}"
            self.logger.error(message)
            raise ConstructionError(message, e) from e

        self.logger.debug(f"Created {type(self).__name__} with configuration {path}")

    @abstractmethod
    def config_file_path(self, context) -> str:
        """
        Get the logical path of this strategy's configuration resource.

        Must not have side effects.

        Args:
            context: ResolverContext

        Returns:
            Logical path relative to the asset root
        """
        pass

    @abstractmethod
    def get_url(self, params: Optional[Dict[str, Any]]) -> str:
        """
        Resolve a request to a single URL.

        Args:
            params: Request parameters

        Returns:
            Resolved URL

        Raises:
            ResolutionError: If no URL can be produced
        """
        pass

    @abstractmethod
    def get_url_array(self, params: Optional[Dict[str, Any]]) -> List[str]:
        """
        Resolve a request to a list of URLs.

        Args:
            params: Request parameters

        Returns:
            Resolved URLs

        Raises:
            ResolutionError: If the URLs cannot be produced
        """
        pass
