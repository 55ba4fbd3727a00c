"""
Per-strategy configuration lookup.

Every URL resolver strategy owns a configuration resource, named in the main
configuration under ``url_resolver.strategies.<StrategyName>.config_file``.
The resource is a document whose keys provide defaults for request parameters,
most importantly ``url_file``, the default catalog location.
"""
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

URL_FILE = "url_file"


class StrategyConfig:
    """Resolves configuration resources for URL resolver strategies."""

    def __init__(self, config):
        """
        Initialize the strategy configuration.

        Args:
            config: Config instance
        """
        self.config = config

    def config_file_path(self, strategy_name: str) -> str:
        """
        Get the logical path of a strategy's configuration resource.

        Args:
            strategy_name: Strategy name, normally the resolver class name

        Returns:
            Logical path relative to the asset root

        Raises:
            KeyError: If no configuration file is configured for the strategy
        """
        path = self.config.get_strategy_config(strategy_name).get("config_file")
        if not path:
            raise KeyError(f"No configuration file configured for strategy {strategy_name}")
        return path


    def read_configuration(self, context, path: str) -> Dict[str, Any]:
        """
        Read and parse a strategy configuration resource.

        Args:
            context: ResolverContext used to read the resource
            path: Logical path of the resource, as given by ``config_file_path``

        Returns:
            Parsed configuration
        """
        logger.debug(f"Loading strategy configuration from {path}")
        return context.parser.parse(context.reader.read(path), source=path)

    @staticmethod
    def default_catalog_path(configuration: Dict[str, Any]) -> Optional[str]:
        """
        Get the default catalog location from a loaded strategy configuration.

        Args:
            configuration: Result of ``read_configuration``

        Returns:
            Value of the ``url_file`` entry, or None if it is missing
        """
        return configuration.get(URL_FILE)
