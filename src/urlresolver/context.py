import logging
from typing import Optional

from .config import Config
from .document_parser import CatalogParser
from .resources import FileResourceReader, ResourceReader


class ResolverContext:
    """Ambient context used by URL resolvers to locate configuration and resources."""

    def __init__(self, config: Config, reader: Optional[ResourceReader] = None,
                 parser: Optional[CatalogParser] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize the resolver context.

        Args:
            config: Loaded configuration
            reader: Resource reader; defaults to a file reader rooted at the configured asset root
            parser: Document parser for catalogs and strategy configuration files
            logger: Logger resolvers report through
        """
        if config is None:
            raise ValueError("config cannot be None")

        self.config = config
        self.reader = reader if reader is not None else FileResourceReader(config.asset_root)
        self.parser = parser if parser is not None else CatalogParser(config.get("parser", {}))
        self.logger = logger or logging.getLogger("urlresolver")

    @classmethod
    def from_config_path(cls, config_path: str, logger: Optional[logging.Logger] = None) -> "ResolverContext":
        """Create a context from a YAML configuration file."""
        return cls(Config(config_path), logger=logger)
