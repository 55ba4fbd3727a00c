"""Automatically generated __init__.py"""
__all__ = ['Config', 'ConstructionError', 'IndexedFileUrlResolver', 'ResolutionError', 'ResolverContext',
           'StrategyConfig', 'UrlResolver', 'UrlResolverError', 'config', 'configure_logging', 'context',
           'create_url_resolver', 'errors', 'register_url_resolver', 'strategy_config']

from . import config
from . import context
from . import errors
from . import strategy_config
from .config import Config
from .config import configure_logging
from .context import ResolverContext
from .errors import ConstructionError
from .errors import ResolutionError
from .errors import UrlResolverError
from .strategy_config import StrategyConfig
from .url_resolver import IndexedFileUrlResolver
from .url_resolver import UrlResolver
from .url_resolver import create_url_resolver
from .url_resolver import register_url_resolver
