"""Automatically generated __init__.py"""
__all__ = ['CatalogParser', 'URLS', 'UrlCatalog', 'base', 'catalog', 'strip_comments']

from . import base
from . import catalog
from .base import CatalogParser
from .base import strip_comments
from .catalog import URLS
from .catalog import UrlCatalog
