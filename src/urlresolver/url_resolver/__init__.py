"""Automatically generated __init__.py"""
__all__ = ['IndexedFileUrlResolver', 'UrlResolver', 'base', 'create_url_resolver', 'factory',
           'get_url_resolver_names', 'indexed_file', 'register_url_resolver']

from . import base
from . import factory
from . import indexed_file
from .base import UrlResolver
from .factory import create_url_resolver
from .factory import get_url_resolver_names
from .factory import register_url_resolver
from .indexed_file import IndexedFileUrlResolver
