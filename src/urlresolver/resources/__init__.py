"""Automatically generated __init__.py"""
__all__ = ['DictResourceReader', 'FileResourceReader', 'ResourceReader', 'base', 'file', 'memory']

from . import base
from . import file
from . import memory
from .base import ResourceReader
from .file import FileResourceReader
from .memory import DictResourceReader
